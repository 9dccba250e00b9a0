"""vcs-url — normalize repository URLs into owner, name, host and ref."""

from pathlib import Path

from .errors import (
    EmptyInputError,
    EmptyPathError,
    UnableToParseError,
    UnknownProtocolError,
    UnknownURLFormatError,
    UnsupportedProtocolError,
    VCSURLError,
)
from .models.types import Kind, Protocol, RepositoryDescriptor
from .parser import parse
from .remote import remote

__version__ = "0.1.0"

__all__ = [
    "parse",
    "remote",
    "Kind",
    "Protocol",
    "RepositoryDescriptor",
    "VCSURLError",
    "EmptyInputError",
    "EmptyPathError",
    "UnknownURLFormatError",
    "UnableToParseError",
    "UnknownProtocolError",
    "UnsupportedProtocolError",
]


def get_vcsurl_home() -> Path:
    """Get the global vcs-url home directory (~/.vcsurl/)."""
    return Path.home() / ".vcsurl"
