"""Core domain models for vcs-url.

A RepositoryDescriptor is the single output of parsing. It is built once per
input string and never mutated afterwards.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..rules.registry import RuleRegistry

# --- Enums ---


class Kind(StrEnum):
    GIT = "git"
    UNKNOWN = ""

    @classmethod
    def from_value(cls, value: str | bytes) -> Kind:
        """Decode a stored kind (str or raw column bytes) back into a Kind.

        Unrecognized strings decode to UNKNOWN.
        """
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        if not isinstance(value, str):
            raise TypeError(f"{cls.__name__}.from_value failed: {value!r}")
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class Protocol(StrEnum):
    SSH = "ssh"
    HTTPS = "https"


# --- Hosts ---

GITHUB = "github.com"
GITHUB_API = "api.github.com"
GITLAB = "gitlab.com"
BITBUCKET = "bitbucket.org"
AZURE = "dev.azure.com"
AZURE_SSH = "ssh.dev.azure.com"
AZURE_LEGACY = "visualstudio.com"
AZURE_LEGACY_SSH = "vs-ssh.visualstudio.com"

KIND_BY_HOST: MappingProxyType[str, Kind] = MappingProxyType(
    {
        GITHUB: Kind.GIT,
        GITHUB_API: Kind.GIT,
        GITLAB: Kind.GIT,
        BITBUCKET: Kind.GIT,
        AZURE: Kind.GIT,
        AZURE_SSH: Kind.GIT,
        AZURE_LEGACY: Kind.GIT,
        AZURE_LEGACY_SSH: Kind.GIT,
    }
)


# --- Core Models ---


class RepositoryDescriptor(BaseModel):
    """A repository reference reduced to owner, name, host and ref."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: Kind = Kind.UNKNOWN
    host: str
    username: str = ""
    name: str
    full_name: str
    committish: str = ""  # branch, tag or commit embedded in the URL
    raw: str

    def remote(
        self, protocol: Protocol | str, registry: RuleRegistry | None = None
    ) -> str:
        """Render a clone URL for this repository. See vcs_url.remote.remote."""
        from ..remote import remote

        return remote(self, protocol, registry=registry)
