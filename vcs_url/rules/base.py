"""Base rule interface for host-specific URL extraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import SplitResult

from ..models.types import Kind, RepositoryDescriptor


@dataclass
class Extraction:
    """Fields a rule pulled out of a URL.

    ``host`` and ``kind`` are None when the rule keeps the dispatcher's values.
    """

    username: str = ""
    name: str = ""
    full_name: str = ""
    committish: str = ""
    host: str | None = None
    kind: Kind | None = None
    id: str = ""


class HostRule(ABC):
    """Turns the path of a decomposed URL into repository fields.

    A rule handles the hosts listed in ``hosts`` (exact match) and any host
    ending with one of ``suffixes``. Rules with a ``canonical_host`` own remote
    rendering for descriptors carrying that host.
    """

    name: ClassVar[str] = ""
    hosts: ClassVar[tuple[str, ...]] = ()
    suffixes: ClassVar[tuple[str, ...]] = ()
    canonical_host: ClassVar[str] = ""
    kind: ClassVar[Kind] = Kind.GIT

    @abstractmethod
    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        """Populate fields from ``segments`` (the path split on ``/``).

        Index 0 of ``segments`` is the empty string before the leading slash.
        Raises a VCSURLError subclass when the path has the wrong shape.
        """

    def owns_host(self, host: str) -> bool:
        """True for hosts this rule serves directly, as opposed to aliases."""
        return host in self.hosts or any(host.endswith(s) for s in self.suffixes)

    # --- Remote rendering ---

    def ssh_remote(self, descriptor: RepositoryDescriptor) -> str:
        return f"git@{descriptor.host}:{descriptor.username}/{descriptor.name}.git"

    def https_remote(self, descriptor: RepositoryDescriptor) -> str:
        return f"https://{descriptor.host}/{descriptor.username}/{descriptor.name}.git"


def url_host(url: SplitResult) -> str:
    """Host (with port, if any) without credentials."""
    return url.netloc.rpartition("@")[2]


def strip_dot_git(segment: str) -> str:
    """Remove one trailing ``.git``."""
    if segment.endswith(".git"):
        return segment[: -len(".git")]
    return segment
