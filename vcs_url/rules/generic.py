"""Fallback rule for hosts without dedicated handling.

The whole path (minus the leading slash and ``.git``) becomes the full name
and its last segment the name. No owner or committish is derived.

Examples:
    git://git.savannah.gnu.org/bash.git      -> bash
    https://git.company.com/team/project.git -> team/project (name: project)
"""

from __future__ import annotations

import posixpath
from urllib.parse import SplitResult

from ..errors import EmptyPathError, UnableToParseError
from ..models.types import Kind
from .base import Extraction, HostRule, strip_dot_git


class GenericRule(HostRule):
    name = "generic"
    kind = Kind.UNKNOWN

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        path = "/".join(segments)
        if not path:
            raise EmptyPathError()

        path = strip_dot_git(path[1:].rstrip("/"))
        name = posixpath.basename(path)
        result = Extraction(name=name, full_name=path)

        # Heuristic: any "git" in the URL marks it as a git remote
        if "git" in url.geturl():
            result.kind = Kind.GIT

        if not result.name or not result.full_name:
            raise UnableToParseError()
        return result
