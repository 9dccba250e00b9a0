"""GitLab rule.

GitLab nests projects under any number of groups, so the owner can span
several segments. Everything after a literal ``-`` segment addresses an
object inside the project (``/-/tree/main``, ``/-/tags/v1``).

Examples:
    https://gitlab.com/foo/bar                  -> foo / bar
    https://gitlab.com/foo/bar/qux              -> foo/bar / qux
    https://gitlab.com/foo/qux/bar/-/tags/baz   -> foo/qux / bar, committish baz
"""

from __future__ import annotations

from urllib.parse import SplitResult

from ..errors import UnknownURLFormatError
from ..models.types import GITLAB
from .base import Extraction, HostRule, strip_dot_git

OBJECT_MARKER = "-"
COMMITTISH_PARTS = frozenset({"tags", "commit", "tree"})


class GitLabRule(HostRule):
    name = "gitlab"
    hosts = (GITLAB,)
    canonical_host = GITLAB

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        if len(segments) < 3:
            raise UnknownURLFormatError()

        marker = _marker_index(segments)
        # Need at least an owner and a name ahead of the marker
        if marker < 3:
            raise UnknownURLFormatError()

        username = "/".join(segments[1 : marker - 1])
        name = strip_dot_git(segments[marker - 1])
        result = Extraction(username=username, name=name, full_name=f"{username}/{name}")

        if len(segments) >= marker + 2 and segments[marker + 1] in COMMITTISH_PARTS:
            result.committish = "/".join(segments[marker + 2 :])
        return result


def _marker_index(segments: list[str]) -> int:
    """Index of the first ``-`` segment, or len(segments) when absent."""
    try:
        return segments.index(OBJECT_MARKER)
    except ValueError:
        return len(segments)
