"""Bitbucket Cloud rule."""

from __future__ import annotations

from urllib.parse import SplitResult

from ..errors import UnknownURLFormatError
from ..models.types import BITBUCKET
from .base import Extraction, HostRule, strip_dot_git

COMMITTISH_PARTS = frozenset({"src", "commits", "branch"})


class BitbucketRule(HostRule):
    name = "bitbucket"
    hosts = (BITBUCKET,)
    canonical_host = BITBUCKET

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        if len(segments) < 3:
            raise UnknownURLFormatError()

        username = segments[1]
        name = strip_dot_git(segments[2])
        result = Extraction(username=username, name=name, full_name=f"{username}/{name}")

        # Only the single segment after src/commits/branch is the ref;
        # anything past it under src/ is a file path.
        if len(segments) >= 5 and segments[3] in COMMITTISH_PARTS:
            result.committish = segments[4]
        return result
