"""GitHub rules: web/clone URLs and api.github.com resource paths.

Examples:
    https://github.com/user/repo.git                 -> user/repo
    https://github.com/user/repo/tree/main/docs      -> committish main/docs
    https://github.com/user/repo/releases/tag/v2.4.1 -> committish v2.4.1
    https://api.github.com/repos/user/repo           -> github.com, user/repo
"""

from __future__ import annotations

from urllib.parse import SplitResult

from ..errors import UnknownURLFormatError
from ..models.types import GITHUB, GITHUB_API
from .base import Extraction, HostRule, strip_dot_git, url_host

COMMITTISH_PARTS = frozenset({"commits", "commit", "tree", "branches"})


class GitHubRule(HostRule):
    name = "github"
    hosts = (GITHUB,)
    canonical_host = GITHUB

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        if len(segments) < 3:
            raise UnknownURLFormatError()

        username = segments[1]
        name = strip_dot_git(segments[2])
        result = Extraction(username=username, name=name, full_name=f"{username}/{name}")

        if len(segments) < 5:
            return result

        if segments[3] in COMMITTISH_PARTS:
            result.committish = "/".join(segments[4:])
        elif len(segments) >= 6 and segments[3] == "releases":
            # releases/tag/<tag>
            result.committish = segments[5]
        return result


class GitHubAPIRule(GitHubRule):
    """``api.github.com/repos/<owner>/<repo>/...`` parsed as the public repo."""

    name = "github-api"
    hosts = (GITHUB_API,)
    canonical_host = ""

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        if len(segments) < 2 or segments[1] != "repos":
            raise UnknownURLFormatError()

        result = super().extract(url, segments[1:])
        if self.owns_host(url_host(url)):
            result.host = GITHUB
        return result
