"""Azure DevOps rules.

Azure repositories live under an organization and a project, so the owner is
always ``<org>/<project>``.

Azure (dev.azure.com):
    git@ssh.dev.azure.com:v3/org/project/repo
    https://dev.azure.com/org/project/_git/repo

Azure legacy (visualstudio.com):
    git@vs-ssh.visualstudio.com:v3/org/project/repo
    https://org.visualstudio.com/project/_git/repo
"""

from __future__ import annotations

from urllib.parse import SplitResult, quote

from ..errors import UnknownURLFormatError
from ..models.types import (
    AZURE,
    AZURE_LEGACY,
    AZURE_LEGACY_SSH,
    AZURE_SSH,
    RepositoryDescriptor,
)
from .base import Extraction, HostRule, strip_dot_git, url_host

SSH_VERSION = "v3"
GIT_MARKER = "_git"



class AzureRule(HostRule):
    name = "azure"
    hosts = (AZURE, AZURE_SSH)
    canonical_host = AZURE
    ssh_host = AZURE_SSH

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        if len(segments) < 3:
            raise UnknownURLFormatError()

        # Aliased hosts keep their own name
        host = self.canonical_host if self.owns_host(url_host(url)) else None

        # /v3/<org>/<project>/<repo>
        if len(segments) == 5 and segments[1] == SSH_VERSION:
            return self._fields(segments[2], segments[3], segments[4], host)

        # /<org>/<project>/_git/<repo>
        if len(segments) >= 5 and segments[3] == GIT_MARKER:
            return self._fields(segments[1], segments[2], segments[4], host)

        raise UnknownURLFormatError()

    def _fields(self, org: str, project: str, repo: str, host: str | None) -> Extraction:
        if not (org and project):
            raise UnknownURLFormatError()
        username = f"{org}/{project}"
        name = strip_dot_git(repo)
        return Extraction(
            username=username,
            name=name,
            full_name=f"{username}/{name}",
            host=host,
            kind=self.kind,
        )

    def ssh_remote(self, descriptor: RepositoryDescriptor) -> str:
        host = self.ssh_host if descriptor.host == self.canonical_host else descriptor.host
        org, project = _split_owner(descriptor.username)
        return f"git@{host}:{SSH_VERSION}/{org}/{quote(project)}/{descriptor.name}"

    def https_remote(self, descriptor: RepositoryDescriptor) -> str:
        org, project = _split_owner(descriptor.username)
        return f"https://{descriptor.host}/{org}/{quote(project)}/{GIT_MARKER}/{descriptor.name}"


class AzureLegacyRule(AzureRule):
    """Pre-2018 ``*.visualstudio.com`` accounts, where the org is the subdomain."""

    name = "azure-legacy"
    hosts = (AZURE_LEGACY_SSH, AZURE_LEGACY)
    suffixes = ("." + AZURE_LEGACY,)
    canonical_host = AZURE_LEGACY
    ssh_host = AZURE_LEGACY_SSH

    def extract(self, url: SplitResult, segments: list[str]) -> Extraction:
        host = url_host(url)
        org = host.removesuffix("." + AZURE_LEGACY)
        if org == host or host in self.hosts:
            return super().extract(url, segments)

        # https://<org>.visualstudio.com/<project>/_git/<repo>
        if len(segments) >= 4 and segments[2] == GIT_MARKER:
            return self._fields(org, segments[1], segments[3], self.canonical_host)
        raise UnknownURLFormatError()

    def https_remote(self, descriptor: RepositoryDescriptor) -> str:
        if descriptor.host != self.canonical_host:
            return super().https_remote(descriptor)
        org, project = _split_owner(descriptor.username)
        return f"https://{org}.{AZURE_LEGACY}/{quote(project)}/{GIT_MARKER}/{descriptor.name}"


def _split_owner(username: str) -> tuple[str, str]:
    org, _, project = username.partition("/")
    return org, project
