"""Host rules for repository URL extraction."""

from .azure import AzureLegacyRule, AzureRule
from .base import Extraction, HostRule
from .bitbucket import BitbucketRule
from .generic import GenericRule
from .github import GitHubAPIRule, GitHubRule
from .gitlab import GitLabRule
from .registry import RuleRegistry, get_registry

__all__ = [
    "Extraction",
    "HostRule",
    "GitHubRule",
    "GitHubAPIRule",
    "BitbucketRule",
    "GitLabRule",
    "AzureRule",
    "AzureLegacyRule",
    "GenericRule",
    "RuleRegistry",
    "get_registry",
]

# Auto-register built-in rules
_reg = get_registry()
_reg.register(GitHubRule())
_reg.register(GitHubAPIRule())
_reg.register(BitbucketRule())
_reg.register(GitLabRule())
_reg.register(AzureRule())
_reg.register(AzureLegacyRule())
_reg.set_fallback(GenericRule())
