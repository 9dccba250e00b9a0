"""Rule registry mapping hosts to extraction rules."""

from __future__ import annotations

import logging

from ..models.types import KIND_BY_HOST, Kind
from .base import HostRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Registry of host rules, keyed by host.

    Hosts without a rule fall through to the fallback rule.
    """

    def __init__(self, fallback: HostRule | None = None) -> None:
        self._rules: dict[str, HostRule] = {}
        self._by_host: dict[str, HostRule] = {}
        self._by_suffix: dict[str, HostRule] = {}
        self._by_canonical: dict[str, HostRule] = {}
        self._kinds: dict[str, Kind] = dict(KIND_BY_HOST)
        self._fallback = fallback

    def register(self, rule: HostRule) -> None:
        self._rules[rule.name] = rule
        for host in rule.hosts:
            self._by_host[host] = rule
            self._kinds.setdefault(host, rule.kind)
        for suffix in rule.suffixes:
            self._by_suffix[suffix] = rule
        if rule.canonical_host:
            self._by_canonical.setdefault(rule.canonical_host, rule)
        logger.debug("Registered rule %s for %s", rule.name, rule.hosts or "fallback")

    def set_fallback(self, rule: HostRule) -> None:
        self._rules[rule.name] = rule
        self._fallback = rule

    def alias(self, host: str, rule_name: str) -> None:
        """Route ``host`` to the registered rule called ``rule_name``."""
        rule = self._rules.get(rule_name)
        if rule is None:
            raise ValueError(
                f"Unknown rule {rule_name!r} for host {host!r}; "
                f"expected one of {', '.join(sorted(self._rules))}"
            )
        self._by_host[host] = rule
        if rule is not self._fallback:
            self._by_canonical[host] = rule
            self._kinds[host] = rule.kind
        logger.debug("Aliased host %s to rule %s", host, rule_name)

    def get(self, name: str) -> HostRule | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return list(self._rules.keys())

    def rule_for_host(self, host: str) -> HostRule:
        """Pick the extraction rule for a host: exact, then suffix, then fallback."""
        rule = self._by_host.get(host)
        if rule is not None:
            return rule
        for suffix, rule in self._by_suffix.items():
            if host.endswith(suffix):
                return rule
        if self._fallback is None:
            raise RuntimeError("RuleRegistry has no fallback rule set")
        return self._fallback

    def rule_for_remote(self, host: str) -> HostRule | None:
        """The rule rendering remotes for a canonical host, or None if unknown."""
        return self._by_canonical.get(host)

    def kind_for_host(self, host: str) -> Kind:
        return self._kinds.get(host, Kind.UNKNOWN)

    def copy(self) -> RuleRegistry:
        clone = RuleRegistry(self._fallback)
        clone._rules = dict(self._rules)
        clone._by_host = dict(self._by_host)
        clone._by_suffix = dict(self._by_suffix)
        clone._by_canonical = dict(self._by_canonical)
        clone._kinds = dict(self._kinds)
        return clone


# Singleton
_registry = RuleRegistry()


def get_registry() -> RuleRegistry:
    return _registry
