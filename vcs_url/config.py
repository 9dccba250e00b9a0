"""Configuration management for vcs-url."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from . import get_vcsurl_home
from .rules import RuleRegistry, get_registry


@dataclass
class VCSURLConfig:
    """vcs-url configuration."""

    # Remote rendering
    default_protocol: str = "https"  # "https" or "ssh"

    # Logging
    log_level: str = "WARNING"

    # Extra hosts routed to a built-in rule, e.g. {"gitlab.example.com": "gitlab"}
    host_aliases: dict[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, config_path: Path | None = None) -> VCSURLConfig:
        """Load configuration from YAML file with environment variable overrides."""
        if config_path is None:
            config_path = get_vcsurl_home() / "config.yaml"

        config_dict: dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

        # Environment variable overrides (VCSURL_ prefix)
        env_map = {
            "default_protocol": ("VCSURL_DEFAULT_PROTOCOL", str),
            "log_level": ("VCSURL_LOG_LEVEL", str),
            "host_aliases": ("VCSURL_HOST_ALIASES", _parse_aliases),
        }

        for field_name, (env_var, converter) in env_map.items():
            value = os.getenv(env_var)
            if value is not None:
                config_dict[field_name] = converter(value)

        # Only pass known fields
        known = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = get_vcsurl_home() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        from dataclasses import asdict

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(asdict(self), f, default_flow_style=False, allow_unicode=True)

    def build_registry(self, base: RuleRegistry | None = None) -> RuleRegistry:
        """Copy of the rule registry with ``host_aliases`` applied.

        Raises ValueError if an alias names a rule that does not exist.
        """
        registry = (base or get_registry()).copy()
        for host, rule_name in self.host_aliases.items():
            registry.alias(host, rule_name)
        return registry


def _parse_aliases(value: str) -> dict[str, str]:
    """Parse ``host=rule,host=rule``."""
    aliases: dict[str, str] = {}
    for item in value.split(","):
        host, sep, rule_name = item.partition("=")
        if not sep:
            continue
        aliases[host.strip()] = rule_name.strip()
    return aliases


def get_default_config_content() -> str:
    """Get default config file content for `vcsurl init`."""
    return """\
# vcs-url configuration
default_protocol: "https"              # Protocol for `vcsurl remote` when --protocol is omitted
log_level: "WARNING"                   # DEBUG shows which host rule handled each URL

# Extra hosts handled by a built-in rule (github, gitlab, bitbucket, azure, azure-legacy, generic)
host_aliases: {}
#  gitlab.example.com: gitlab
"""
