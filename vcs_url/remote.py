"""Clone URL rendering for parsed repositories."""

from __future__ import annotations

from urllib.parse import urlsplit

from .errors import UnknownProtocolError, UnsupportedProtocolError
from .models.types import Protocol, RepositoryDescriptor
from .preprocess import is_ssh_shorthand
from .rules import RuleRegistry, get_registry


def remote(
    descriptor: RepositoryDescriptor,
    protocol: Protocol | str,
    registry: RuleRegistry | None = None,
) -> str:
    """Return a remote URL for ``descriptor`` in the given protocol.

    Known hosts are rendered from the descriptor fields:
        git@github.com:go-git/go-git.git
        https://gitlab.com/commento/docs.git

    Unknown hosts can only echo the original input, and only when it already
    has the requested shape.

    Raises:
        UnknownProtocolError: ``protocol`` is not SSH or HTTPS.
        UnsupportedProtocolError: unknown host whose raw input is not in
            the requested shape.
    """
    proto = _coerce_protocol(protocol, descriptor.raw)
    if registry is None:
        registry = get_registry()

    rule = registry.rule_for_remote(descriptor.host)
    if rule is None:
        return _remote_unknown_host(descriptor, proto)

    if proto is Protocol.SSH:
        return rule.ssh_remote(descriptor)
    return rule.https_remote(descriptor)


def _remote_unknown_host(descriptor: RepositoryDescriptor, proto: Protocol) -> str:
    raw = descriptor.raw
    if proto is Protocol.SSH and is_ssh_shorthand(raw):
        return raw
    if proto is Protocol.HTTPS and _scheme(raw) == "https":
        return raw
    raise UnsupportedProtocolError(raw=raw)


def _coerce_protocol(protocol: Protocol | str, raw: str) -> Protocol:
    if isinstance(protocol, Protocol):
        return protocol
    if isinstance(protocol, str):
        try:
            return Protocol(protocol.lower())
        except ValueError:
            pass
    raise UnknownProtocolError(raw=raw)


def _scheme(raw: str) -> str:
    try:
        return urlsplit(raw).scheme
    except ValueError:
        return ""
