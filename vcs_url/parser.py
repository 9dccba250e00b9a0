"""Repository reference parsing.

raw string -> preprocess() -> urlsplit() -> host rule -> RepositoryDescriptor
"""

from __future__ import annotations

import logging
from urllib.parse import unquote, urlsplit

from .errors import EmptyInputError, UnableToParseError, UnknownURLFormatError, VCSURLError
from .models.types import RepositoryDescriptor
from .preprocess import preprocess
from .rules import RuleRegistry, get_registry
from .rules.base import url_host

logger = logging.getLogger(__name__)


def parse(raw: str, registry: RuleRegistry | None = None) -> RepositoryDescriptor:
    """Parse a string that resembles a VCS repository URL.

    Accepts HTTPS/HTTP, ``git://``, ``ssh://``, ``git+ssh://`` URLs, SSH
    shorthand (``git@host:owner/repo.git``) and scheme-less ``host/owner/repo``.

    Raises:
        VCSURLError: subclass naming why ``raw`` could not be parsed. The
            original input is available as ``err.raw``.
    """
    if len(raw) == 0:
        raise EmptyInputError(raw=raw)

    if registry is None:
        registry = get_registry()
    spec = preprocess(raw)
    try:
        url = urlsplit(spec)
    except ValueError as exc:
        raise UnknownURLFormatError(str(exc), raw=raw) from exc

    host = url_host(url)
    kind = registry.kind_for_host(host)
    rule = registry.rule_for_host(host)
    logger.debug("Parsing %r with rule %s (host=%s)", raw, rule.name, host)

    try:
        extraction = rule.extract(url, unquote(url.path).split("/"))
    except VCSURLError as exc:
        logger.debug("Rule %s rejected %r: %s", rule.name, raw, exc.reason)
        raise exc.with_raw(raw) from exc

    if not extraction.name or not extraction.full_name:
        raise UnableToParseError(raw=raw)

    host = extraction.host or host
    if extraction.kind is not None:
        kind = extraction.kind
    return RepositoryDescriptor(
        id=extraction.id or f"{host}/{extraction.full_name}",
        kind=kind,
        host=host,
        username=extraction.username,
        name=extraction.name,
        full_name=extraction.full_name,
        committish=extraction.committish,
        raw=raw,
    )
