"""Errors raised by parse() and remote().

Every error carries a short machine-readable ``kind`` and, once it leaves
parse(), the raw input that caused it.
"""

from __future__ import annotations


class VCSURLError(ValueError):
    """Base vcs-url error."""

    kind = "error"
    op = "parse"
    reason = "invalid repository reference"

    def __init__(self, reason: str | None = None, raw: str | None = None) -> None:
        self.reason = reason or self.reason
        self.raw = raw
        super().__init__(self._format())

    def _format(self) -> str:
        if self.raw is None:
            return self.reason
        return f"{self.op} {self.raw!r}: {self.reason}"

    def with_raw(self, raw: str) -> VCSURLError:
        """Return a copy of this error bound to the original input."""
        return type(self)(self.reason, raw=raw)


class EmptyInputError(VCSURLError):
    kind = "empty_input"
    reason = "empty URL"


class UnknownURLFormatError(VCSURLError):
    kind = "unknown_url_format"
    reason = "unknown URL format"


class UnableToParseError(VCSURLError):
    kind = "unable_to_parse"
    reason = "unable to determine name or full name"


class EmptyPathError(UnableToParseError):
    """No path left to take a repository name from."""

    kind = "empty_path"
    reason = "empty path in URL"


class UnknownProtocolError(VCSURLError):
    kind = "unknown_protocol"
    op = "remote"
    reason = "remote protocol should be SSH or HTTPS"


class UnsupportedProtocolError(VCSURLError):
    kind = "unsupported_protocol"
    op = "remote"
    reason = "unsupported remote protocol"
