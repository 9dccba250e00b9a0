"""Input normalization ahead of urllib's URL splitter.

SSH shorthand (``git@host:owner/repo.git``) has no scheme and uses ``:`` as the
path separator, so urlsplit() cannot read it. It is rewritten to
``git://host/owner/repo.git``. Anything else without a scheme is assumed to be
``https://``.

Examples:
    git@github.com:user/repo.git  -> git://github.com/user/repo.git
    github.com/user/repo          -> https://github.com/user/repo
    https://gitlab.com/foo/bar    -> https://gitlab.com/foo/bar
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

SSH_SHORTHAND = re.compile(r"^[A-Za-z0-9._-]+@([a-zA-Z0-9_.-]+):(.*)$")


def is_ssh_shorthand(raw: str) -> bool:
    return SSH_SHORTHAND.match(raw) is not None


def preprocess(raw: str) -> str:
    """Rewrite ``raw`` into a string urlsplit() decomposes into scheme/host/path."""
    spec = raw
    m = SSH_SHORTHAND.match(spec)
    if m:
        spec = f"git://{m.group(1)}/{m.group(2)}"

    if not _has_scheme(spec):
        spec = "https://" + spec
    return spec


def _has_scheme(spec: str) -> bool:
    try:
        return bool(urlsplit(spec).scheme)
    except ValueError:
        return False
