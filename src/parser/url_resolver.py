"""Resolve media and link URLs against the analyzed page."""
from __future__ import annotations

import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def resolve_url(base: str, candidate: str | None) -> str | None:
    """Turn a possibly relative URL into an absolute one.

    Absolute http(s) URLs pass through untouched. ``/path`` is joined to the
    base origin; anything else is joined to the base page's directory. A base
    URL that can't be parsed leaves the candidate as it was.
    """
    if not candidate:
        return None
    if candidate.startswith(("http://", "https://")):
        return candidate

    try:
        parts = urlsplit(base)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"not an absolute URL: {base!r}")
    except ValueError as e:
        logger.debug("Could not resolve %r against %r: %s", candidate, base, e)
        return candidate

    origin = f"{parts.scheme}://{parts.netloc}"
    if candidate.startswith("/"):
        return f"{origin}{candidate}"

    path = parts.path or "/"
    directory = path[: path.rfind("/") + 1]
    return f"{origin}{directory}{candidate}"
