"""Expand permalink templates into URLs and map URLs onto the destination tree.

These are pure string functions: no filesystem access, no Path objects. URLs
and destinations are always ``/``-separated.
"""

from __future__ import annotations

import posixpath
import re
from collections.abc import Mapping
from urllib.parse import quote, unquote

_SAFE_PATH_CHARS = "/-._~!$&'()*+,;=:@"
_SLASH_RUN_RE = re.compile(r"/{2,}")
_DOTS_ONLY_RE = re.compile(r"^\.+$")


def escape_path(value: str) -> str:
    """Percent-encode everything that is not valid in a URL path."""
    return quote(value, safe=_SAFE_PATH_CHARS)


def unescape_path(value: str) -> str:
    return unquote(value)


def sanitize_url(url: str) -> str:
    """Normalize an expanded template into a URL.

    - Collapses runs of slashes
    - Drops segments made only of dots (``.``, ``..``)
    - Adds a leading slash
    - Keeps a trailing slash if the input had one

    Examples:
        >>> sanitize_url("//docs/./about.html")
        '/docs/about.html'
        >>> sanitize_url("blog/../my-post/")
        '/blog/my-post/'

    """
    if not url:
        return url

    collapsed = _SLASH_RUN_RE.sub("/", url)
    segments = [segment for segment in collapsed.split("/") if not _DOTS_ONLY_RE.match(segment)]
    result = _SLASH_RUN_RE.sub("/", "/".join(segments))
    if not result.startswith("/"):
        result = "/" + result
    if url.endswith("/") and not result.endswith("/"):
        result += "/"
    return result


def expand_template(template: str, placeholders: Mapping[str, object]) -> str:
    """Substitute ``:name`` tokens in ``template`` and sanitize the result.

    Only names present in ``placeholders`` are replaced; longer names win
    over their prefixes (``:i_month`` before ``:month``). Values are
    URL-escaped; unknown tokens are left untouched.

    Examples:
        >>> expand_template("/:path/:basename:output_ext", {"path": "/docs", "basename": "about", "output_ext": ".html"})
        '/docs/about.html'

    """
    if not placeholders:
        return sanitize_url(template)

    names = sorted(placeholders, key=len, reverse=True)
    pattern = re.compile(":(" + "|".join(re.escape(name) for name in names) + ")")
    expanded = pattern.sub(lambda match: escape_path(str(placeholders[match.group(1)])), template)
    return sanitize_url(expanded)


def join_url(*parts: str) -> str:
    """Join URL fragments with ``/``, collapsing duplicate slashes.

    Unlike :func:`posixpath.join`, an absolute later part does not discard
    earlier ones: ``join_url("/blog", "/page2") == "/blog/page2"``.
    """
    return _SLASH_RUN_RE.sub("/", "/".join(part for part in parts if part))


def in_dest_dir(dest: str, url: str) -> str:
    """Return the path under ``dest`` that ``url`` maps to.

    The URL is unescaped and normalized, so ``..`` cannot climb out of
    ``dest`` and a trailing slash is dropped. An empty ``dest`` yields a
    site-relative path with a leading slash.
    """
    normalized = posixpath.normpath("/" + unescape_path(url).lstrip("/"))
    if normalized == "/":
        normalized = ""
    return dest.rstrip("/") + normalized


def with_index(path: str) -> str:
    """Append ``/index.html`` to a directory-style destination."""
    return f"{path.rstrip('/')}/index.html"
