"""Clean URL convention.

A document whose permalink ends neither in ``.html`` nor in ``/`` is written
to ``<path>.html`` but linked as ``<path>``. Serving such a site needs a web
server that falls back from ``/path`` to ``/path.html`` (see
``cleanurls server-config``).

Everything here is a pure string function of its arguments. The host
pipeline (:mod:`cleanurls.site.permalinks`) computes the plain template, URL
and destination and passes each through the matching stage below:

1. :func:`select_template` before a page's template is expanded
2. :func:`resolve_post_destination`, :func:`resolve_page_destination` or
   :func:`resolve_document_destination` on the base destination
3. :func:`derive_url` on the base URL
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanurls.data_primitives.document import DocumentKind

if TYPE_CHECKING:
    from cleanurls.data_primitives.document import Document

__all__ = [
    "CLEAN_PAGE_TEMPLATE",
    "CleanUrlConvention",
    "derive_url",
    "is_clean",
    "resolve_document_destination",
    "resolve_page_destination",
    "resolve_post_destination",
    "select_template",
]

CLEAN_PAGE_TEMPLATE = "/:path/:basename"

_INDEX_SUFFIX = "/index.html"
_HTML_EXT = ".html"


def is_clean(permalink: str | None, default_style: str) -> bool:
    """Return whether clean URLs are requested.

    Args:
        permalink: The document's permalink, or None to use ``default_style``
        default_style: The site-wide permalink style

    Examples:
        >>> is_clean("/blog/my-post", "date")
        True
        >>> is_clean("/blog/my-post.html", "date")
        False
        >>> is_clean(None, "/:year/:title/")
        False

    """
    value = default_style if permalink is None else permalink
    return not value.endswith(_HTML_EXT) and not value.endswith("/")


def resolve_post_destination(path: str, permalink: str | None, default_style: str) -> str:
    """Write clean-URL posts to ``<path>.html`` instead of ``<path>/index.html``.

    The path is kept as is when the rewrite would produce another
    ``.../index.html`` (a post directory named ``index``) or when nothing
    precedes ``/index.html``, so applying the resolver twice changes nothing.

    Examples:
        >>> resolve_post_destination("/blog/my-post/index.html", "/blog/my-post", "date")
        '/blog/my-post.html'
        >>> resolve_post_destination("/blog/index/index.html", "/blog/index", "date")
        '/blog/index/index.html'

    """
    if not is_clean(permalink, default_style) or not path.endswith(_INDEX_SUFFIX):
        return path
    stem = path[: -len(_INDEX_SUFFIX)]
    if not stem or stem.endswith(("/", "/index")):
        return path
    return stem + _HTML_EXT


def resolve_page_destination(path: str, *, is_html: bool) -> str:
    """Append ``.html`` to HTML pages whose template dropped the extension."""
    if is_html and not path.endswith(_HTML_EXT):
        return path + _HTML_EXT
    return path


def resolve_document_destination(path: str, output_ext: str, *, asset_file: bool, data_file: bool) -> str:
    """Append the rendered extension to collection documents that lack it.

    Asset and data files keep whatever path the template produced.
    """
    if asset_file or data_file:
        return path
    if path.endswith(output_ext):
        return path
    return path + output_ext


def select_template(
    *,
    is_html: bool,
    is_index: bool,
    permalink: str | None,
    default_template: str,
    default_style: str,
) -> str:
    """Drop the output extension from the template of non-index HTML pages."""
    if is_html and not is_index and is_clean(permalink, default_style):
        return CLEAN_PAGE_TEMPLATE
    return default_template


def derive_url(base_url: str, permalink: str | None, default_style: str) -> str:
    """Collapse a trailing ``/index.html`` to ``/`` for clean-URL documents."""
    if is_clean(permalink, default_style) and base_url.endswith(_INDEX_SUFFIX):
        return base_url[: -len(_INDEX_SUFFIX)] + "/"
    return base_url


class CleanUrlConvention:
    """Applies the clean URL stages to a :class:`Document` by kind.

    Deterministic and stable: the same document, base value and style
    always produce the same result.
    """

    name, version = "clean-urls", "1.0.0"

    def template(self, doc: Document, default_template: str, default_style: str) -> str:
        if doc.kind is not DocumentKind.PAGE:
            return default_template
        return select_template(
            is_html=doc.is_html,
            is_index=doc.is_index,
            permalink=doc.permalink,
            default_template=default_template,
            default_style=default_style,
        )

    def destination(self, doc: Document, path: str, default_style: str) -> str:
        if doc.kind is DocumentKind.POST:
            return resolve_post_destination(path, doc.permalink, default_style)
        if doc.kind is DocumentKind.PAGE:
            return resolve_page_destination(path, is_html=doc.is_html)
        return resolve_document_destination(
            path, doc.output_ext, asset_file=doc.asset_file, data_file=doc.data_file
        )

    def url(self, doc: Document, base_url: str, default_style: str) -> str:
        """Derive the public URL for every kind, not only pages.

        For posts and documents this only matters when the base URL ends in
        ``/index.html``, which a clean permalink never expands to.
        """
        return derive_url(base_url, doc.permalink, default_style)
