"""Template, URL and destination of each document in a site.

The plain rules (what a site without clean URLs would produce) live here;
when ``clean_urls`` is enabled each result is handed to the
:class:`~cleanurls.conventions.CleanUrlConvention` stage that adjusts it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from cleanurls.conventions import CleanUrlConvention
from cleanurls.data_primitives.document import Document, DocumentKind
from cleanurls.rendering.url_template import expand_template, in_dest_dir, with_index
from cleanurls.site.exceptions import MissingPostDateError
from cleanurls.utils.slugs import slugify

if TYPE_CHECKING:
    from cleanurls.site.model import Site

logger = logging.getLogger(__name__)

__all__ = [
    "POST_STYLE_TEMPLATES",
    "base_destination",
    "base_url",
    "destination_for",
    "template_for",
    "url_for",
    "url_placeholders",
]

PAGE_TEMPLATE: Final = "/:path/:basename:output_ext"
PRETTY_PAGE_TEMPLATE: Final = "/:path/:basename/"
PRETTY_INDEX_TEMPLATE: Final = "/:path/"
DOCUMENT_TEMPLATE: Final = "/:collection/:path:output_ext"

POST_STYLE_TEMPLATES: Final = {
    "date": "/:categories/:year/:month/:day/:title.html",
    "pretty": "/:categories/:year/:month/:day/:title/",
    "ordinal": "/:categories/:year/:y_day/:title.html",
    "none": "/:categories/:title.html",
}

_convention = CleanUrlConvention()


def _default_style(site: Site) -> str:
    # "pretty" names directory URLs; every other style name counts as clean.
    if site.permalink_style == "pretty":
        return POST_STYLE_TEMPLATES["pretty"]
    return site.permalink_style


def _page_template(page: Document, site: Site) -> str:
    if site.permalink_style == "pretty":
        if page.is_index and page.is_html:
            return PRETTY_INDEX_TEMPLATE
        if page.is_html:
            return PRETTY_PAGE_TEMPLATE
        return PAGE_TEMPLATE
    if site.config.clean_urls:
        return _convention.template(page, PAGE_TEMPLATE, site.permalink_style)
    return PAGE_TEMPLATE


def _document_template(doc: Document, site: Site) -> str:
    settings = site.config.collections.get(doc.collection or "")
    if settings is not None and settings.permalink:
        return settings.permalink
    return DOCUMENT_TEMPLATE


def template_for(doc: Document, site: Site) -> str:
    """Return the URL template used when ``doc`` has no permalink of its own."""
    if doc.kind is DocumentKind.POST:
        return POST_STYLE_TEMPLATES.get(site.permalink_style, site.permalink_style)
    if doc.kind is DocumentKind.PAGE:
        return _page_template(doc, site)
    return _document_template(doc, site)


def _post_placeholders(post: Document) -> dict[str, str]:
    if post.date is None:
        raise MissingPostDateError(post.name)
    date = post.date
    categories = []
    for category in post.categories:
        lowered = category.lower()
        if lowered not in categories:
            categories.append(lowered)
    return {
        "year": date.strftime("%Y"),
        "month": date.strftime("%m"),
        "day": date.strftime("%d"),
        "i_month": str(date.month),
        "i_day": str(date.day),
        "short_year": date.strftime("%y"),
        "y_day": date.strftime("%j"),
        "title": str(post.data.get("slug") or post.slug or post.basename),
        "categories": "/".join(categories),
        "output_ext": post.output_ext,
    }


def _document_placeholders(doc: Document) -> dict[str, str]:
    collection = doc.collection or ""
    relative = doc.relative_path or doc.name
    prefix = f"_{collection}/"
    if relative.startswith(prefix):
        relative = relative[len(prefix) :]
    stem = relative[: -len(doc.extname)] if doc.extname else relative
    return {
        "collection": collection,
        "path": "/" + stem,
        "name": slugify(doc.basename),
        "title": slugify(str(doc.data.get("title") or doc.basename)),
        "output_ext": doc.output_ext,
    }


def url_placeholders(doc: Document) -> dict[str, str]:
    """Values for the ``:name`` tokens of ``doc``'s template or permalink."""
    if doc.kind is DocumentKind.POST:
        return _post_placeholders(doc)
    if doc.kind is DocumentKind.PAGE:
        return {"path": doc.dir, "basename": doc.basename, "output_ext": doc.output_ext}
    return _document_placeholders(doc)


def base_url(doc: Document, site: Site) -> str:
    """URL before the clean-URL stage: the expanded permalink or template."""
    template = doc.permalink if doc.permalink is not None else template_for(doc, site)
    return expand_template(template, url_placeholders(doc))


def url_for(doc: Document, site: Site) -> str:
    """Public URL of ``doc``."""
    url = base_url(doc, site)
    if site.config.clean_urls:
        return _convention.url(doc, url, _default_style(site))
    return url


def base_destination(doc: Document, site: Site, dest: str) -> str:
    """Destination before the clean-URL stage.

    Posts always get a file name: anything not ending in ``.html``/``.htm``
    becomes ``<url>/index.html``. Pages and documents only do so when their
    URL ends in ``/``.
    """
    url = base_url(doc, site)
    path = in_dest_dir(dest, url)
    if doc.kind is DocumentKind.POST:
        if not path.endswith((".html", ".htm")):
            path = with_index(path)
    elif url.endswith("/"):
        path = with_index(path)
    return path


def destination_for(doc: Document, site: Site, dest: str) -> str:
    """Path under ``dest`` that ``doc`` is written to."""
    path = base_destination(doc, site, dest)
    if site.config.clean_urls:
        resolved = _convention.destination(doc, path, _default_style(site))
        if resolved != path:
            logger.debug("Clean URL destination for %s: %s -> %s", doc.name, path, resolved)
        return resolved
    return path
