"""Paginate the site's posts across the index page and its clones.

``paginate_path`` is treated as a permalink template rather than a
directory: ``/pages/:num.html`` yields ``/pages/2.html``, ``/pages/3.html``
and so on, and ``/page:num`` with clean URLs yields ``/page2`` served from
``page2.html``. Without clean URLs an extensionless ``paginate_path`` is a
directory again: ``/page:num`` yields ``/page2/index.html``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cleanurls.conventions import is_clean
from cleanurls.data_primitives.document import Document
from cleanurls.rendering.url_template import join_url

if TYPE_CHECKING:
    from cleanurls.site.model import Site

logger = logging.getLogger(__name__)

__all__ = [
    "Pager",
    "PaginatorPage",
    "calculate_pages",
    "first_page_url",
    "generate",
    "paginate",
    "paginate_path",
    "template_page",
]


def calculate_pages(total_items: int, per_page: int) -> int:
    """Return the number of index pages needed for ``total_items``."""
    if per_page < 1:
        msg = f"per_page must be positive, got {per_page}"
        raise ValueError(msg)
    return math.ceil(total_items / per_page)


def _ensure_leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def template_page(site: Site) -> Document | None:
    """Return the page pagination is rendered into.

    That is the HTML index page in the source root, ``index.html`` winning
    over ``index.md`` and friends.
    """
    candidates = [page for page in site.pages if page.is_index and page.is_html and page.dir.strip("/") == ""]
    if not candidates:
        return None
    candidates.sort(key=lambda page: (page.name != "index.html", page.name))
    return candidates[0]


def first_page_url(site: Site) -> str:
    page = template_page(site)
    if page is None:
        return "/"
    return join_url(page.dir, "/")


def paginate_path(site: Site, num: int | None) -> str | None:
    """Return the permalink of index page ``num``.

    Page 1 is the template page itself; later pages expand ``:num`` in the
    configured ``paginate_path``.
    """
    if num is None:
        return None
    if num <= 1:
        return first_page_url(site)
    return _ensure_leading_slash(site.config.paginate_path.replace(":num", str(num), 1))


@dataclass
class Pager:
    """Pagination state exposed to the index page templates."""

    page: int
    per_page: int
    posts: list[Document]
    total_posts: int
    total_pages: int
    previous_page: int | None = None
    previous_page_path: str | None = None
    next_page: int | None = None
    next_page_path: str | None = None

    @classmethod
    def build(cls, site: Site, page: int, all_posts: list[Document], total_pages: int, per_page: int) -> Pager:
        if page > total_pages:
            msg = f"page {page} is out of range for {total_pages} page(s)"
            raise ValueError(msg)

        start = (page - 1) * per_page
        previous_page = page - 1 if page != 1 else None
        next_page = page + 1 if page != total_pages else None
        return cls(
            page=page,
            per_page=per_page,
            posts=all_posts[start : start + per_page],
            total_posts=len(all_posts),
            total_pages=total_pages,
            previous_page=previous_page,
            previous_page_path=paginate_path(site, previous_page),
            next_page=next_page,
            next_page_path=paginate_path(site, next_page),
        )


@dataclass
class PaginatorPage:
    """One index page produced by :func:`paginate`."""

    number: int
    page: Document
    pager: Pager = field(repr=False)


def paginate(site: Site, page: Document) -> list[PaginatorPage]:
    """Spread the site's posts over ``page`` and as many clones as needed.

    Page 1 is ``page`` itself. Every later page is a clone whose directory is
    :func:`paginate_path` and whose permalink is that path joined to the
    original page's directory; clones are appended to ``site.pages``. With
    ``clean_urls`` off, clones of an extensionless path get no permalink and
    render as ``<path>/index.html``.
    """
    all_posts = site.posts_newest_first()
    per_page = site.config.paginate or 1
    total_pages = calculate_pages(len(all_posts), per_page)

    result: list[PaginatorPage] = []
    for num in range(1, total_pages + 1):
        pager = Pager.build(site, num, all_posts, total_pages, per_page)
        if num > 1:
            new_page = page.clone()
            new_page.pager = pager
            path = paginate_path(site, num) or ""
            new_page.dir = path
            if site.config.clean_urls or not is_clean(path, site.permalink_style):
                new_page.data["permalink"] = join_url(page.dir, path)
            site.pages.append(new_page)
            result.append(PaginatorPage(num, new_page, pager))
        else:
            page.pager = pager
            result.append(PaginatorPage(num, page, pager))

    logger.info("Paginated %d post(s) over %d index page(s)", len(all_posts), total_pages)
    return result


def generate(site: Site) -> list[PaginatorPage]:
    """Run pagination when ``paginate`` is configured and an index page exists."""
    if not site.config.pagination_enabled:
        logger.debug("Pagination disabled; skipping")
        return []

    page = template_page(site)
    if page is None:
        logger.warning("Pagination is enabled but the site has no index.html page to paginate")
        return []
    return paginate(site, page)
