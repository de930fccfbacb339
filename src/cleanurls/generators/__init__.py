"""Generators that add synthetic documents to a site before output."""

from cleanurls.generators.pagination import Pager, PaginatorPage, calculate_pages, paginate, paginate_path

__all__ = [
    "Pager",
    "PaginatorPage",
    "calculate_pages",
    "paginate",
    "paginate_path",
]
