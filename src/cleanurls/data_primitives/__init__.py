"""Fundamental data primitives flowing through a site build."""

from cleanurls.data_primitives.document import Document, DocumentKind

__all__ = [
    "Document",
    "DocumentKind",
]
