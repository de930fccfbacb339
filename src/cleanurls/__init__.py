"""cleanurls: extensionless permalinks for static-site builds."""

from cleanurls.conventions import (
    CleanUrlConvention,
    derive_url,
    is_clean,
    resolve_document_destination,
    resolve_page_destination,
    resolve_post_destination,
    select_template,
)

__version__ = "1.0.0"
__all__ = [
    "CleanUrlConvention",
    "derive_url",
    "is_clean",
    "resolve_document_destination",
    "resolve_page_destination",
    "resolve_post_destination",
    "select_template",
]
