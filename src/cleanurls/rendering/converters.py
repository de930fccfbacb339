"""Map source file extensions to what the renderer produces for them."""

from __future__ import annotations

from typing import Final

MARKUP_EXTENSIONS: Final = frozenset({".md", ".markdown", ".mkd", ".mkdn", ".textile", ".html", ".htm"})
HTML_EXTENSIONS: Final = frozenset({".html", ".htm", ".xhtml"})
ASSET_EXTENSIONS: Final = frozenset({".scss", ".sass", ".coffee"})
DATA_EXTENSIONS: Final = frozenset({".yml", ".yaml"})

_CONVERTED_EXTENSIONS: Final = {
    ".scss": ".css",
    ".sass": ".css",
    ".coffee": ".js",
}


def output_ext_for(ext: str) -> str:
    """Return the extension a source file with ``ext`` is rendered to.

    Markup becomes ``.html``, stylesheets ``.css``, CoffeeScript ``.js``; any
    other extension (``.xml``, ``.json``, ``.txt``, ...) is kept as is.
    """
    lowered = ext.lower()
    if lowered in MARKUP_EXTENSIONS:
        return ".html"
    return _CONVERTED_EXTENSIONS.get(lowered, ext)


def is_html_ext(ext: str) -> bool:
    return ext.lower() in HTML_EXTENSIONS


def is_asset_ext(ext: str) -> bool:
    return ext.lower() in ASSET_EXTENSIONS


def is_data_ext(ext: str) -> bool:
    return ext.lower() in DATA_EXTENSIONS
