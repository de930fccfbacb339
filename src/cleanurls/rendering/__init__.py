"""Rendering collaborators: output extensions and URL template expansion."""

from cleanurls.rendering.converters import is_asset_ext, is_data_ext, is_html_ext, output_ext_for
from cleanurls.rendering.url_template import (
    escape_path,
    expand_template,
    in_dest_dir,
    join_url,
    sanitize_url,
    unescape_path,
    with_index,
)

__all__ = [
    "escape_path",
    "expand_template",
    "in_dest_dir",
    "is_asset_ext",
    "is_data_ext",
    "is_html_ext",
    "join_url",
    "output_ext_for",
    "sanitize_url",
    "unescape_path",
    "with_index",
]
