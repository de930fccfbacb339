"""Document model shared by the reader, the URL conventions and the generators."""

from __future__ import annotations

import dataclasses
import posixpath
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from cleanurls.rendering.converters import is_html_ext

if TYPE_CHECKING:
    from cleanurls.generators.pagination import Pager


class DocumentKind(str, Enum):
    """Which set of URL rules applies to a document."""

    POST = "post"
    PAGE = "page"
    DOCUMENT = "document"


@dataclass
class Document:
    """A source file that ends up at one URL in the built site.

    Posts, pages and collection documents share this one shape; ``kind``
    selects the rules. Front matter lives in ``data``; everything else is
    filled in by the reader.

    Attributes:
        kind: Post, page or generic collection document
        name: Source file name, e.g. ``about.md``
        dir: URL-style directory of the source file, e.g. ``/`` or ``/docs``
        data: Front matter
        output_ext: Extension the renderer produces, e.g. ``.html`` or ``.xml``
        asset_file: Stylesheet/script source compiled by the renderer
        data_file: YAML data file rendered verbatim
        collection: Collection name for ``DOCUMENT`` kind
        relative_path: Path of the source file below the site source
        date: Publication date (posts)
        slug: Title part of a post file name (``2014-03-01-my-post.md`` -> ``my-post``)
        pager: Pagination state for paginated index pages

    """

    kind: DocumentKind
    name: str
    dir: str = "/"
    data: dict[str, Any] = field(default_factory=dict)
    output_ext: str = ".html"
    asset_file: bool = False
    data_file: bool = False
    collection: str | None = None
    relative_path: str = ""
    date: datetime | None = None
    slug: str | None = None
    pager: Pager | None = None

    @property
    def permalink(self) -> str | None:
        """Front-matter permalink, or None when the document has none."""
        value = self.data.get("permalink")
        return None if value is None else str(value)

    @property
    def basename(self) -> str:
        return posixpath.splitext(self.name)[0]

    @property
    def extname(self) -> str:
        return posixpath.splitext(self.name)[1]

    @property
    def is_html(self) -> bool:
        return is_html_ext(self.output_ext)

    @property
    def is_index(self) -> bool:
        return self.basename == "index"

    @property
    def categories(self) -> list[str]:
        """Front-matter categories, accepting a list or a space-separated string."""
        raw = self.data.get("categories", self.data.get("category"))
        if raw is None:
            return []
        if isinstance(raw, str):
            return raw.split()
        return [str(item) for item in raw]

    def clone(self) -> Document:
        """Return a copy with its own front matter and no pager attached."""
        return dataclasses.replace(self, data=dict(self.data), pager=None)
