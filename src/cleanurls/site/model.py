"""The in-memory site a build works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from cleanurls.config.settings import SiteConfig
from cleanurls.data_primitives.document import Document


@dataclass
class Site:
    """Configuration plus every document read from the source tree.

    ``pages`` is the only collection mutated during a build: pagination
    appends its generated index pages to it.
    """

    config: SiteConfig = field(default_factory=SiteConfig)
    source: Path = field(default_factory=Path.cwd)
    pages: list[Document] = field(default_factory=list)
    posts: list[Document] = field(default_factory=list)
    documents: list[Document] = field(default_factory=list)
    generated: bool = field(default=False, repr=False)

    @property
    def permalink_style(self) -> str:
        return self.config.permalink

    def posts_newest_first(self) -> list[Document]:
        return sorted(self.posts, key=lambda post: (post.date or datetime.min, post.name), reverse=True)

    def output_documents(self) -> list[Document]:
        """Documents of collections configured with ``output = true``."""
        collections = self.config.collections
        return [
            doc
            for doc in self.documents
            if doc.collection in collections and collections[doc.collection].output
        ]
