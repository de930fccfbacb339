"""Compute where every document of a site is written and linked."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from cleanurls.data_primitives.document import Document
from cleanurls.generators import pagination
from cleanurls.site.model import Site
from cleanurls.site.permalinks import destination_for, url_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OutputEntry:
    """One document's place in the built site."""

    document: Document
    url: str
    destination: str


def run_generators(site: Site) -> None:
    """Run the build-time generators once per site."""
    if site.generated:
        logger.debug("Generators already ran for %s", site.source)
        return
    pagination.generate(site)
    site.generated = True


def build_output_plan(site: Site, dest: str | None = None) -> list[OutputEntry]:
    """Return the URL and destination of every page, post and output document.

    Args:
        site: Site read from its source tree
        dest: Destination root; defaults to the configured ``destination``.
            Pass ``""`` for site-relative paths.

    """
    run_generators(site)
    root = site.config.destination if dest is None else dest

    entries = [
        OutputEntry(document=doc, url=url_for(doc, site), destination=destination_for(doc, site, root))
        for doc in (*site.pages, *site.posts, *site.output_documents())
    ]

    kinds = Counter(entry.document.kind.value for entry in entries)
    logger.info(
        "Planned %d output file(s): %s",
        len(entries),
        ", ".join(f"{count} {kind}(s)" for kind, count in sorted(kinds.items())) or "nothing to write",
    )
    return entries
