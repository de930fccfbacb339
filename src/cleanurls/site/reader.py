"""Read a site's source tree into a :class:`Site`.

Layout (Jekyll-style):
- ``_posts/YYYY-MM-DD-title.ext``: posts
- ``_<collection>/...``: documents of collections named in the config
- other ``_*`` directories and dotfiles: ignored (layouts, includes, data)
- everything else with front matter: pages; files without it are static
  files and are left to the copier
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path, PurePosixPath
from typing import Any

import frontmatter
import yaml

from cleanurls.config.settings import CONFIG_FILENAMES, SiteConfig, load_site_config
from cleanurls.data_primitives.document import Document, DocumentKind
from cleanurls.rendering.converters import is_asset_ext, is_data_ext, output_ext_for
from cleanurls.site.exceptions import InvalidPostFilenameError, SourceReadError
from cleanurls.site.model import Site

logger = logging.getLogger(__name__)

POSTS_DIR = "_posts"
_POST_FILENAME_RE = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>.+)\.[^.]+$")
_FRONT_MATTER_MARKER = b"---"


def _has_front_matter(path: Path) -> bool:
    with path.open("rb") as handle:
        return handle.read(len(_FRONT_MATTER_MARKER)) == _FRONT_MATTER_MARKER


def _load_front_matter(path: Path) -> dict[str, Any]:
    try:
        post = frontmatter.load(str(path))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise SourceReadError(path, str(exc)) from exc
    return dict(post.metadata)


def _url_dir(relative: PurePosixPath) -> str:
    parent = relative.parent.as_posix()
    return "/" if parent == "." else f"/{parent}"


def _coerce_date(value: Any, path: Path) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    try:
        return datetime.fromisoformat(str(value)).replace(tzinfo=None)
    except ValueError as exc:
        raise SourceReadError(path, f"invalid date {value!r}") from exc


def _read_post(path: Path, relative: PurePosixPath) -> Document:
    match = _POST_FILENAME_RE.match(path.name)
    if match is None:
        raise InvalidPostFilenameError(path.name)

    data = _load_front_matter(path)
    raw_date = data.get("date", match.group("date"))
    return Document(
        kind=DocumentKind.POST,
        name=path.name,
        dir=_url_dir(relative),
        data=data,
        output_ext=output_ext_for(path.suffix),
        relative_path=relative.as_posix(),
        date=_coerce_date(raw_date, path),
        slug=match.group("slug"),
    )


def _read_page(path: Path, relative: PurePosixPath) -> Document:
    return Document(
        kind=DocumentKind.PAGE,
        name=path.name,
        dir=_url_dir(relative),
        data=_load_front_matter(path),
        output_ext=output_ext_for(path.suffix),
        relative_path=relative.as_posix(),
    )


def _read_collection_document(path: Path, relative: PurePosixPath, collection: str) -> Document:
    # Documents without front matter are still documents; only parse when present
    data = _load_front_matter(path) if _has_front_matter(path) else {}
    return Document(
        kind=DocumentKind.DOCUMENT,
        name=path.name,
        dir=_url_dir(relative),
        data=data,
        output_ext=output_ext_for(path.suffix),
        asset_file=is_asset_ext(path.suffix),
        data_file=is_data_ext(path.suffix),
        collection=collection,
        relative_path=relative.as_posix(),
    )


def _is_ignored(relative: PurePosixPath, destination: str) -> bool:
    if any(part.startswith(".") for part in relative.parts):
        return True
    if relative.parts[0] == destination.strip("/"):
        return True
    return len(relative.parts) == 1 and relative.name in CONFIG_FILENAMES


def read_site(site_root: Path, config: SiteConfig | None = None) -> Site:
    """Read every page, post and collection document below ``site_root``.

    Args:
        site_root: Root directory of the site (where ``_config.toml`` lives)
        config: Preloaded configuration; loaded from ``site_root`` when omitted

    Raises:
        SourceReadError: If a source file or its front matter cannot be read
        InvalidPostFilenameError: If a post's file name carries no date

    """
    if config is None:
        config = load_site_config(site_root)
    source = (site_root / config.source).resolve()
    site = Site(config=config, source=source)

    for path in sorted(source.rglob("*")):
        if not path.is_file():
            continue
        relative = PurePosixPath(path.relative_to(source).as_posix())
        if _is_ignored(relative, config.destination):
            continue

        top = relative.parts[0]
        if top == POSTS_DIR:
            site.posts.append(_read_post(path, relative))
        elif top.startswith("_"):
            collection = top[1:]
            if collection in config.collections:
                site.documents.append(_read_collection_document(path, relative, collection))
        elif _has_front_matter(path):
            site.pages.append(_read_page(path, relative))
        else:
            logger.debug("Static file %s left to the copier", relative)

    logger.info(
        "Read %d page(s), %d post(s) and %d document(s) from %s",
        len(site.pages),
        len(site.posts),
        len(site.documents),
        source,
    )
    return site
