from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from cleanurls.config import SiteConfig
from cleanurls.data_primitives import Document, DocumentKind
from cleanurls.site import Site


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CLEANURLS_* variables from the caller's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("CLEANURLS_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def make_site() -> Callable[..., Site]:
    def _make(**config: Any) -> Site:
        return Site(config=SiteConfig(**config), source=Path("/site"))

    return _make


@pytest.fixture
def make_page() -> Callable[..., Document]:
    def _make(name: str = "about.md", dir: str = "/", output_ext: str = ".html", **data: Any) -> Document:
        return Document(kind=DocumentKind.PAGE, name=name, dir=dir, data=data, output_ext=output_ext)

    return _make


@pytest.fixture
def make_post() -> Callable[..., Document]:
    def _make(
        slug: str = "my-post",
        date: datetime = datetime(2014, 3, 1),
        **data: Any,
    ) -> Document:
        name = f"{date:%Y-%m-%d}-{slug}.md"
        return Document(
            kind=DocumentKind.POST,
            name=name,
            dir="/_posts",
            data=data,
            relative_path=f"_posts/{name}",
            date=date,
            slug=slug,
        )

    return _make


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write ``{relative path: content}`` below ``tmp_path`` and return the root."""

    def _write(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write
