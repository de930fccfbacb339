from datetime import datetime

import pytest

from cleanurls.config import CollectionSettings, SiteConfig
from cleanurls.data_primitives import DocumentKind
from cleanurls.site import read_site
from cleanurls.site.exceptions import InvalidPostFilenameError, SourceReadError

FRONT_MATTER = "---\ntitle: Example\n---\nBody\n"


@pytest.fixture
def site_tree(write_tree):
    return write_tree(
        {
            "_config.toml": 'permalink = "/:year/:title"\n\n[collections.recipes]\noutput = true\n',
            "index.html": "---\n---\n<h1>Home</h1>\n",
            "about.md": "---\ntitle: About\npermalink: /about-us\n---\nHello\n",
            "docs/install.md": FRONT_MATTER,
            "feed.xml": "---\nlayout: null\n---\n<feed/>\n",
            "css/plain.css": "body {}\n",
            "_posts/2014-03-01-my-post.md": "---\ncategories: [Python]\n---\nPost\n",
            "_recipes/chicken-soup.md": "---\ntitle: Chicken Soup\n---\nSoup\n",
            "_recipes/raw.txt": "no front matter\n",
            "_layouts/default.html": FRONT_MATTER,
            "_drafts/later.md": FRONT_MATTER,
            ".hidden/secret.md": FRONT_MATTER,
            "_site/old.html": FRONT_MATTER,
        }
    )


def _by_name(documents):
    return {doc.name: doc for doc in documents}


def test_reads_pages_with_front_matter_only(site_tree):
    site = read_site(site_tree)
    pages = _by_name(site.pages)

    assert set(pages) == {"index.html", "about.md", "install.md", "feed.xml"}
    assert pages["install.md"].dir == "/docs"
    assert pages["index.html"].dir == "/"
    assert pages["feed.xml"].output_ext == ".xml"
    assert pages["about.md"].permalink == "/about-us"
    assert all(page.kind is DocumentKind.PAGE for page in site.pages)


def test_reads_posts_from_file_names(site_tree):
    site = read_site(site_tree)

    (post,) = site.posts
    assert post.kind is DocumentKind.POST
    assert post.date == datetime(2014, 3, 1)
    assert post.slug == "my-post"
    assert post.categories == ["Python"]
    assert post.relative_path == "_posts/2014-03-01-my-post.md"


def test_reads_configured_collections(site_tree):
    site = read_site(site_tree)
    documents = _by_name(site.documents)

    assert set(documents) == {"chicken-soup.md", "raw.txt"}
    assert documents["chicken-soup.md"].collection == "recipes"
    assert documents["chicken-soup.md"].data["title"] == "Chicken Soup"
    assert documents["raw.txt"].data == {}
    assert documents["raw.txt"].output_ext == ".txt"


def test_loads_config_from_site_root(site_tree):
    site = read_site(site_tree)

    assert site.config.permalink == "/:year/:title"
    assert site.source == site_tree.resolve()


def test_explicit_config_wins(site_tree):
    site = read_site(site_tree, SiteConfig(permalink="pretty"))

    assert site.config.permalink == "pretty"
    assert site.documents == []


def test_front_matter_date_overrides_file_name(write_tree):
    root = write_tree({"_posts/2014-03-01-moved.md": "---\ndate: 2015-06-07 08:09:10\n---\n"})
    (post,) = read_site(root).posts
    assert post.date == datetime(2015, 6, 7, 8, 9, 10)


def test_timezone_is_dropped(write_tree):
    root = write_tree({"_posts/2014-03-01-tz.md": "---\ndate: 2014-03-01T10:00:00+02:00\n---\n"})
    (post,) = read_site(root).posts
    assert post.date == datetime(2014, 3, 1, 10, 0)


def test_invalid_post_file_name(write_tree):
    root = write_tree({"_posts/my-post.md": FRONT_MATTER})
    with pytest.raises(InvalidPostFilenameError, match="my-post.md"):
        read_site(root)


def test_invalid_front_matter(write_tree):
    root = write_tree({"broken.md": "---\ntitle: [unclosed\n---\n"})
    with pytest.raises(SourceReadError, match="broken.md"):
        read_site(root)


def test_invalid_date(write_tree):
    root = write_tree({"_posts/2014-03-01-bad.md": "---\ndate: yesterday\n---\n"})
    with pytest.raises(SourceReadError, match="invalid date"):
        read_site(root)


def test_custom_source_directory(write_tree):
    root = write_tree(
        {
            "_config.toml": 'source = "src"\n',
            "src/index.md": FRONT_MATTER,
            "notes.md": FRONT_MATTER,
        }
    )
    site = read_site(root)

    assert [page.name for page in site.pages] == ["index.md"]
    assert site.source == (root / "src").resolve()


def test_collection_output_flag_is_kept(write_tree):
    root = write_tree({"_recipes/soup.md": FRONT_MATTER})
    config = SiteConfig(collections={"recipes": CollectionSettings(output=False)})

    site = read_site(root, config)

    assert len(site.documents) == 1
    assert site.output_documents() == []
