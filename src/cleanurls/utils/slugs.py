"""Slug helpers shared by URL placeholders."""

from pymdownx.slugs import slugify as _md_slugify

# Pre-configured slugifier, reused for every call.
_slugify_lower = _md_slugify(case="lower", normalize="NFKD")


def slugify(text: str | None, max_len: int = 80) -> str:
    """Convert text to an ASCII, URL-friendly slug.

    Examples:
        >>> slugify("Chicken Soup!")
        'chicken-soup'
        >>> slugify("Café à Paris")
        'cafe-a-paris'
        >>> slugify("")
        ''

    """
    if not text:
        return ""

    slug = _slugify_lower(str(text), sep="-")
    # NFKD alone does not guarantee ASCII
    slug = slug.encode("ascii", "ignore").decode("ascii")
    return slug[:max_len].strip("-")
