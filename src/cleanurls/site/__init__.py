"""Host pipeline: the site model, its reader and the output plan."""

from cleanurls.site.model import Site
from cleanurls.site.permalinks import destination_for, url_for
from cleanurls.site.plan import OutputEntry, build_output_plan
from cleanurls.site.reader import read_site

__all__ = [
    "OutputEntry",
    "Site",
    "build_output_plan",
    "destination_for",
    "read_site",
    "url_for",
]
