# genshin_gateway/core/domain/upstream.py
"""
Upstream URL construction.

The data repository (genshin-db) holds per-record and index JSON under
display-cased language folders; the dist repository (genshin-db-dist) holds
one gzipped archive per language and category. A ParsedRequest maps onto
exactly one of those files. Invalid categories or branches are not checked
here; they simply produce a URL the upstream answers with 404.
"""

from genshin_gateway.core.domain.languages import display_form
from genshin_gateway.core.domain.models import ParsedRequest, UpstreamShape


class UpstreamUrlBuilder:
    """Maps a ParsedRequest to the raw upstream file URL."""

    def __init__(self, data_base_url: str, dist_base_url: str):
        self.data_base_url = data_base_url.rstrip("/")
        self.dist_base_url = dist_base_url.rstrip("/")

    def build(self, parsed: ParsedRequest) -> str:
        shape = parsed.shape

        if shape is UpstreamShape.BULK:
            return (
                f"{self.dist_base_url}/{parsed.branch}/data/gzips/"
                f"{parsed.language.value}-{parsed.category}.min.json.gzip"
            )

        folder = display_form(parsed.language)

        if shape is UpstreamShape.INDEX:
            return f"{self.data_base_url}/{parsed.branch}/src/data/index/{folder}/{parsed.category}.json"

        return f"{self.data_base_url}/{parsed.branch}/src/data/{folder}/{parsed.category}/{parsed.id}.json"
