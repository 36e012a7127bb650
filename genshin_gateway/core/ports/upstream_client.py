# genshin_gateway/core/ports/upstream_client.py
from typing import Protocol

from genshin_gateway.core.domain.models import UpstreamResponse

class IUpstreamClient(Protocol):
    """
    Port for reading raw files from the upstream data repositories.
    Implementations:
    - HttpxUpstreamClient (async GET over httpx)
    """

    async def fetch(self, url: str) -> UpstreamResponse:
        """
        Issues a single GET for `url`. No retry.

        Returns:
            The upstream status, headers and full binary body. A non-success
            status is returned, not raised.

        Raises:
            Transport errors (DNS, connection reset, timeout) propagate as-is.
        """
        ...
