# genshin_gateway/adapters/upstream/httpx_client.py
import httpx
import structlog
from typing import Optional

from genshin_gateway.core.domain.models import UpstreamResponse
from genshin_gateway.shared.config import settings

logger = structlog.get_logger()

class HttpxUpstreamClient:
    """
    Adapter for reading raw files from the GitHub-hosted data repositories.

    One short-lived AsyncClient per fetch; nothing is shared between
    requests. Non-success statuses are returned to the caller, transport
    errors are logged and re-raised.
    """

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None):
        self.timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT
        self.headers = {
            "User-Agent": user_agent or settings.USER_AGENT
        }

    async def fetch(self, url: str) -> UpstreamResponse:
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(url, headers=self.headers)
            except httpx.HTTPError as e:
                logger.error("upstream_http_error", url=url, error=str(e))
                raise

            logger.debug("upstream_fetched", url=url, status=response.status_code)
            return UpstreamResponse(
                status_code=response.status_code,
                content=response.content,
                headers=dict(response.headers),
            )
