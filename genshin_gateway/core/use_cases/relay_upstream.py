# genshin_gateway/core/use_cases/relay_upstream.py
import gzip
import json

import structlog

from genshin_gateway.core.domain.exceptions import UpstreamNotFoundError
from genshin_gateway.core.domain.models import ParsedRequest, RelayedDocument, UpstreamShape
from genshin_gateway.core.domain.upstream import UpstreamUrlBuilder
from genshin_gateway.core.ports.upstream_client import IUpstreamClient
from genshin_gateway.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

BULK_NOT_FOUND = "Category name not found"
FILE_NOT_FOUND = "File not found"

JSON_MEDIA_TYPE = "application/json"


class RelayUpstream:
    """
    Use Case: Fetches the upstream file for a resolved request and turns it
    into the outbound JSON body.

    Responsibilities:
    1. Builds the upstream URL from the ParsedRequest.
    2. Issues exactly one fetch through the Upstream Client Port.
    3. Maps a non-success status to UpstreamNotFoundError.
    4. Gunzips bulk archives; re-indents plain JSON documents.

    Decompression and JSON errors are not caught here. They surface at the
    HTTP boundary as relay failures.
    """

    def __init__(self, client: IUpstreamClient, url_builder: UpstreamUrlBuilder):
        self.client = client
        self.url_builder = url_builder

    async def execute(self, parsed: ParsedRequest) -> RelayedDocument:
        shape = parsed.shape
        url = self.url_builder.build(parsed)

        with tracer.start_as_current_span("use_case.relay_upstream") as span:
            span.set_attribute("gateway.language", parsed.language.value)
            span.set_attribute("gateway.category", str(parsed.category))
            span.set_attribute("gateway.shape", shape.value)
            span.set_attribute("gateway.branch", parsed.branch)

            log = logger.bind(url=url, shape=shape.value)
            log.info("relay_started")

            response = await self.client.fetch(url)
            span.set_attribute("http.upstream_status", response.status_code)

            if not response.ok:
                log.info("relay_upstream_missing", status=response.status_code)
                message = BULK_NOT_FOUND if shape is UpstreamShape.BULK else FILE_NOT_FOUND
                raise UpstreamNotFoundError(message, status_code=response.status_code)

            if shape is UpstreamShape.BULK:
                content = gzip.decompress(response.content)
            else:
                document = response.json()
                content = json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")

            log.info("relay_success", size=len(content))
            return RelayedDocument(content=content, media_type=JSON_MEDIA_TYPE)
