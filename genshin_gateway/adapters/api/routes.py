# genshin_gateway/adapters/api/routes.py
import json
from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from genshin_gateway.adapters.api.dependencies import get_help_catalog, get_relay_use_case
from genshin_gateway.core.domain.catalog import render_help_html
from genshin_gateway.core.domain.exceptions import InvalidURLError, UpstreamNotFoundError
from genshin_gateway.core.domain.models import HelpCatalog
from genshin_gateway.core.use_cases.relay_upstream import JSON_MEDIA_TYPE, RelayUpstream
from genshin_gateway.core.use_cases.resolve_request import resolve_request
from genshin_gateway.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(tags=["Gateway"])

# Every method is served like GET.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _request_target(request: Request) -> str:
    """
    Origin-relative target with the path still percent-encoded.

    `request.url` is rebuilt from the decoded path, where "%2F" and "%3F"
    would already be a separator and a query start.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        path = request.url.path
    else:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    query = request.url.query
    return f"{path}?{query}" if query else path


def _json_response(payload: Dict[str, Any], status_code: int = status.HTTP_200_OK) -> Response:
    body = json.dumps(payload, indent=2, ensure_ascii=False)
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)


def _error_response(message: str, status_code: int, catalog: HelpCatalog) -> Response:
    return _json_response(
        {"error": f"Error: {message}", "help": catalog.model_dump()},
        status_code=status_code,
    )


@router.api_route(
    "/",
    methods=ALL_METHODS,
    summary="Gateway help",
)
async def help_page(request: Request, catalog: HelpCatalog = Depends(get_help_catalog)):
    """
    Lists languages, locale aliases, folders and example URLs.

    HTML when the request's Content-Type mentions html, JSON otherwise.
    """
    content_type = request.headers.get("content-type")
    if content_type and "/html" in content_type:
        return HTMLResponse(render_help_html(catalog))
    return _json_response(catalog.model_dump())


@router.api_route(
    "/{path:path}",
    methods=ALL_METHODS,
    summary="Relay a genshin-db file",
)
async def relay(
    request: Request,
    catalog: HelpCatalog = Depends(get_help_catalog),
    use_case: RelayUpstream = Depends(get_relay_use_case),
):
    """
    Resolves `/[language/]<category>[/<id>]` and relays the upstream JSON.

    **Reserved ids:**
    * `index` (default): the category listing.
    * `all`: the whole category, decompressed from the gzipped archive.

    **Query:**
    * `lang` / `language`: language override (names or locale aliases).
    * `branch`: upstream branch or tag, default from `DEFAULT_BRANCH`.
    """
    target = _request_target(request)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(target=target, method=request.method)
    try:
        parsed = resolve_request(target, default_branch=settings.DEFAULT_BRANCH)
        document = await use_case.execute(parsed)
        return Response(content=document.content, media_type=document.media_type)

    except UpstreamNotFoundError as e:
        # Valid request, missing data: short text, no help payload
        return PlainTextResponse(e.message, status_code=status.HTTP_404_NOT_FOUND)

    except InvalidURLError as e:
        logger.warning("gateway_bad_request", error=e.message)
        return _error_response(e.message, status.HTTP_400_BAD_REQUEST, catalog)

    except Exception as e:
        logger.error("gateway_relay_failed", error=str(e), exc_info=True)
        return _error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR, catalog)
