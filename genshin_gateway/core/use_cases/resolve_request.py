# genshin_gateway/core/use_cases/resolve_request.py
"""
Request resolution.

Accepted path layouts:

    /<category>                      -> english, <category>, index
    /<category>/<id>                 -> english, <category>, <id>
    /<language>/<category>           -> <language>, <category>, index
    /<language>/<category>/<id>      -> <language>, <category>, <id>

The first segment is tried as a language (name or locale alias) before it
is taken as a category. `?lang=` / `?language=` override the path language
and `?branch=` selects the upstream branch or tag.
"""

from typing import Dict, List, Optional
from urllib.parse import parse_qs, urlsplit

from genshin_gateway.core.domain.exceptions import InvalidURLError
from genshin_gateway.core.domain.languages import (
    DEFAULT_LANGUAGE,
    canonicalize,
    is_supported,
)
from genshin_gateway.core.domain.models import INDEX_ID, ParsedRequest


def _first_param(query: Dict[str, List[str]], *names: str) -> Optional[str]:
    # First name present wins, even when its value is empty.
    for name in names:
        if name in query:
            return query[name][0]
    return None


def resolve_request(request_url: str, *, default_branch: str) -> ParsedRequest:
    """
    Parses a request URL into a ParsedRequest.

    Args:
        request_url: Absolute or origin-relative URL of the inbound request.
            The path must still be percent-encoded: an encoded "/" or "?"
            belongs to its segment and is forwarded upstream as sent.
        default_branch: Branch used when the query carries no `branch`.

    Raises:
        InvalidURLError: The path has no segments, or the resolved language
            is not a directory key.
    """
    parts = urlsplit(request_url)
    segments = [segment for segment in parts.path.split("/") if segment != ""]

    if not segments:
        raise InvalidURLError("Invalid URL Format")

    first = segments[0]
    second = segments[1] if len(segments) > 1 else None
    third = segments[2] if len(segments) > 2 else None

    query = parse_qs(parts.query, keep_blank_values=True)
    query_lang = _first_param(query, "lang", "language")
    branch = _first_param(query, "branch")
    if branch is None:
        branch = default_branch

    language = DEFAULT_LANGUAGE
    path_language = canonicalize(first)

    if path_language:
        language = path_language
        category = second
        record_id = third
    else:
        category = first
        record_id = second

    if record_id is None:
        record_id = INDEX_ID

    override = canonicalize(query_lang)
    if override:
        language = override

    if not is_supported(language):
        raise InvalidURLError("Invalid Language")

    return ParsedRequest(
        language=language,
        category=category,
        id=record_id,
        branch=branch,
    )
