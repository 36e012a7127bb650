# genshin_gateway/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

- `resolve_request`: turns a request URL into a ParsedRequest.
- `RelayUpstream`: fetches the matching upstream file and prepares the
  outbound body.
"""

from .resolve_request import resolve_request
from .relay_upstream import RelayUpstream

__all__ = [
    "resolve_request",
    "RelayUpstream",
]
