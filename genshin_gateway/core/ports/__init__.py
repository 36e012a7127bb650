# genshin_gateway/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters must implement, so the relay logic
can reach the upstream repositories without knowing the HTTP client.
"""

from .upstream_client import IUpstreamClient

__all__ = [
    "IUpstreamClient",
]
