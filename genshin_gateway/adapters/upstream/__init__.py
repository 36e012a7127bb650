# genshin_gateway/adapters/upstream/__init__.py
from .httpx_client import HttpxUpstreamClient

__all__ = ["HttpxUpstreamClient"]
