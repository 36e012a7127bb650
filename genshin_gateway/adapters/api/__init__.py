# genshin_gateway/adapters/api/__init__.py
"""
REST API Adapter.

The HTTP entry point of the gateway, built on FastAPI:
- It depends on `genshin_gateway.core` (Use Cases & Models).
- It resolves collaborators from `genshin_gateway.shared.container`.
- It does NOT contain resolution or relay logic.
"""

from .main import create_app

__all__ = ["create_app"]
