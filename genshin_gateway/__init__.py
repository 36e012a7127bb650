# genshin_gateway/__init__.py
"""
Genshin Data Gateway.

Resolves short request paths (language, category, record id) into URLs on
the statically hosted genshin-db repositories and relays the upstream JSON
back to the caller. Laid out as Ports & Adapters: `core` holds the
resolution and relay logic, `adapters` the FastAPI and httpx edges.
"""

__version__ = "1.0.0"
