# genshin_gateway/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `genshin_gateway.core.ports`:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `upstream`: Secondary Adapter (Driven) - httpx client for the raw data repositories.

Dependencies point INWARD. These modules depend on `genshin_gateway.core`,
but `genshin_gateway.core` never imports from here.
"""
