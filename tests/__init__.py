# tests/__init__.py
"""
Test Suite for the Genshin Data Gateway.

Organization:
- `core`: Resolution, URL building and relay logic with a mocked upstream client.
- `adapters`: The httpx client and the FastAPI surface.
"""
