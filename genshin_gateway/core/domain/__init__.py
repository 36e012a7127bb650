# genshin_gateway/core/domain/__init__.py
"""
Domain Entities and Value Objects.

The "ubiquitous language" of the gateway: languages and their locale
aliases, the resolved request, the upstream URL shapes and the static
help catalog.
"""
