# genshin_gateway/core/__init__.py
"""
Core Domain Layer.

Pure resolution and relay logic of the gateway:
- No dependencies on frameworks (FastAPI).
- No dependencies on infrastructure (httpx).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
