# tests/__init__.py
"""
Test suite for the GrossApp admin API.

Organization:
- `core`: service-layer tests against an in-memory SQLite session.
- `http_api`: end-to-end tests through FastAPI's TestClient.
"""
