"""Tests for application wiring: health check, headers and error envelopes."""

from __future__ import annotations

import pytest
from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from portfolio_risk.main import app

pytestmark = pytest.mark.anyio


class TestHealth:
    """GET /health."""

    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "service": "portfolio-risk-engine"}

    async def test_version_header(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.headers["X-API-Version"] == "v1"


class TestErrorEnvelope:
    """Error responses share one JSON shape."""

    async def test_not_found_envelope(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/does-not-exist")
        assert resp.status_code == 404
        body = resp.json()
        assert body["error"] == "http_404"
        assert body["request_id"] == "unknown"

    async def test_request_id_echoed(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/v1/fund-operations/capital-call",
            json={"total_commitments": 1, "total_called": 2},
            headers={"X-Request-ID": "req-123"},
        )
        assert resp.status_code == 400
        body = resp.json()
        assert body["request_id"] == "req-123"
        assert body["error"] == "http_400"
        assert body["message"] == body["detail"]

    async def test_unhandled_exception_500(self) -> None:
        router = APIRouter()

        @router.get("/test-boom")
        async def boom():
            raise RuntimeError("boom")

        app.include_router(router)
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as ac:
            resp = await ac.get("/test-boom")

        assert resp.status_code == 500
        assert resp.json()["error"] == "internal_server_error"
