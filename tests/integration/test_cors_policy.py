"""
CORS Policy Integration Tests
허용 origin에 대한 preflight 응답 테스트
"""

import pytest
from httpx import AsyncClient

from catalog.core.config import settings


class TestCorsPolicy:
    """CORS 정책 테스트"""

    @pytest.mark.asyncio
    async def test_preflight_from_allowed_origin(self, client: AsyncClient):
        origin = settings.cors_origins[0]

        response = await client.options(
            "/api/books/all",
            headers={
                "Origin": origin,
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Authorization",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == origin

    @pytest.mark.asyncio
    async def test_request_id_exposed(self, client: AsyncClient):
        origin = settings.cors_origins[0]

        response = await client.get("/health", headers={"Origin": origin})

        assert "X-Request-ID" in response.headers["access-control-expose-headers"]

    @pytest.mark.asyncio
    async def test_unknown_origin_not_allowed(self, client: AsyncClient):
        response = await client.get("/health", headers={"Origin": "http://evil.example"})

        assert "access-control-allow-origin" not in response.headers
