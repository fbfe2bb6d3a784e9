"""
헬스 체크 API 통합 테스트.
서버가 정상적으로 응답하는지 확인합니다.
"""

from httpx import AsyncClient


async def test_health_check(async_client: AsyncClient):
    """GET /api/v1/health 는 200과 {"status": "healthy"}를 반환해야 한다."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_health_check_detail(async_client: AsyncClient):
    """GET /api/v1/health/detail 는 설정 정보를 포함해야 한다."""
    response = await async_client.get("/api/v1/health/detail")

    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "gemini_model" in data["config"]
    assert isinstance(data["config"]["api_key_configured"], bool)


async def test_root_endpoint(async_client: AsyncClient):
    """GET / 는 서비스 이름과 API 경로를 반환해야 한다."""
    response = await async_client.get("/")

    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Wedding Proposal Studio"
    assert data["api"] == "/api/v1"
