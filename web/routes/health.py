"""
헬스 체크 엔드포인트

GET /health - 서버 상태 확인
"""

from fastapi import APIRouter

from web.dependencies import get_active_networks
from web.models.responses import HealthResponse

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """서버 상태 확인

    Returns:
        HealthResponse: status, environment, networks, version 정보
    """
    from core.config.loader import get_settings

    settings = get_settings()

    return HealthResponse(
        status="ok",
        environment=settings.environment.value,
        networks=[network.value for network in get_active_networks()],
        version=API_VERSION,
    )
