"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from fastapi import Depends, HTTPException

from core.config.loader import Settings, get_settings
from core.types import Network
from engine.composer import FeeComposer
from web.services.fee_service import FeeService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


# =========================================================================
# FeeComposer (lifespan 에서 설정)
# =========================================================================

_fee_composer: FeeComposer | None = None
_active_networks: list[Network] = []


def set_fee_composer(
    composer: FeeComposer | None,
    active_networks: list[Network] | None = None,
) -> None:
    """FeeComposer 설정

    앱 시작 시(또는 테스트에서) 호출하여 전역 인스턴스 설정.

    Args:
        composer: FeeComposer 인스턴스 (None이면 해제)
        active_networks: 요청 허용 네트워크 (None이면 전체)
    """
    global _fee_composer, _active_networks
    _fee_composer = composer
    _active_networks = list(active_networks) if active_networks is not None else list(Network)


def get_fee_composer() -> FeeComposer:
    """FeeComposer 반환

    Raises:
        HTTPException: 초기화되지 않은 경우 503
    """
    if _fee_composer is None:
        raise HTTPException(
            status_code=503,
            detail="Fee 엔진이 초기화되지 않았습니다",
        )
    return _fee_composer


def get_active_networks() -> list[Network]:
    """요청 허용 네트워크"""
    return list(_active_networks)


def get_fee_service(
    composer: FeeComposer = Depends(get_fee_composer),
) -> FeeService:
    """FeeService 반환"""
    return FeeService(composer, get_active_networks())


def is_fee_engine_available() -> bool:
    """Fee 엔진 사용 가능 여부"""
    return _fee_composer is not None
