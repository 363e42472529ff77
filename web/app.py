"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adapters.tron.http_client import TronHttpClient
from core.config.loader import Settings, get_settings
from core.logging import setup_logging
from engine.composer import FeeComposer
from engine.models import FeeDefaults
from engine.parameters import ChainParameterCache

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.dependencies import is_fee_engine_available, set_fee_composer
from web.routes import fees, health

logger = logging.getLogger(__name__)


def build_fee_composer(settings: Settings) -> tuple[FeeComposer, TronHttpClient]:
    """설정으로 HTTP 클라이언트와 FeeComposer 생성

    Returns:
        (FeeComposer, TronHttpClient) - 클라이언트는 종료 시 close 필요
    """
    client = TronHttpClient(
        base_urls=settings.base_urls,
        api_key=settings.api_key or None,
        timeout=settings.timeout_sec,
    )
    fees_config = settings.fees
    defaults = FeeDefaults(
        activation_fee_trx=fees_config.activation_fee_trx,
        unknown_contract_energy=fees_config.unknown_contract_energy,
        simulation_fallback_energy=fees_config.simulation_fallback_energy,
        bandwidth_price_sun=fees_config.bandwidth_price_sun,
        energy_price_sun=fees_config.energy_price_sun,
    )
    composer = FeeComposer(
        simulation_client=client,
        contract_info_client=client,
        account_probe=client,
        parameter_cache=ChainParameterCache(client),
        defaults=defaults,
    )
    return composer, client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    client = None

    # 테스트 등에서 이미 주입된 경우 그대로 사용
    if not is_fee_engine_available():
        settings = get_settings()
        composer, client = build_fee_composer(settings)
        set_fee_composer(composer, settings.active_networks)
        logger.info(
            "Web: FeeComposer 초기화 완료",
            extra={
                "environment": settings.environment.value,
                "networks": [n.value for n in settings.active_networks],
            },
        )

    yield

    # 종료 시 - 리소스 정리
    if client is not None:
        await client.close()
        set_fee_composer(None)
        logger.info("Web: TRON HTTP 클라이언트 종료 완료")


app = FastAPI(
    title="TRON Fee Engine API",
    description="TRON 트랜잭션 리소스/수수료 추정 API",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(fees.router)
