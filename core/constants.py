"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path

from core.types import Network


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class TronEndpoints:
    """TronGrid Full Node API 기본 엔드포인트

    공식 문서: https://developers.tron.network/reference/full-node-api-overview
    """

    BASE_URLS: dict[Network, str] = {
        Network.MAINNET: "https://api.trongrid.io",
        Network.NILE: "https://nile.trongrid.io",
        Network.SHASTA: "https://api.shasta.trongrid.io",
    }

    TRIGGER_CONSTANT_CONTRACT: str = "/wallet/triggerconstantcontract"
    GET_CONTRACT: str = "/wallet/getcontract"
    GET_ACCOUNT: str = "/wallet/getaccount"
    GET_CHAIN_PARAMETERS: str = "/wallet/getchainparameters"


class ChainParameterKeys:
    """체인 파라미터 키 (getchainparameters 응답)"""

    BANDWIDTH_PRICE: str = "getTransactionFee"   # SUN / byte
    ENERGY_PRICE: str = "getEnergyFee"           # SUN / energy
    MAINTENANCE_INTERVAL: str = "getMaintenanceTimeInterval"  # ms


class NativeToken:
    """TRX 단위 상수"""

    SYMBOL: str = "TRX"
    DECIMALS: int = 6
    SUN_PER_TRX: Decimal = Decimal("1000000")
    # 6자리 절사용 quantize 단위
    QUANTUM: Decimal = Decimal("0.000001")


class ResourceUnits:
    """리소스 단위 심볼"""

    ENERGY: str = "ENERGY"
    BANDWIDTH: str = "BANDWIDTH"


class TransactionSize:
    """원장의 직렬화 크기 계산 상수 (byte)"""

    # 서명 1개 크기 (r 32 + s 32 + v 1)
    SIGNATURE_BYTES: int = 65
    # ret(결과) 필드 자리 표시자
    RESULT_PLACEHOLDER_BYTES: int = 64
    # protobuf tag / length prefix 오버헤드
    PROTOBUF_OVERHEAD_BYTES: int = 5


class Defaults:
    """기본값 상수"""

    ENVIRONMENT: str = "production"
    HTTP_TIMEOUT_SEC: float = 10.0

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # 가격 파라미터가 없을 때 사용하는 값 (SUN)
    BANDWIDTH_PRICE_SUN: int = 1000
    ENERGY_PRICE_SUN: int = 100

    # 유지보수 주기 기본값 (6시간, ms)
    MAINTENANCE_INTERVAL_MS: int = 6 * 60 * 60 * 1000

    # 알 수 없는 contract / 시뮬레이션 실패 시 보수적 Energy 추정치
    UNKNOWN_CONTRACT_ENERGY: int = 130_000
    SIMULATION_FALLBACK_ENERGY: int = 130_000

    # 미활성 수신자 1건당 계정 활성화 수수료 (TRX)
    ACTIVATION_FEE_TRX: Decimal = Decimal("1")


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"
