"""
설정 로더

settings.yaml 로드 및 네트워크/엔진 설정 생성
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths, TronEndpoints
from core.types import Environment, Network


@dataclass(frozen=True)
class FeeSettings:
    """Fee 엔진 기본값 설정 (settings.yaml fees 섹션)"""

    activation_fee_trx: Decimal = Defaults.ACTIVATION_FEE_TRX
    unknown_contract_energy: int = Defaults.UNKNOWN_CONTRACT_ENERGY
    simulation_fallback_energy: int = Defaults.SIMULATION_FALLBACK_ENERGY
    bandwidth_price_sun: int = Defaults.BANDWIDTH_PRICE_SUN
    energy_price_sun: int = Defaults.ENERGY_PRICE_SUN


@dataclass(frozen=True)
class EngineSettings:
    """애플리케이션 설정

    불변 데이터 구조로 설정 변경 방지
    """

    environment: Environment
    api_key: str = ""
    timeout_sec: float = Defaults.HTTP_TIMEOUT_SEC
    base_urls: dict[Network, str] = field(default_factory=dict)
    fees: FeeSettings = field(default_factory=FeeSettings)


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def _parse_environment(value: Any) -> Environment:
    if value is None:
        return Environment(Defaults.ENVIRONMENT)
    try:
        return Environment(value)
    except ValueError as e:
        valid = [env.value for env in Environment]
        raise ValueError(
            f"유효하지 않은 environment입니다: '{value}'. "
            f"유효한 값: {valid}"
        ) from e


def _parse_base_urls(section: Any) -> dict[Network, str]:
    """networks 섹션 → 기본 URL (미지정 네트워크는 TronGrid 기본값)"""
    base_urls = dict(TronEndpoints.BASE_URLS)
    if section is None:
        return base_urls
    if not isinstance(section, dict):
        raise SettingsLoadError("settings.yaml의 'networks'는 매핑이어야 합니다")

    for name, url in section.items():
        try:
            network = Network.from_name(str(name))
        except ValueError as e:
            raise SettingsLoadError(f"networks 섹션의 알 수 없는 네트워크: {name}") from e
        if not isinstance(url, str) or not url:
            raise SettingsLoadError(f"networks.{name} URL이 비어 있습니다")
        base_urls[network] = url.rstrip("/")
    return base_urls


def _parse_int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SettingsLoadError(f"fees.{key}는 0 이상의 정수여야 합니다: {value!r}")
    return value


def _parse_fees(section: Any) -> FeeSettings:
    if section is None:
        return FeeSettings()
    if not isinstance(section, dict):
        raise SettingsLoadError("settings.yaml의 'fees'는 매핑이어야 합니다")

    raw_activation = section.get("activation_fee_trx", Defaults.ACTIVATION_FEE_TRX)
    try:
        # float 는 문자열 경유로 변환
        activation_fee = Decimal(str(raw_activation))
    except InvalidOperation as e:
        raise SettingsLoadError(
            f"fees.activation_fee_trx 형식이 잘못되었습니다: {raw_activation!r}"
        ) from e
    if activation_fee < 0:
        raise SettingsLoadError("fees.activation_fee_trx는 음수일 수 없습니다")

    return FeeSettings(
        activation_fee_trx=activation_fee,
        unknown_contract_energy=_parse_int(
            section, "unknown_contract_energy", Defaults.UNKNOWN_CONTRACT_ENERGY
        ),
        simulation_fallback_energy=_parse_int(
            section, "simulation_fallback_energy", Defaults.SIMULATION_FALLBACK_ENERGY
        ),
        bandwidth_price_sun=_parse_int(
            section, "bandwidth_price_sun", Defaults.BANDWIDTH_PRICE_SUN
        ),
        energy_price_sun=_parse_int(
            section, "energy_price_sun", Defaults.ENERGY_PRICE_SUN
        ),
    )


def load_settings(path: Path | None = None) -> EngineSettings:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        EngineSettings 인스턴스

    Raises:
        SettingsLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 environment인 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise SettingsLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SettingsLoadError("settings.yaml이 비어 있습니다")
    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    timeout = data.get("timeout_sec", Defaults.HTTP_TIMEOUT_SEC)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise SettingsLoadError(f"timeout_sec는 양수여야 합니다: {timeout!r}")

    return EngineSettings(
        environment=_parse_environment(data.get("environment")),
        api_key=data.get("api_key") or "",
        timeout_sec=float(timeout),
        base_urls=_parse_base_urls(data.get("networks")),
        fees=_parse_fees(data.get("fees")),
    )


def get_active_networks(environment: Environment) -> list[Network]:
    """환경별 활성 네트워크

    production은 메인넷만, local/test는 전체 네트워크.
    """
    if environment == Environment.PRODUCTION:
        return [Network.MAINNET]
    return list(Network)


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _settings: EngineSettings | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._settings is None:
            self._settings = load_settings(settings_path)

    @property
    def environment(self) -> Environment:
        """현재 실행 환경"""
        return self._settings.environment

    @property
    def api_key(self) -> str:
        """TRON-PRO-API-KEY (없으면 빈 문자열)"""
        return self._settings.api_key

    @property
    def timeout_sec(self) -> float:
        """HTTP 요청 타임아웃 (초)"""
        return self._settings.timeout_sec

    @property
    def base_urls(self) -> dict[Network, str]:
        """활성 네트워크의 기본 URL"""
        return {
            network: self._settings.base_urls[network]
            for network in self.active_networks
        }

    @property
    def active_networks(self) -> list[Network]:
        """현재 환경의 활성 네트워크"""
        return get_active_networks(self._settings.environment)

    @property
    def fees(self) -> FeeSettings:
        """Fee 엔진 기본값"""
        return self._settings.fees

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._settings = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
