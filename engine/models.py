"""
Fee 엔진 데이터 모델

모든 금액/수량은 Decimal (부동소수점 사용 금지).
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from core.constants import Defaults
from core.types import FeeKind


@dataclass(frozen=True)
class FeeDefaults:
    """엔진 기본값 (설정에서 주입)

    Attributes:
        activation_fee_trx: 미활성 수신자 1건당 활성화 수수료 (TRX)
        unknown_contract_energy: 알 수 없는 contract 의 Energy 추정치
        simulation_fallback_energy: 시뮬레이션 실패 + fee_limit 없음 시 추정치
        bandwidth_price_sun: getTransactionFee 누락 시 단가
        energy_price_sun: getEnergyFee 누락 시 단가
    """

    activation_fee_trx: Decimal = Defaults.ACTIVATION_FEE_TRX
    unknown_contract_energy: int = Defaults.UNKNOWN_CONTRACT_ENERGY
    simulation_fallback_energy: int = Defaults.SIMULATION_FALLBACK_ENERGY
    bandwidth_price_sun: int = Defaults.BANDWIDTH_PRICE_SUN
    energy_price_sun: int = Defaults.ENERGY_PRICE_SUN


@dataclass(frozen=True)
class EnergyShare:
    """Energy 분담 결과

    Attributes:
        caller: 호출자(서명자) 부담 Energy
        deployer: 배포자 부담 Energy
    """

    caller: int
    deployer: int = 0

    @property
    def total(self) -> int:
        """총 Energy"""
        return self.caller + self.deployer


@dataclass(frozen=True)
class FeeEntry:
    """Fee 항목

    Attributes:
        kind: RESOURCE (Energy/Bandwidth 소비) 또는 NATIVE (TRX 지불)
        unit: 단위 심볼 (ENERGY, BANDWIDTH, TRX)
        asset_id: CAIP-19 자산 ID
        amount: 수량 (리소스는 정수, TRX는 소수 6자리 절사)
    """

    kind: FeeKind
    unit: str
    asset_id: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        """UI(확인 다이얼로그) 전달 형식"""
        return {
            "type": "base",
            "asset": {
                "unit": self.unit,
                "type": self.asset_id,
                "amount": str(self.amount),
                "fungible": True,
            },
        }


@dataclass(frozen=True)
class FeeBreakdown:
    """Fee 내역 (순서: Energy → Bandwidth → TRX)

    불변 조건: 0 이하 금액 항목은 포함되지 않음.
    """

    entries: tuple[FeeEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for entry in self.entries:
            if entry.amount <= 0:
                raise ValueError(f"FeeBreakdown entry must be positive: {entry}")

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, unit: str) -> FeeEntry | None:
        """단위로 항목 조회"""
        for entry in self.entries:
            if entry.unit == unit:
                return entry
        return None

    def native_total(self) -> Decimal:
        """TRX 지불 총액 (없으면 0)"""
        for entry in self.entries:
            if entry.kind == FeeKind.NATIVE:
                return entry.amount
        return Decimal("0")

    def to_list(self) -> list[dict[str, Any]]:
        """UI 전달 형식 목록"""
        return [entry.to_dict() for entry in self.entries]
