"""
Fee 조합기 (FeeComposer)

트랜잭션과 계정의 사용 가능 리소스로 최종 Fee 내역 계산.

1. bandwidth_needed = 트랜잭션 크기 (byte)
2. energy_needed = Operation 별 Energy 합 (동시 추정)
3. Bandwidth: 전부 충분하면 리소스 소비, 아니면 전량 TRX 지불 (부분 소비 없음)
4. Energy: 가능한 만큼 소비, 초과분만 TRX 지불
5. 초과분이 있으면 체인 파라미터 단가로 TRX 환산 (SUN / 1_000_000)
6. 활성화 수수료 합산
7. Energy → Bandwidth → TRX 순서로 0 초과 항목만 반환
TRX 금액은 소수 6자리 절사 (반올림 아님).
"""

import logging
from decimal import ROUND_DOWN, Decimal

from adapters.interfaces import (
    ILedgerAccountProbe,
    ILedgerContractInfoClient,
    ILedgerSimulationClient,
)
from adapters.models import find_parameter
from core.constants import ChainParameterKeys, NativeToken, ResourceUnits
from core.types import EnergyClass, FeeKind, Network
from core.utils.tasks import gather_or_cancel
from engine.activation import ActivationFeeDetector
from engine.classifier import ContractEnergyClassifier
from engine.energy import EnergySimulator
from engine.models import FeeBreakdown, FeeDefaults, FeeEntry
from engine.parameters import ChainParameterCache
from engine.size import TransactionSizeEstimator
from engine.transaction import Operation, Transaction

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class FeeComposer:
    """트랜잭션 Fee 계산 오케스트레이터

    상태 없음. 요청마다 새 값을 만들고, 호출 간 공유되는 것은
    parameter_cache 뿐.

    Args:
        simulation_client: 상수 호출 시뮬레이션 클라이언트
        contract_info_client: 컨트랙트 분담 설정 조회 클라이언트
        account_probe: 주소 활성화 확인 클라이언트
        parameter_cache: 체인 파라미터 캐시
        defaults: 엔진 기본값
    """

    def __init__(
        self,
        simulation_client: ILedgerSimulationClient,
        contract_info_client: ILedgerContractInfoClient,
        account_probe: ILedgerAccountProbe,
        parameter_cache: ChainParameterCache,
        defaults: FeeDefaults | None = None,
    ):
        self.defaults = defaults or FeeDefaults()
        self.parameter_cache = parameter_cache

        self.size_estimator = TransactionSizeEstimator()
        self.classifier = ContractEnergyClassifier()
        self.energy_simulator = EnergySimulator(
            simulation_client=simulation_client,
            contract_info_client=contract_info_client,
            parameter_cache=parameter_cache,
            defaults=self.defaults,
        )
        self.activation_detector = ActivationFeeDetector(
            account_probe=account_probe,
            activation_fee_trx=self.defaults.activation_fee_trx,
        )

    async def compute_fee(
        self,
        scope: Network,
        transaction: Transaction,
        available_energy: int | Decimal,
        available_bandwidth: int | Decimal,
        fee_limit: int | None = None,
    ) -> FeeBreakdown:
        """Fee 내역 계산

        Args:
            scope: 네트워크
            transaction: 트랜잭션 (미서명 가능)
            available_energy: 사용 가능 Energy
            available_bandwidth: 사용 가능 Bandwidth
            fee_limit: 최대 지불 의사 TRX (SUN, 선택)

        Returns:
            FeeBreakdown (Energy → Bandwidth → TRX)

        Raises:
            ParameterFetchFailed: 단가 조회 실패
        """
        available_energy = max(Decimal(available_energy), ZERO)
        available_bandwidth = max(Decimal(available_bandwidth), ZERO)

        bandwidth_needed = Decimal(self.size_estimator.estimate_bytes(transaction))

        energy_needed, activation_fee = await gather_or_cancel(
            self.estimate_total_energy(scope, transaction, fee_limit),
            self.activation_detector.detect_activation_fee(scope, transaction),
        )

        # Bandwidth: 전부 아니면 전무
        if available_bandwidth >= bandwidth_needed:
            bandwidth_consumed = bandwidth_needed
            bandwidth_overage = ZERO
        else:
            bandwidth_consumed = ZERO
            bandwidth_overage = bandwidth_needed

        # Energy: 부분 소비
        energy_consumed = min(energy_needed, available_energy)
        energy_overage = max(energy_needed - available_energy, ZERO)

        overage_cost = ZERO
        if bandwidth_overage > 0 or energy_overage > 0:
            overage_cost = await self._overage_cost_trx(
                scope, bandwidth_overage, energy_overage
            )

        native_total = (overage_cost + activation_fee).quantize(
            NativeToken.QUANTUM, rounding=ROUND_DOWN
        )

        logger.info(
            "Fee 계산 완료",
            extra={
                "network": scope.value,
                "tx_id": transaction.tx_id,
                "bandwidth_needed": str(bandwidth_needed),
                "energy_needed": str(energy_needed),
                "bandwidth_overage": str(bandwidth_overage),
                "energy_overage": str(energy_overage),
                "activation_fee": str(activation_fee),
                "native_total": str(native_total),
            },
        )

        return self._build_breakdown(scope, energy_consumed, bandwidth_consumed, native_total)

    async def estimate_total_energy(
        self,
        scope: Network,
        transaction: Transaction,
        fee_limit: int | None = None,
    ) -> Decimal:
        """트랜잭션 전체 호출자 부담 Energy (Operation 별 동시 추정)"""
        estimates = await gather_or_cancel(
            *(
                self._estimate_operation_energy(scope, operation, fee_limit, transaction.visible)
                for operation in transaction.operations
            )
        )
        return sum((Decimal(e) for e in estimates), ZERO)

    async def _estimate_operation_energy(
        self,
        scope: Network,
        operation: Operation,
        fee_limit: int | None,
        visible: bool,
    ) -> int:
        energy_class = self.classifier.classify(operation)

        if energy_class == EnergyClass.FREE:
            return 0

        if energy_class == EnergyClass.UNKNOWN:
            logger.warning(
                "알 수 없는 contract 타입, 보수적 추정치 사용",
                extra={
                    "contract_type": operation.type_name,
                    "energy": self.defaults.unknown_contract_energy,
                },
            )
            return self.defaults.unknown_contract_energy

        return await self.energy_simulator.estimate_energy(
            scope, operation, fee_limit, visible
        )

    async def _overage_cost_trx(
        self,
        scope: Network,
        bandwidth_overage: Decimal,
        energy_overage: Decimal,
    ) -> Decimal:
        """초과 리소스의 TRX 환산 비용"""
        parameters = await self.parameter_cache.get_parameters(scope)
        bandwidth_price = Decimal(find_parameter(
            parameters, ChainParameterKeys.BANDWIDTH_PRICE, self.defaults.bandwidth_price_sun
        ))
        energy_price = Decimal(find_parameter(
            parameters, ChainParameterKeys.ENERGY_PRICE, self.defaults.energy_price_sun
        ))

        bandwidth_cost = bandwidth_overage * bandwidth_price / NativeToken.SUN_PER_TRX
        energy_cost = energy_overage * energy_price / NativeToken.SUN_PER_TRX
        return bandwidth_cost + energy_cost

    @staticmethod
    def _build_breakdown(
        scope: Network,
        energy_consumed: Decimal,
        bandwidth_consumed: Decimal,
        native_total: Decimal,
    ) -> FeeBreakdown:
        entries: list[FeeEntry] = []

        if energy_consumed > 0:
            entries.append(
                FeeEntry(
                    kind=FeeKind.RESOURCE,
                    unit=ResourceUnits.ENERGY,
                    asset_id=scope.energy_asset_id,
                    amount=energy_consumed,
                )
            )
        if bandwidth_consumed > 0:
            entries.append(
                FeeEntry(
                    kind=FeeKind.RESOURCE,
                    unit=ResourceUnits.BANDWIDTH,
                    asset_id=scope.bandwidth_asset_id,
                    amount=bandwidth_consumed,
                )
            )
        if native_total > 0:
            entries.append(
                FeeEntry(
                    kind=FeeKind.NATIVE,
                    unit=NativeToken.SYMBOL,
                    asset_id=scope.native_asset_id,
                    amount=native_total,
                )
            )

        return FeeBreakdown(entries=tuple(entries))

