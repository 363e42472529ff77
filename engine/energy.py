"""
Energy 시뮬레이션 및 호출자/배포자 분담 계산

METERED Operation 은 원장 시뮬레이션으로 총 Energy 를 얻은 뒤
컨트랙트의 분담 설정에 따라 호출자 부담분만 과금.

분담 규칙:
- pct >= 100 또는 subsidy_limit <= 0 → 호출자가 전부 부담
- caller_theoretical = ceil(total * pct / 100)
- deployer_actual = min(total - caller_theoretical, subsidy_limit)
- caller_actual = total - deployer_actual
호출자 부담은 ceil (원장 실제 과금 이상).
"""

import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from adapters.interfaces import ILedgerContractInfoClient, ILedgerSimulationClient
from adapters.models import ContractSubsidyInfo, SimulationRequest, SimulationResult
from core.constants import ChainParameterKeys
from core.types import Network
from core.utils.tasks import gather_or_cancel
from engine.errors import SimulationFailed, SubsidyLookupFailed
from engine.models import EnergyShare, FeeDefaults
from engine.parameters import ChainParameterCache
from engine.transaction import Operation

logger = logging.getLogger(__name__)


def split_energy(total: int, subsidy: ContractSubsidyInfo | None) -> EnergyShare:
    """총 Energy 를 호출자/배포자 부담분으로 분할

    Args:
        total: 시뮬레이션 총 Energy
        subsidy: 컨트랙트 분담 설정 (None이면 호출자 100%)

    Returns:
        EnergyShare

    Example:
        pct=50, limit=20000, total=100000
        → caller_theoretical=50000, deployer=min(50000, 20000)=20000, caller=80000
    """
    if total <= 0:
        return EnergyShare(caller=0)
    if subsidy is None or not subsidy.has_subsidy:
        return EnergyShare(caller=total)

    pct = max(subsidy.caller_resource_percent, 0)
    limit = subsidy.deployer_subsidy_limit

    caller_theoretical = int(
        (Decimal(total) * Decimal(pct) / Decimal(100)).to_integral_value(rounding=ROUND_CEILING)
    )
    deployer_theoretical = total - caller_theoretical
    deployer_actual = min(deployer_theoretical, limit)

    return EnergyShare(caller=total - deployer_actual, deployer=deployer_actual)


class EnergySimulator:
    """METERED Operation 의 호출자 부담 Energy 추정

    시뮬레이션과 분담 설정 조회를 동시에 수행.
    시뮬레이션 실패 시 재시도 없이 폴백:
    - fee_limit 있음 → floor(fee_limit / energy 단가)
    - 없음 → defaults.simulation_fallback_energy

    Args:
        simulation_client: 상수 호출 시뮬레이션 클라이언트
        contract_info_client: 컨트랙트 분담 설정 조회 클라이언트
        parameter_cache: 체인 파라미터 캐시 (폴백 단가)
        defaults: 엔진 기본값
    """

    def __init__(
        self,
        simulation_client: ILedgerSimulationClient,
        contract_info_client: ILedgerContractInfoClient,
        parameter_cache: ChainParameterCache,
        defaults: FeeDefaults | None = None,
    ):
        self.simulation_client = simulation_client
        self.contract_info_client = contract_info_client
        self.parameter_cache = parameter_cache
        self.defaults = defaults or FeeDefaults()

    async def estimate_energy(
        self,
        scope: Network,
        operation: Operation,
        fee_limit: int | None = None,
        visible: bool = False,
    ) -> int:
        """호출자 부담 Energy 추정

        Args:
            scope: 네트워크
            operation: TriggerSmartContract Operation
            fee_limit: 최대 지불 의사 TRX (SUN, 선택)
            visible: 주소 형식 (base58이면 True)

        Returns:
            호출자 부담 Energy

        Raises:
            ParameterFetchFailed: 폴백 단가 조회 실패
        """
        simulation, subsidy = await gather_or_cancel(
            self._simulate(scope, operation, visible),
            self._lookup_subsidy(scope, operation, visible),
        )

        if isinstance(simulation, SimulationFailed):
            logger.warning(
                "Energy 시뮬레이션 실패, 폴백 추정치 사용",
                extra={
                    "network": scope.value,
                    "contract": operation.contract_address,
                    "reason": simulation.reason,
                    "fee_limit": fee_limit,
                },
            )
            return await self._fallback_energy(scope, fee_limit)

        if isinstance(subsidy, SubsidyLookupFailed):
            logger.warning(
                "컨트랙트 분담 설정 조회 실패, 호출자 100% 부담으로 간주",
                extra={"contract": operation.contract_address, "reason": subsidy.reason},
            )
            subsidy = None

        share = split_energy(simulation.energy_used, subsidy)

        logger.debug(
            "Energy 추정 완료",
            extra={
                "contract": operation.contract_address,
                "total": share.total,
                "caller": share.caller,
                "deployer": share.deployer,
                "penalty": simulation.energy_penalty,
            },
        )
        return share.caller

    async def _simulate(
        self,
        scope: Network,
        operation: Operation,
        visible: bool,
    ) -> SimulationResult | SimulationFailed:
        """시뮬레이션 호출 (실패는 SimulationFailed 값으로 반환)"""
        if not operation.owner_address or not operation.contract_address:
            return SimulationFailed(operation.contract_address, "호출자/컨트랙트 주소 누락")

        request = SimulationRequest(
            caller_address=operation.owner_address,
            contract_address=operation.contract_address,
            data=operation.data,
            call_value=operation.call_value,
            token_id=operation.token_id,
            call_token_value=operation.call_token_value,
            visible=visible,
        )

        try:
            result = await self.simulation_client.simulate_call(scope, request)
        except Exception as e:
            return SimulationFailed(operation.contract_address, f"호출 에러: {e}")

        if not result.success:
            return SimulationFailed(
                operation.contract_address,
                f"실행 실패: {result.message or 'unknown'}",
            )
        if result.energy_used is None:
            return SimulationFailed(operation.contract_address, "energy_used 누락")

        return result

    async def _lookup_subsidy(
        self,
        scope: Network,
        operation: Operation,
        visible: bool,
    ) -> ContractSubsidyInfo | SubsidyLookupFailed | None:
        """분담 설정 조회 (실패는 SubsidyLookupFailed 값으로 반환)"""
        if not operation.contract_address:
            return None
        try:
            return await self.contract_info_client.get_contract_info(
                scope,
                operation.contract_address,
                visible,
            )
        except Exception as e:
            return SubsidyLookupFailed(operation.contract_address, str(e))

    async def _fallback_energy(self, scope: Network, fee_limit: int | None) -> int:
        """시뮬레이션 실패 시 Energy 추정치"""
        if fee_limit is not None and fee_limit > 0:
            price = await self.parameter_cache.get_price(
                scope,
                ChainParameterKeys.ENERGY_PRICE,
                self.defaults.energy_price_sun,
            )
            if price > 0:
                return int(
                    (Decimal(fee_limit) / price).to_integral_value(rounding=ROUND_FLOOR)
                )
        return self.defaults.simulation_fallback_energy
