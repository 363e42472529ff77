"""
Mock 원장 클라이언트

테스트용 인메모리 원장.
ILedgerSimulationClient, ILedgerContractInfoClient,
ILedgerAccountProbe, ILedgerParameterClient Protocol 준수.
"""

import asyncio
from collections import Counter
from dataclasses import dataclass, field

from adapters.models import (
    ChainParameter,
    ContractSubsidyInfo,
    SimulationRequest,
    SimulationResult,
)
from core.constants import ChainParameterKeys, Defaults
from core.types import Network


def default_chain_parameters() -> list[ChainParameter]:
    """메인넷과 같은 기본 체인 파라미터"""
    return [
        ChainParameter(key=ChainParameterKeys.BANDWIDTH_PRICE, value=Defaults.BANDWIDTH_PRICE_SUN),
        ChainParameter(key=ChainParameterKeys.ENERGY_PRICE, value=Defaults.ENERGY_PRICE_SUN),
        ChainParameter(
            key=ChainParameterKeys.MAINTENANCE_INTERVAL,
            value=Defaults.MAINTENANCE_INTERVAL_MS,
        ),
    ]


class MockLedgerError(Exception):
    """Mock 원장 호출 실패 (실패 토글 활성 시)"""

    pass


@dataclass
class MockLedgerState:
    """Mock 상태 (메모리 내 저장)"""

    # 시뮬레이션 결과 (contract_address -> SimulationResult)
    simulations: dict[str, SimulationResult] = field(default_factory=dict)

    # 컨트랙트 분담 설정 (contract_address -> ContractSubsidyInfo)
    contracts: dict[str, ContractSubsidyInfo] = field(default_factory=dict)

    # 활성화된 주소
    activated: set[str] = field(default_factory=set)

    # 체인 파라미터 (네트워크별, 없으면 default_chain_parameters)
    parameters: dict[Network, list[ChainParameter]] = field(default_factory=dict)

    # 시뮬레이션 옵션
    fail_simulation: bool = False
    fail_contract_info: bool = False
    fail_account_probe: bool = False
    fail_parameters: bool = False

    # 조회 지연 (초, 동시성 테스트용)
    parameter_delay: float = 0.0
    probe_delay: float = 0.0

    # 호출 카운터 (메서드 이름 -> 횟수)
    calls: Counter = field(default_factory=Counter)


class MockLedgerClient:
    """Mock 원장 클라이언트

    네 가지 원장 Protocol 을 모두 구현.
    등록되지 않은 컨트랙트 시뮬레이션은 실패(REVERT)로 응답.

    사용 예시:
    ```python
    ledger = MockLedgerClient()
    ledger.set_simulation("TContract", energy_used=100_000)
    ledger.set_contract("TContract", caller_resource_percent=50, deployer_subsidy_limit=20_000)
    ledger.activate("TReceiver")
    ```
    """

    def __init__(self, state: MockLedgerState | None = None):
        self.state = state or MockLedgerState()

    # -------------------------------------------------------------------------
    # 상태 설정 헬퍼
    # -------------------------------------------------------------------------

    def set_simulation(
        self,
        contract_address: str,
        energy_used: int | None = None,
        success: bool = True,
        energy_penalty: int | None = None,
        message: str | None = None,
    ) -> None:
        """컨트랙트 시뮬레이션 결과 설정"""
        self.state.simulations[contract_address] = SimulationResult(
            success=success,
            energy_used=energy_used,
            energy_penalty=energy_penalty,
            message=message,
        )

    def set_contract(
        self,
        contract_address: str,
        caller_resource_percent: int = 100,
        deployer_subsidy_limit: int = 0,
        origin_address: str | None = None,
    ) -> None:
        """컨트랙트 분담 설정"""
        self.state.contracts[contract_address] = ContractSubsidyInfo(
            origin_address=origin_address,
            caller_resource_percent=caller_resource_percent,
            deployer_subsidy_limit=deployer_subsidy_limit,
        )

    def activate(self, *addresses: str) -> None:
        """주소 활성화"""
        self.state.activated.update(addresses)

    def set_parameters(
        self,
        scope: Network,
        parameters: list[ChainParameter] | dict[str, int],
    ) -> None:
        """네트워크 체인 파라미터 설정 (dict 이면 key -> value)"""
        if isinstance(parameters, dict):
            parameters = [ChainParameter(key=k, value=v) for k, v in parameters.items()]
        self.state.parameters[scope] = list(parameters)

    # -------------------------------------------------------------------------
    # ILedgerSimulationClient
    # -------------------------------------------------------------------------

    async def simulate_call(
        self,
        scope: Network,
        request: SimulationRequest,
    ) -> SimulationResult:
        self.state.calls["simulate_call"] += 1
        if self.state.fail_simulation:
            raise MockLedgerError("simulate_call 실패 (mock)")

        result = self.state.simulations.get(request.contract_address)
        if result is None:
            return SimulationResult(success=False, message="REVERT opcode executed")
        return result

    # -------------------------------------------------------------------------
    # ILedgerContractInfoClient
    # -------------------------------------------------------------------------

    async def get_contract_info(
        self,
        scope: Network,
        contract_address: str,
        visible: bool = False,
    ) -> ContractSubsidyInfo | None:
        self.state.calls["get_contract_info"] += 1
        if self.state.fail_contract_info:
            raise MockLedgerError("get_contract_info 실패 (mock)")
        return self.state.contracts.get(contract_address)

    # -------------------------------------------------------------------------
    # ILedgerAccountProbe
    # -------------------------------------------------------------------------

    async def account_exists(
        self,
        scope: Network,
        address: str,
        visible: bool = False,
    ) -> bool:
        self.state.calls["account_exists"] += 1
        if self.state.probe_delay > 0:
            await asyncio.sleep(self.state.probe_delay)
        if self.state.fail_account_probe:
            raise MockLedgerError("account_exists 실패 (mock)")
        self.state.calls["account_exists:done"] += 1
        return address in self.state.activated

    # -------------------------------------------------------------------------
    # ILedgerParameterClient
    # -------------------------------------------------------------------------

    async def get_chain_parameters(self, scope: Network) -> list[ChainParameter]:
        self.state.calls["get_chain_parameters"] += 1
        if self.state.parameter_delay > 0:
            await asyncio.sleep(self.state.parameter_delay)
        if self.state.fail_parameters:
            raise MockLedgerError("get_chain_parameters 실패 (mock)")

        parameters = self.state.parameters.get(scope)
        if parameters is None:
            return default_chain_parameters()
        return list(parameters)
