"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 원장 클라이언트 구현체는 이 Protocol을 준수해야 함.
각 호출의 타임아웃은 구현체(HTTP 클라이언트) 책임.
"""

from typing import Protocol, runtime_checkable

from core.types import Network


@runtime_checkable
class ILedgerSimulationClient(Protocol):
    """스마트 컨트랙트 상수 호출 시뮬레이션 인터페이스"""

    async def simulate_call(
        self,
        scope: Network,
        request: "SimulationRequest",
    ) -> "SimulationResult":
        """컨트랙트 호출을 브로드캐스트 없이 실행하여 Energy 측정

        Args:
            scope: 네트워크
            request: 호출자/컨트랙트/데이터/call_value

        Returns:
            성공 여부와 소모 Energy

        Raises:
            TronApiError, httpx.HTTPError: 요청 실패 시
        """
        ...


@runtime_checkable
class ILedgerContractInfoClient(Protocol):
    """배포된 컨트랙트의 Energy 분담 설정 조회 인터페이스"""

    async def get_contract_info(
        self,
        scope: Network,
        contract_address: str,
        visible: bool = False,
    ) -> "ContractSubsidyInfo | None":
        """컨트랙트 분담 설정 조회

        Args:
            scope: 네트워크
            contract_address: 컨트랙트 주소
            visible: 주소 형식 (base58이면 True)

        Returns:
            ContractSubsidyInfo 또는 None (컨트랙트 없음)
        """
        ...


@runtime_checkable
class ILedgerAccountProbe(Protocol):
    """주소 활성화(온체인 존재) 여부 확인 인터페이스"""

    async def account_exists(
        self,
        scope: Network,
        address: str,
        visible: bool = False,
    ) -> bool:
        """주소가 원장에 존재하는지 확인

        Args:
            scope: 네트워크
            address: 확인할 주소
            visible: 주소 형식 (base58이면 True)

        Returns:
            존재하면 True. 호출자는 예외를 False로 간주
        """
        ...


@runtime_checkable
class ILedgerParameterClient(Protocol):
    """체인 파라미터 조회 인터페이스"""

    async def get_chain_parameters(self, scope: Network) -> list["ChainParameter"]:
        """전체 체인 파라미터 조회

        Args:
            scope: 네트워크

        Returns:
            ChainParameter 목록
        """
        ...


# 순환 참조 방지를 위한 타입 힌트 (런타임에는 문자열로 유지)
# 실제 타입은 adapters.models에서 정의
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adapters.models import (
        ChainParameter,
        ContractSubsidyInfo,
        SimulationRequest,
        SimulationResult,
    )
