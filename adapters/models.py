"""
어댑터 공통 데이터 모델

원장(TRON) API 응답을 표준화한 도메인 모델.
Energy/가격 등 수량은 int, 금액 계산은 엔진에서 Decimal로 수행.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationRequest:
    """상수 호출(triggerconstantcontract) 시뮬레이션 요청

    Attributes:
        caller_address: 호출자 주소 (트랜잭션 owner_address)
        contract_address: 대상 컨트랙트 주소
        data: 호출 데이터 (hex, selector + 인코딩된 인자)
        call_value: 함께 전송하는 TRX (SUN)
        token_id: TRC10 토큰 ID (선택)
        call_token_value: TRC10 전송량 (선택)
        visible: 주소가 base58 형식이면 True, hex(41...)면 False
    """

    caller_address: str
    contract_address: str
    data: str = ""
    call_value: int = 0
    token_id: str | None = None
    call_token_value: int | None = None
    visible: bool = False


@dataclass(frozen=True)
class SimulationResult:
    """시뮬레이션 결과

    Attributes:
        success: 실행 성공 여부 (revert 포함 실패면 False)
        energy_used: 소모 Energy (응답에 없으면 None)
        energy_penalty: 동적 Energy 모델 페널티 (정보용)
        message: 실패 메시지 (있을 경우)
    """

    success: bool
    energy_used: int | None = None
    energy_penalty: int | None = None
    message: str | None = None


@dataclass(frozen=True)
class ContractSubsidyInfo:
    """배포자 Energy 분담 설정 (컨트랙트별)

    Attributes:
        origin_address: 배포자 주소
        caller_resource_percent: 호출자가 부담하는 Energy 비율 (0~100, 기본 100)
        deployer_subsidy_limit: 배포자가 트랜잭션당 부담하는 최대 Energy (기본 0)
    """

    origin_address: str | None = None
    caller_resource_percent: int = 100
    deployer_subsidy_limit: int = 0

    @property
    def has_subsidy(self) -> bool:
        """배포자 분담이 실제로 적용되는지 여부"""
        return self.caller_resource_percent < 100 and self.deployer_subsidy_limit > 0


@dataclass(frozen=True)
class ChainParameter:
    """체인 파라미터 (원장 전역 설정)

    Attributes:
        key: 파라미터 이름 (예: getEnergyFee)
        value: 값 (원장이 값을 생략하면 None)
    """

    key: str
    value: int | None = None


def find_parameter(
    parameters: list[ChainParameter],
    key: str,
    default: int | None = None,
) -> int | None:
    """파라미터 목록에서 key 값 조회 (없거나 값이 비어 있으면 default)"""
    for param in parameters:
        if param.key == key and param.value is not None:
            return param.value
    return default
