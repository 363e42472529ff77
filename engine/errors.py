"""
Fee 엔진 에러 정의

- ParameterFetchFailed 만 compute_fee 밖으로 전파됨
- SimulationFailed / SubsidyLookupFailed / ActivationProbeFailed 는
  엔진 내부에서 기록 후 보수적 폴백으로 복구
"""

from core.types import Network


class FeeEngineError(Exception):
    """Fee 엔진 에러 기본 클래스"""
    pass


class InvalidTransactionError(FeeEngineError):
    """트랜잭션 입력 형식 오류
    
    raw_data_hex/서명이 hex가 아니거나 contract 목록이 비어 있는 경우.
    """
    pass


class SimulationFailed(FeeEngineError):
    """Energy 시뮬레이션 실패 (호출 에러, 실행 실패, energy 누락)"""
    
    def __init__(self, contract_address: str | None, reason: str):
        self.contract_address = contract_address
        self.reason = reason
        super().__init__(f"Simulation failed for {contract_address}: {reason}")


class SubsidyLookupFailed(FeeEngineError):
    """컨트랙트 분담 설정 조회 실패 (호출자 100% 부담으로 간주)"""
    
    def __init__(self, contract_address: str | None, reason: str):
        self.contract_address = contract_address
        self.reason = reason
        super().__init__(f"Subsidy lookup failed for {contract_address}: {reason}")


class ActivationProbeFailed(FeeEngineError):
    """주소 활성화 확인 실패 (미활성으로 간주)"""
    
    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"Activation probe failed for {address}: {reason}")


class ParameterFetchFailed(FeeEngineError):
    """체인 파라미터 조회 실패
    
    compute_fee 밖으로 전파되는 유일한 에러.
    """
    
    def __init__(self, scope: Network, cause: BaseException | None = None):
        self.scope = scope
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to fetch chain parameters for {scope.value}{detail}")
