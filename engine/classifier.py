"""
Contract Energy 분류기

각 Operation을 FREE / METERED / UNKNOWN 으로 분류.
ContractType 전 멤버가 ENERGY_CLASSIFICATION 에 매핑되어야 함 (테스트로 강제).
"""

from types import MappingProxyType

from core.types import ContractType, EnergyClass
from engine.transaction import Operation


ENERGY_CLASSIFICATION: MappingProxyType = MappingProxyType({
    # 전송: Energy 0
    ContractType.TRANSFER: EnergyClass.FREE,
    ContractType.TRANSFER_ASSET: EnergyClass.FREE,

    # 스마트 컨트랙트
    ContractType.TRIGGER_SMART_CONTRACT: EnergyClass.METERED,
    ContractType.CREATE_SMART_CONTRACT: EnergyClass.UNKNOWN,
    ContractType.UPDATE_SETTING: EnergyClass.FREE,
    ContractType.UPDATE_ENERGY_LIMIT: EnergyClass.FREE,
    ContractType.CLEAR_ABI: EnergyClass.FREE,

    # 스테이킹
    ContractType.FREEZE_BALANCE: EnergyClass.FREE,
    ContractType.UNFREEZE_BALANCE: EnergyClass.FREE,
    ContractType.FREEZE_BALANCE_V2: EnergyClass.FREE,
    ContractType.UNFREEZE_BALANCE_V2: EnergyClass.FREE,
    ContractType.WITHDRAW_EXPIRE_UNFREEZE: EnergyClass.FREE,
    ContractType.CANCEL_ALL_UNFREEZE_V2: EnergyClass.FREE,
    ContractType.DELEGATE_RESOURCE: EnergyClass.FREE,
    ContractType.UNDELEGATE_RESOURCE: EnergyClass.FREE,

    # 투표 / Witness
    ContractType.VOTE_WITNESS: EnergyClass.FREE,
    ContractType.VOTE_ASSET: EnergyClass.UNKNOWN,
    ContractType.WITHDRAW_BALANCE: EnergyClass.FREE,
    ContractType.WITNESS_CREATE: EnergyClass.FREE,
    ContractType.WITNESS_UPDATE: EnergyClass.FREE,
    ContractType.UPDATE_BROKERAGE: EnergyClass.FREE,

    # 계정 관리
    ContractType.ACCOUNT_CREATE: EnergyClass.FREE,
    ContractType.ACCOUNT_UPDATE: EnergyClass.FREE,
    ContractType.SET_ACCOUNT_ID: EnergyClass.FREE,
    ContractType.ACCOUNT_PERMISSION_UPDATE: EnergyClass.FREE,

    # TRC10 자산
    ContractType.ASSET_ISSUE: EnergyClass.FREE,
    ContractType.PARTICIPATE_ASSET_ISSUE: EnergyClass.FREE,
    ContractType.UNFREEZE_ASSET: EnergyClass.FREE,
    ContractType.UPDATE_ASSET: EnergyClass.FREE,

    # 제안
    ContractType.PROPOSAL_CREATE: EnergyClass.FREE,
    ContractType.PROPOSAL_APPROVE: EnergyClass.FREE,
    ContractType.PROPOSAL_DELETE: EnergyClass.FREE,

    # Bancor 거래소 / 마켓
    ContractType.EXCHANGE_CREATE: EnergyClass.FREE,
    ContractType.EXCHANGE_INJECT: EnergyClass.FREE,
    ContractType.EXCHANGE_WITHDRAW: EnergyClass.FREE,
    ContractType.EXCHANGE_TRANSACTION: EnergyClass.FREE,
    ContractType.MARKET_SELL_ASSET: EnergyClass.FREE,
    ContractType.MARKET_CANCEL_ORDER: EnergyClass.FREE,

    # 기타
    ContractType.SHIELDED_TRANSFER: EnergyClass.UNKNOWN,
    ContractType.CUSTOM: EnergyClass.UNKNOWN,
})


class ContractEnergyClassifier:
    """Operation Energy 분류기"""

    def classify(self, operation: Operation) -> EnergyClass:
        """Operation -> EnergyClass

        알 수 없는 contract 이름은 UNKNOWN (보수적 고정 추정치 대상).
        """
        if operation.contract_type is None:
            return EnergyClass.UNKNOWN
        return ENERGY_CLASSIFICATION.get(operation.contract_type, EnergyClass.UNKNOWN)
