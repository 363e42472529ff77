"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class Environment(str, Enum):
    """실행 환경 (활성 네트워크 결정)"""

    PRODUCTION = "production"
    LOCAL = "local"
    TEST = "test"


class Network(str, Enum):
    """TRON 네트워크 (CAIP-2 체인 ID)

    fee 계산의 scope로 사용. 네트워크마다 체인 파라미터가 다름.
    """

    MAINNET = "tron:728126428"
    NILE = "tron:3448148188"
    SHASTA = "tron:2494104990"

    @property
    def native_asset_id(self) -> str:
        """TRX 자산 ID (CAIP-19)"""
        return f"{self.value}/slip44:195"

    @property
    def energy_asset_id(self) -> str:
        """Energy 리소스 자산 ID"""
        return f"{self.value}/slip44:energy"

    @property
    def bandwidth_asset_id(self) -> str:
        """Bandwidth 리소스 자산 ID"""
        return f"{self.value}/slip44:bandwidth"

    @classmethod
    def from_name(cls, name: str) -> "Network":
        """이름(mainnet/nile/shasta) 또는 CAIP-2 ID로 Network 조회

        Raises:
            ValueError: 알 수 없는 네트워크
        """
        text = name.strip()
        try:
            return cls(text)
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            valid = [n.name.lower() for n in cls] + [n.value for n in cls]
            raise ValueError(
                f"알 수 없는 네트워크입니다: '{name}'. 유효한 값: {valid}"
            ) from None


class ContractType(str, Enum):
    """TRON 트랜잭션 내 Operation(contract) 종류

    원장이 정의한 전체 contract 종류의 닫힌 집합.
    목록에 없는 이름은 Operation.contract_type = None으로 파싱됨.
    """

    # 전송
    TRANSFER = "TransferContract"
    TRANSFER_ASSET = "TransferAssetContract"

    # 스마트 컨트랙트
    TRIGGER_SMART_CONTRACT = "TriggerSmartContract"
    CREATE_SMART_CONTRACT = "CreateSmartContract"
    UPDATE_SETTING = "UpdateSettingContract"
    UPDATE_ENERGY_LIMIT = "UpdateEnergyLimitContract"
    CLEAR_ABI = "ClearABIContract"

    # 스테이킹
    FREEZE_BALANCE = "FreezeBalanceContract"
    UNFREEZE_BALANCE = "UnfreezeBalanceContract"
    FREEZE_BALANCE_V2 = "FreezeBalanceV2Contract"
    UNFREEZE_BALANCE_V2 = "UnfreezeBalanceV2Contract"
    WITHDRAW_EXPIRE_UNFREEZE = "WithdrawExpireUnfreezeContract"
    CANCEL_ALL_UNFREEZE_V2 = "CancelAllUnfreezeV2Contract"
    DELEGATE_RESOURCE = "DelegateResourceContract"
    UNDELEGATE_RESOURCE = "UnDelegateResourceContract"

    # 투표 / Witness
    VOTE_WITNESS = "VoteWitnessContract"
    VOTE_ASSET = "VoteAssetContract"
    WITHDRAW_BALANCE = "WithdrawBalanceContract"
    WITNESS_CREATE = "WitnessCreateContract"
    WITNESS_UPDATE = "WitnessUpdateContract"
    UPDATE_BROKERAGE = "UpdateBrokerageContract"

    # 계정 관리
    ACCOUNT_CREATE = "AccountCreateContract"
    ACCOUNT_UPDATE = "AccountUpdateContract"
    SET_ACCOUNT_ID = "SetAccountIdContract"
    ACCOUNT_PERMISSION_UPDATE = "AccountPermissionUpdateContract"

    # TRC10 자산
    ASSET_ISSUE = "AssetIssueContract"
    PARTICIPATE_ASSET_ISSUE = "ParticipateAssetIssueContract"
    UNFREEZE_ASSET = "UnfreezeAssetContract"
    UPDATE_ASSET = "UpdateAssetContract"

    # 제안
    PROPOSAL_CREATE = "ProposalCreateContract"
    PROPOSAL_APPROVE = "ProposalApproveContract"
    PROPOSAL_DELETE = "ProposalDeleteContract"

    # Bancor 거래소 / 마켓
    EXCHANGE_CREATE = "ExchangeCreateContract"
    EXCHANGE_INJECT = "ExchangeInjectContract"
    EXCHANGE_WITHDRAW = "ExchangeWithdrawContract"
    EXCHANGE_TRANSACTION = "ExchangeTransactionContract"
    MARKET_SELL_ASSET = "MarketSellAssetContract"
    MARKET_CANCEL_ORDER = "MarketCancelOrderContract"

    # 기타
    SHIELDED_TRANSFER = "ShieldedTransferContract"
    CUSTOM = "CustomContract"

    @classmethod
    def parse(cls, name: str) -> "ContractType | None":
        """contract 타입 이름 파싱 (알 수 없는 이름이면 None)"""
        try:
            return cls(name)
        except ValueError:
            return None


class EnergyClass(str, Enum):
    """Operation의 Energy 과금 분류"""

    FREE = "FREE"          # 네이티브/시스템 동작 (Energy 0)
    METERED = "METERED"    # 스마트 컨트랙트 실행 (시뮬레이션 필요)
    UNKNOWN = "UNKNOWN"    # 보수적 고정 추정치로 과금


class FeeKind(str, Enum):
    """Fee 항목 종류"""

    RESOURCE = "RESOURCE"  # Energy / Bandwidth 소비
    NATIVE = "NATIVE"      # TRX 지불
