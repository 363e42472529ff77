"""
어댑터 레이어

외부 서비스(TRON Full Node)와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import (
    ILedgerAccountProbe,
    ILedgerContractInfoClient,
    ILedgerParameterClient,
    ILedgerSimulationClient,
)
from adapters.models import (
    ChainParameter,
    ContractSubsidyInfo,
    SimulationRequest,
    SimulationResult,
)

__all__ = [
    # Interfaces
    "ILedgerSimulationClient",
    "ILedgerContractInfoClient",
    "ILedgerAccountProbe",
    "ILedgerParameterClient",
    # Models
    "ChainParameter",
    "ContractSubsidyInfo",
    "SimulationRequest",
    "SimulationResult",
]
