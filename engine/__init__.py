"""
TRON 트랜잭션 리소스/수수료 계산 엔진

트랜잭션 1건의 Bandwidth/Energy 소비량, 초과분 TRX 비용,
계정 활성화 수수료를 추정. 서명/브로드캐스트는 하지 않음.
"""

from engine.composer import FeeComposer
from engine.errors import (
    FeeEngineError,
    InvalidTransactionError,
    ParameterFetchFailed,
)
from engine.models import FeeBreakdown, FeeDefaults, FeeEntry
from engine.parameters import ChainParameterCache, next_maintenance_boundary
from engine.transaction import Operation, Transaction

__all__ = [
    "FeeComposer",
    "FeeEngineError",
    "InvalidTransactionError",
    "ParameterFetchFailed",
    "FeeBreakdown",
    "FeeDefaults",
    "FeeEntry",
    "ChainParameterCache",
    "next_maintenance_boundary",
    "Operation",
    "Transaction",
]
