"""
Fee 엔진 테스트 픽스처

Mock 원장, 고정 시계, 트랜잭션 빌더 제공.
"""

from typing import Any, Callable

import pytest

from adapters.mock.ledger_client import MockLedgerClient
from engine.composer import FeeComposer
from engine.parameters import ChainParameterCache
from engine.transaction import Transaction


# 6시간 (ms)
INTERVAL_MS = 21_600_000


class FakeClock:
    """수동으로 진행하는 ms 시계"""

    def __init__(self, now: int = INTERVAL_MS * 100 + 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


# -------------------------------------------------------------------------
# 협력 객체 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def ledger() -> MockLedgerClient:
    """인메모리 원장"""
    return MockLedgerClient()


@pytest.fixture
def clock() -> FakeClock:
    """유지보수 윈도우 중간의 고정 시계"""
    return FakeClock()


@pytest.fixture
def parameter_cache(ledger: MockLedgerClient, clock: FakeClock) -> ChainParameterCache:
    """Mock 원장 기반 파라미터 캐시"""
    return ChainParameterCache(ledger, clock=clock)


@pytest.fixture
def composer(ledger: MockLedgerClient, parameter_cache: ChainParameterCache) -> FeeComposer:
    """Mock 원장 기반 FeeComposer"""
    return FeeComposer(
        simulation_client=ledger,
        contract_info_client=ledger,
        account_probe=ledger,
        parameter_cache=parameter_cache,
    )


# -------------------------------------------------------------------------
# 트랜잭션 빌더
# -------------------------------------------------------------------------

def _build_tx(
    contracts: list[dict[str, Any]],
    raw_bytes: int = 66,
    signatures: list[str] | None = None,
    visible: bool = True,
) -> Transaction:
    data: dict[str, Any] = {
        "txID": "ab" * 32,
        "visible": visible,
        "raw_data_hex": "0a" * raw_bytes,
        "raw_data": {"contract": contracts},
    }
    if signatures is not None:
        data["signature"] = signatures
    return Transaction.from_dict(data)


def transfer_contract(to_address: str = "TReceiver", amount: int = 1_000_000) -> dict[str, Any]:
    """TransferContract 항목"""
    return {
        "type": "TransferContract",
        "parameter": {
            "value": {
                "owner_address": "TOwner",
                "to_address": to_address,
                "amount": amount,
            }
        },
    }


def trigger_contract(contract_address: str = "TContract") -> dict[str, Any]:
    """TriggerSmartContract 항목 (TRC20 transfer)"""
    return {
        "type": "TriggerSmartContract",
        "parameter": {
            "value": {
                "owner_address": "TOwner",
                "contract_address": contract_address,
                "data": "a9059cbb" + "00" * 64,
            }
        },
    }


@pytest.fixture
def build_tx() -> Callable[..., Transaction]:
    """contract 목록으로 Transaction 생성"""
    return _build_tx


@pytest.fixture
def transfer_tx() -> Callable[..., Transaction]:
    """TRX 전송 트랜잭션 생성 (raw_data 66 byte, 미서명)"""

    def _make(to_address: str = "TReceiver", amount: int = 1_000_000, **kwargs: Any) -> Transaction:
        return _build_tx([transfer_contract(to_address, amount)], **kwargs)

    return _make


@pytest.fixture
def trigger_tx() -> Callable[..., Transaction]:
    """스마트 컨트랙트 호출 트랜잭션 생성"""

    def _make(contract_address: str = "TContract", **kwargs: Any) -> Transaction:
        return _build_tx([trigger_contract(contract_address)], **kwargs)

    return _make


@pytest.fixture
def make_transfer() -> Callable[..., dict[str, Any]]:
    """TransferContract 항목 빌더"""
    return transfer_contract


@pytest.fixture
def make_trigger() -> Callable[..., dict[str, Any]]:
    """TriggerSmartContract 항목 빌더"""
    return trigger_contract
