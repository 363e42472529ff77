"""
Web API 테스트 픽스처

Mock 원장 기반 FeeComposer 를 주입한 TestClient 제공.
"""

import pytest
from fastapi.testclient import TestClient

from adapters.mock.ledger_client import MockLedgerClient
from core.config.loader import Settings
from core.types import Network
from engine.composer import FeeComposer
from engine.parameters import ChainParameterCache
from web.app import app
from web.dependencies import set_fee_composer


@pytest.fixture
def ledger() -> MockLedgerClient:
    """인메모리 원장"""
    return MockLedgerClient()


@pytest.fixture
def client(ledger: MockLedgerClient) -> TestClient:
    """메인넷/Nile 활성 TestClient (lifespan 미실행)"""
    composer = FeeComposer(
        simulation_client=ledger,
        contract_info_client=ledger,
        account_probe=ledger,
        parameter_cache=ChainParameterCache(ledger),
    )
    set_fee_composer(composer, [Network.MAINNET, Network.NILE])
    yield TestClient(app)
    set_fee_composer(None)
    Settings.reset()
