"""
Protocol 인터페이스 테스트

Protocol 타입 검증 및 구현 확인.
"""

import pytest

from adapters.interfaces import (
    ILedgerAccountProbe,
    ILedgerContractInfoClient,
    ILedgerParameterClient,
    ILedgerSimulationClient,
)
from adapters.mock.ledger_client import MockLedgerClient
from adapters.tron.http_client import TronHttpClient


ALL_PROTOCOLS = [
    ILedgerSimulationClient,
    ILedgerContractInfoClient,
    ILedgerAccountProbe,
    ILedgerParameterClient,
]


class TestMockLedgerClientProtocols:
    """MockLedgerClient Protocol 준수 테스트"""

    @pytest.mark.parametrize("protocol", ALL_PROTOCOLS)
    def test_implements_protocol(self, protocol: type) -> None:
        """Mock 클라이언트가 Protocol을 구현하는지 확인"""
        assert isinstance(MockLedgerClient(), protocol)


class TestTronHttpClientProtocols:
    """TronHttpClient Protocol 준수 테스트"""

    @pytest.mark.parametrize("protocol", ALL_PROTOCOLS)
    def test_implements_protocol(self, protocol: type) -> None:
        """HTTP 클라이언트가 Protocol을 구현하는지 확인"""
        assert isinstance(TronHttpClient(), protocol)


class TestProtocolMismatch:
    """Protocol 미준수 객체"""

    def test_object_without_methods(self) -> None:
        """메서드가 없으면 Protocol 불일치"""

        class Empty:
            pass

        for protocol in ALL_PROTOCOLS:
            assert not isinstance(Empty(), protocol)
