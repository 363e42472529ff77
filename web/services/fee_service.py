"""
Fee 서비스

Web 요청을 엔진 입력으로 변환하고 FeeComposer 결과를 응답으로 변환.
"""

import logging

from core.types import Network
from engine.composer import FeeComposer
from engine.transaction import Transaction
from web.models.requests import FeeEstimateRequest
from web.models.responses import FeeAssetResponse, FeeEstimateResponse, FeeItemResponse

logger = logging.getLogger(__name__)


class UnsupportedNetworkError(ValueError):
    """알 수 없거나 비활성화된 네트워크"""

    pass


class FeeService:
    """Fee 추정 서비스

    Args:
        composer: FeeComposer
        active_networks: 요청 허용 네트워크
    """

    def __init__(self, composer: FeeComposer, active_networks: list[Network]):
        self.composer = composer
        self.active_networks = list(active_networks)

    def resolve_network(self, name: str) -> Network:
        """요청 네트워크 이름 → Network

        Raises:
            UnsupportedNetworkError: 알 수 없거나 비활성화된 네트워크
        """
        try:
            network = Network.from_name(name)
        except ValueError as e:
            raise UnsupportedNetworkError(str(e)) from e

        if network not in self.active_networks:
            raise UnsupportedNetworkError(
                f"활성화되지 않은 네트워크입니다: {network.value}"
            )
        return network

    async def estimate(self, request: FeeEstimateRequest) -> FeeEstimateResponse:
        """Fee 추정

        Raises:
            UnsupportedNetworkError: 네트워크 오류
            InvalidTransactionError: 트랜잭션 형식 오류
            ParameterFetchFailed: 체인 파라미터 조회 실패
        """
        network = self.resolve_network(request.network)
        transaction = Transaction.from_dict(request.transaction)

        breakdown = await self.composer.compute_fee(
            network,
            transaction,
            available_energy=request.available_energy,
            available_bandwidth=request.available_bandwidth,
            fee_limit=request.fee_limit,
        )

        fees = [
            FeeItemResponse(
                type="base",
                asset=FeeAssetResponse(
                    unit=entry.unit,
                    type=entry.asset_id,
                    amount=str(entry.amount),
                    fungible=True,
                ),
            )
            for entry in breakdown
        ]

        return FeeEstimateResponse(
            network=network.value,
            tx_id=transaction.tx_id,
            fees=fees,
            native_total=str(breakdown.native_total()),
        )
