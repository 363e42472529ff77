"""
계정 활성화 수수료 감지

금액이 양수인 TRX 전송의 수신자가 원장에 없으면
미활성 수신자마다 고정 활성화 수수료를 부과.
"""

import logging
from decimal import Decimal

from adapters.interfaces import ILedgerAccountProbe
from core.constants import Defaults
from core.types import Network
from core.utils.tasks import gather_or_cancel
from engine.errors import ActivationProbeFailed
from engine.transaction import Transaction

logger = logging.getLogger(__name__)


class ActivationFeeDetector:
    """미활성 수신자 활성화 수수료 계산

    수신자별 확인은 동시에 수행. 확인 실패는 미활성으로 간주하며
    전체 계산을 중단하지 않음.

    Args:
        account_probe: 주소 존재 여부 확인 클라이언트
        activation_fee_trx: 수신자 1건당 수수료 (TRX)
    """

    def __init__(
        self,
        account_probe: ILedgerAccountProbe,
        activation_fee_trx: Decimal = Defaults.ACTIVATION_FEE_TRX,
    ):
        self.account_probe = account_probe
        self.activation_fee_trx = activation_fee_trx

    @staticmethod
    def recipients(transaction: Transaction) -> list[str]:
        """활성화 확인 대상 수신자 (중복 제거, 순서 유지)"""
        seen: dict[str, None] = {}
        for operation in transaction.operations:
            if (
                operation.is_native_transfer
                and operation.amount > 0
                and operation.to_address
            ):
                seen.setdefault(operation.to_address, None)
        return list(seen)

    async def detect_activation_fee(
        self,
        scope: Network,
        transaction: Transaction,
    ) -> Decimal:
        """활성화 수수료 합계 (TRX)

        Args:
            scope: 네트워크
            transaction: 트랜잭션

        Returns:
            미활성 수신자 수 × 활성화 수수료 (없으면 0)
        """
        recipients = self.recipients(transaction)
        if not recipients:
            return Decimal("0")

        results = await gather_or_cancel(
            *(self._is_activated(scope, address, transaction.visible) for address in recipients)
        )

        inactive = [address for address, active in zip(recipients, results) if not active]
        if inactive:
            logger.info(
                "미활성 수신자 감지",
                extra={"network": scope.value, "recipients": inactive},
            )

        return self.activation_fee_trx * len(inactive)

    async def _is_activated(self, scope: Network, address: str, visible: bool) -> bool:
        """주소 활성화 여부 (실패 시 False)"""
        try:
            return bool(await self.account_probe.account_exists(scope, address, visible))
        except Exception as e:
            failure = ActivationProbeFailed(address, str(e))
            logger.warning(
                "활성화 확인 실패, 미활성으로 간주",
                extra={"address": failure.address, "reason": failure.reason},
            )
            return False
