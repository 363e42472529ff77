"""
트랜잭션 크기(Bandwidth) 추정

원장의 직렬화 크기 계산과 동일해야 함:
    raw_data 바이트 + 서명 바이트 + 결과 자리 표시자(64) + protobuf 오버헤드(5)
미서명 트랜잭션은 표준 서명 1개(65 byte)를 가정.
"""

from core.constants import TransactionSize
from engine.transaction import Transaction


class TransactionSizeEstimator:
    """과금 대상 트랜잭션 크기 계산기 (순수 함수)"""

    # 결과 자리 표시자 + tag/length prefix
    FIXED_OVERHEAD_BYTES: int = (
        TransactionSize.RESULT_PLACEHOLDER_BYTES + TransactionSize.PROTOBUF_OVERHEAD_BYTES
    )

    def estimate_bytes(self, transaction: Transaction) -> int:
        """Bandwidth 소비량(byte) 계산

        Args:
            transaction: 검증된 트랜잭션

        Returns:
            과금 byte 수

        Example:
            raw_data 66 byte, 미서명 → 66 + 65 + 64 + 5 = 200
        """
        raw_bytes = len(transaction.raw_data_hex) // 2

        if transaction.is_signed:
            signature_bytes = sum(len(sig) // 2 for sig in transaction.signatures)
        else:
            signature_bytes = TransactionSize.SIGNATURE_BYTES

        return raw_bytes + signature_bytes + self.FIXED_OVERHEAD_BYTES
