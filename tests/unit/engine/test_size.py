"""
트랜잭션 크기(Bandwidth) 추정 테스트
"""

from engine.size import TransactionSizeEstimator


class TestTransactionSizeEstimator:
    """TransactionSizeEstimator 테스트"""

    def test_unsigned_assumes_one_signature(self, transfer_tx) -> None:
        """raw_data 66 byte, 미서명 → 66 + 65 + 64 + 5 = 200"""
        tx = transfer_tx(raw_bytes=66)

        assert TransactionSizeEstimator().estimate_bytes(tx) == 200

    def test_signed_uses_actual_signatures(self, transfer_tx) -> None:
        """서명 2개 (multi-sig)"""
        tx = transfer_tx(raw_bytes=66, signatures=["ab" * 65, "cd" * 65])

        assert TransactionSizeEstimator().estimate_bytes(tx) == 66 + 130 + 64 + 5

    def test_signed_single_equals_unsigned(self, transfer_tx) -> None:
        """표준 서명 1개면 미서명 추정과 동일"""
        estimator = TransactionSizeEstimator()

        assert estimator.estimate_bytes(transfer_tx(signatures=["ab" * 65])) == (
            estimator.estimate_bytes(transfer_tx())
        )

    def test_pure(self, transfer_tx) -> None:
        """같은 입력 같은 결과"""
        tx = transfer_tx(raw_bytes=120)
        estimator = TransactionSizeEstimator()

        assert estimator.estimate_bytes(tx) == estimator.estimate_bytes(tx) == 254
