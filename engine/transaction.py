"""
트랜잭션 입력 모델

원장 JSON 트랜잭션을 불변 Transaction / Operation 으로 변환.
엔진은 입력을 변경하지 않음. hex 검증은 파싱 시점에 수행.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from core.types import ContractType
from engine.errors import InvalidTransactionError


_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True)
class Operation:
    """트랜잭션 내 단일 동작 (contract)

    Attributes:
        type_name: 원본 contract 타입 이름
        contract_type: ContractType (알 수 없는 이름이면 None)
        owner_address: 서명자(호출자) 주소
        to_address: 수신자 주소 (전송)
        amount: 전송량 (TRX는 SUN 단위)
        contract_address: 대상 컨트랙트 주소 (스마트 컨트랙트 호출)
        data: 호출 데이터 (hex)
        call_value: 함께 전송하는 TRX (SUN)
        token_id: TRC10 토큰 ID
        call_token_value: TRC10 전송량
        parameter: 원본 parameter.value
    """

    type_name: str
    contract_type: ContractType | None
    owner_address: str | None = None
    to_address: str | None = None
    amount: int = 0
    contract_address: str | None = None
    data: str = ""
    call_value: int = 0
    token_id: str | None = None
    call_token_value: int | None = None
    parameter: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_native_transfer(self) -> bool:
        """TRX 전송 여부"""
        return self.contract_type == ContractType.TRANSFER

    @classmethod
    def from_dict(cls, contract: Mapping[str, Any]) -> "Operation":
        """raw_data.contract[i] -> Operation

        Raises:
            InvalidTransactionError: type 누락 또는 숫자 필드 형식 오류
        """
        if not isinstance(contract, Mapping):
            raise InvalidTransactionError("contract 항목은 JSON 객체여야 합니다")

        type_name = contract.get("type")
        if not isinstance(type_name, str) or not type_name:
            raise InvalidTransactionError("contract 'type' 필드가 없습니다")

        parameter = contract.get("parameter") or {}
        value = (parameter.get("value") or {}) if isinstance(parameter, Mapping) else None
        if not isinstance(value, Mapping):
            raise InvalidTransactionError(
                f"{type_name}: parameter.value 형식이 잘못되었습니다"
            )

        token_id = value.get("token_id", value.get("asset_name"))

        return cls(
            type_name=type_name,
            contract_type=ContractType.parse(type_name),
            owner_address=value.get("owner_address"),
            to_address=value.get("to_address"),
            amount=_as_int(value.get("amount"), "amount", type_name),
            contract_address=value.get("contract_address"),
            data=value.get("data") or "",
            call_value=_as_int(value.get("call_value"), "call_value", type_name),
            token_id=str(token_id) if token_id is not None else None,
            call_token_value=(
                _as_int(value.get("call_token_value"), "call_token_value", type_name)
                if value.get("call_token_value") is not None
                else None
            ),
            parameter=dict(value),
        )


@dataclass(frozen=True)
class Transaction:
    """원장 트랜잭션 (서명 여부 무관)

    Attributes:
        raw_data_hex: 직렬화된 raw_data (hex)
        operations: Operation 목록 (순서 유지)
        signatures: 서명 목록 (hex). 미서명이면 빈 튜플
        tx_id: 트랜잭션 ID (선택)
        visible: 주소가 base58 형식이면 True
    """

    raw_data_hex: str
    operations: tuple[Operation, ...]
    signatures: tuple[str, ...] = ()
    tx_id: str | None = None
    visible: bool = False

    @property
    def is_signed(self) -> bool:
        """서명 포함 여부"""
        return len(self.signatures) > 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """원장 JSON 트랜잭션 -> Transaction

        입력 예시:
        {
            "visible": false,
            "txID": "c6f0...",
            "raw_data": {"contract": [{"type": "TransferContract", "parameter": {...}}]},
            "raw_data_hex": "0a02...",
            "signature": ["9f1e..."]
        }

        Raises:
            InvalidTransactionError: 형식 오류
        """
        if not isinstance(data, Mapping):
            raise InvalidTransactionError("트랜잭션은 JSON 객체여야 합니다")

        raw_data_hex = data.get("raw_data_hex")
        if not isinstance(raw_data_hex, str) or not raw_data_hex:
            raise InvalidTransactionError("raw_data_hex 필드가 없습니다")
        _ensure_hex(raw_data_hex, "raw_data_hex")

        raw_data = data.get("raw_data") or {}
        contracts = raw_data.get("contract") if isinstance(raw_data, Mapping) else None
        if not isinstance(contracts, list) or not contracts:
            raise InvalidTransactionError("raw_data.contract 가 비어 있습니다")

        signatures = data.get("signature") or []
        if not isinstance(signatures, list):
            raise InvalidTransactionError("signature 는 목록이어야 합니다")
        for index, signature in enumerate(signatures):
            if not isinstance(signature, str):
                raise InvalidTransactionError(f"signature[{index}] 는 문자열이어야 합니다")
            _ensure_hex(signature, f"signature[{index}]")

        return cls(
            raw_data_hex=raw_data_hex,
            operations=tuple(Operation.from_dict(c) for c in contracts),
            signatures=tuple(signatures),
            tx_id=data.get("txID"),
            visible=bool(data.get("visible", False)),
        )


def _ensure_hex(value: str, field_name: str) -> None:
    """짝수 길이 hex 문자열인지 검증"""
    if len(value) % 2 != 0 or not _HEX_PATTERN.fullmatch(value):
        raise InvalidTransactionError(f"{field_name} 가 올바른 hex가 아닙니다")


def _as_int(value: Any, field_name: str, type_name: str) -> int:
    """숫자 필드 정수 변환 (누락 시 0)"""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidTransactionError(f"{type_name}: {field_name} 형식 오류")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidTransactionError(f"{type_name}: {field_name} 형식 오류") from e
