"""
TRON API 응답 -> 공통 모델 변환

TronGrid /wallet/* 응답을 adapters.models의 표준 모델로 변환.
원장은 protobuf 기본값(0, false)을 JSON에서 생략하므로 누락 필드는 기본값 처리.
"""

from typing import Any

from adapters.models import (
    ChainParameter,
    ContractSubsidyInfo,
    SimulationRequest,
    SimulationResult,
)
from adapters.tron.errors import TronResponseError


# 실행 성공으로 간주하는 트랜잭션 결과 코드
SUCCESS_RET_CODES = frozenset({"SUCCESS", "DEFAULT"})


def build_simulation_body(request: SimulationRequest) -> dict[str, Any]:
    """SimulationRequest -> triggerconstantcontract 요청 본문

    값이 없는 선택 필드는 본문에서 제외.
    """
    body: dict[str, Any] = {
        "owner_address": request.caller_address,
        "contract_address": request.contract_address,
        "data": request.data,
        "call_value": request.call_value,
        "visible": request.visible,
    }
    if request.token_id is not None:
        body["token_id"] = request.token_id
    if request.call_token_value is not None:
        body["call_token_value"] = request.call_token_value
    return body


def parse_simulation_result(data: dict[str, Any]) -> SimulationResult:
    """triggerconstantcontract 응답 -> SimulationResult

    응답 예시:
    {
        "result": {"result": true},
        "energy_used": 29631,
        "energy_penalty": 0,
        "constant_result": ["0000...0001"],
        "transaction": {"ret": [{}], "txID": "...", "raw_data": {...}}
    }

    실패 조건:
    - result.result 가 false
    - transaction.ret 에 SUCCESS 이외의 코드 (REVERT, OUT_OF_ENERGY 등)
    """
    result = data.get("result") or {}
    success = bool(result.get("result", False))
    message = result.get("message")

    # revert 는 result.result=true 로 오면서 ret 에 실패 코드가 실림
    transaction = data.get("transaction") or {}
    for ret in transaction.get("ret") or []:
        code = (ret or {}).get("ret")
        if code and code not in SUCCESS_RET_CODES:
            success = False
            message = message or code

    energy_used = data.get("energy_used")
    energy_penalty = data.get("energy_penalty")

    return SimulationResult(
        success=success,
        energy_used=int(energy_used) if energy_used is not None else None,
        energy_penalty=int(energy_penalty) if energy_penalty is not None else None,
        message=_decode_message(message),
    )


def parse_contract_info(data: dict[str, Any]) -> ContractSubsidyInfo | None:
    """getcontract 응답 -> ContractSubsidyInfo

    응답 예시:
    {
        "origin_address": "41...",
        "contract_address": "41...",
        "consume_user_resource_percent": 30,
        "origin_energy_limit": 10000000,
        "name": "TetherToken"
    }

    컨트랙트가 없으면 빈 객체({})가 오며 None 반환.
    존재하는 컨트랙트에서 consume_user_resource_percent 가 없으면 값 0 이 생략된 것.
    """
    if not data or not (data.get("contract_address") or data.get("origin_address")):
        return None

    percent = data.get("consume_user_resource_percent", 0)
    limit = data.get("origin_energy_limit", 0)

    try:
        return ContractSubsidyInfo(
            origin_address=data.get("origin_address"),
            caller_resource_percent=int(percent),
            deployer_subsidy_limit=int(limit),
        )
    except (TypeError, ValueError) as e:
        raise TronResponseError(
            f"컨트랙트 정보 형식 오류: {e}",
            path="/wallet/getcontract",
        ) from e


def parse_account_exists(data: dict[str, Any]) -> bool:
    """getaccount 응답 -> 존재 여부

    미활성 주소는 빈 객체({})로 응답.
    """
    return bool(data and data.get("address"))


def parse_chain_parameters(data: dict[str, Any]) -> list[ChainParameter]:
    """getchainparameters 응답 -> ChainParameter 목록

    응답 예시:
    {
        "chainParameter": [
            {"key": "getMaintenanceTimeInterval", "value": 21600000},
            {"key": "getTransactionFee", "value": 1000},
            {"key": "getEnergyFee", "value": 100},
            {"key": "getAllowCreationOfContracts"}
        ]
    }
    """
    raw_params = data.get("chainParameter")
    if not isinstance(raw_params, list):
        raise TronResponseError(
            "chainParameter 필드가 없습니다",
            path="/wallet/getchainparameters",
        )

    parameters: list[ChainParameter] = []
    for raw in raw_params:
        key = raw.get("key") if isinstance(raw, dict) else None
        if not isinstance(key, str):
            raise TronResponseError(
                f"잘못된 체인 파라미터 항목: {raw!r}",
                path="/wallet/getchainparameters",
            )
        value = raw.get("value")
        parameters.append(
            ChainParameter(key=key, value=int(value) if value is not None else None)
        )
    return parameters


def _decode_message(message: str | None) -> str | None:
    """실패 메시지 디코딩 (원장은 hex 인코딩 문자열로 반환하기도 함)"""
    if not message:
        return None
    try:
        return bytes.fromhex(message).decode("utf-8")
    except (ValueError, UnicodeDecodeError):
        return message
