"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from typing import Any

from pydantic import BaseModel, Field


class FeeEstimateRequest(BaseModel):
    """Fee 추정 요청

    트랜잭션은 원장 JSON 형식 그대로 전달 (미서명 가능).
    """

    network: str = Field(default="mainnet", description="네트워크 이름 또는 CAIP-2 ID")
    transaction: dict[str, Any] = Field(..., description="원장 JSON 트랜잭션")
    available_energy: int = Field(default=0, ge=0, description="사용 가능 Energy")
    available_bandwidth: int = Field(default=0, ge=0, description="사용 가능 Bandwidth")
    fee_limit: int | None = Field(default=None, ge=0, description="최대 지불 의사 TRX (SUN)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "network": "mainnet",
                    "transaction": {
                        "txID": "c0ffee",
                        "visible": True,
                        "raw_data_hex": "0a02",
                        "raw_data": {
                            "contract": [
                                {
                                    "type": "TransferContract",
                                    "parameter": {
                                        "value": {
                                            "owner_address": "TOwner",
                                            "to_address": "TReceiver",
                                            "amount": 1000000,
                                        }
                                    },
                                }
                            ]
                        },
                    },
                    "available_energy": 0,
                    "available_bandwidth": 600,
                }
            ]
        }
    }
