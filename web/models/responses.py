"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    environment: str = Field(..., description="실행 환경 (production/local/test)")
    networks: list[str] = Field(default_factory=list, description="활성 네트워크 (CAIP-2)")
    version: str = Field(..., description="API 버전")


class FeeAssetResponse(BaseModel):
    """Fee 자산 정보"""

    unit: str = Field(..., description="단위 (ENERGY/BANDWIDTH/TRX)")
    type: str = Field(..., description="CAIP-19 자산 ID")
    amount: str = Field(..., description="수량 (문자열 Decimal)")
    fungible: bool = Field(default=True, description="대체 가능 여부")


class FeeItemResponse(BaseModel):
    """Fee 항목"""

    type: str = Field(default="base", description="Fee 유형")
    asset: FeeAssetResponse


class FeeEstimateResponse(BaseModel):
    """Fee 추정 응답 (Energy → Bandwidth → TRX 순서)"""

    network: str = Field(..., description="네트워크 CAIP-2 ID")
    tx_id: str | None = Field(default=None, description="트랜잭션 ID")
    fees: list[FeeItemResponse] = Field(default_factory=list, description="Fee 항목")
    native_total: str = Field(..., description="TRX 지불 총액")
