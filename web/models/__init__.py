"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import FeeEstimateRequest
from web.models.responses import (
    FeeAssetResponse,
    FeeEstimateResponse,
    FeeItemResponse,
    HealthResponse,
)

__all__ = [
    # Requests
    "FeeEstimateRequest",
    # Responses
    "FeeAssetResponse",
    "FeeEstimateResponse",
    "FeeItemResponse",
    "HealthResponse",
]
