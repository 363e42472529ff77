"""
Fee API 라우터

POST /api/fees/estimate - 트랜잭션 Fee 추정
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from engine.errors import InvalidTransactionError, ParameterFetchFailed
from web.dependencies import get_fee_service
from web.models.requests import FeeEstimateRequest
from web.models.responses import FeeEstimateResponse
from web.services.fee_service import FeeService, UnsupportedNetworkError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/fees", tags=["Fees"])


@router.post("/estimate", response_model=FeeEstimateResponse)
async def estimate_fee(
    request: FeeEstimateRequest,
    service: FeeService = Depends(get_fee_service),
) -> FeeEstimateResponse:
    """트랜잭션 Fee 추정

    서명 전 확인 화면에 표시할 Energy/Bandwidth 소비량과 TRX 비용을 계산합니다.

    Args:
        request: 네트워크, 트랜잭션, 사용 가능 리소스, fee_limit

    Returns:
        Fee 항목 (Energy → Bandwidth → TRX)
    """
    try:
        return await service.estimate(request)
    except (UnsupportedNetworkError, InvalidTransactionError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ParameterFetchFailed as e:
        logger.error(
            "Fee 추정 실패: 체인 파라미터 조회 불가",
            extra={"network": e.scope.value},
        )
        raise HTTPException(status_code=503, detail=str(e))
