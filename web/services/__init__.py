"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.fee_service import FeeService, UnsupportedNetworkError

__all__ = [
    "FeeService",
    "UnsupportedNetworkError",
]
