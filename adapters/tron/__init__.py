"""
TRON Full Node HTTP 어댑터

TronGrid /wallet/* 엔드포인트 클라이언트 및 응답 파서.
"""

from adapters.tron.errors import TronApiError, TronResponseError
from adapters.tron.http_client import TronHttpClient

__all__ = [
    "TronApiError",
    "TronResponseError",
    "TronHttpClient",
]
