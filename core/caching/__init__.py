"""
캐시 패키지

만료 시각(expires_at)을 값과 함께 저장하는 인메모리 캐시
"""

from core.caching.expiring_cache import CacheEntry, ExpiringCache

__all__ = [
    "CacheEntry",
    "ExpiringCache",
]
