"""
시간 유틸리티

내부 계산은 UTC 밀리초 타임스탬프 기준 (원장 API와 동일 단위)
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """현재 UTC 시간의 밀리초 타임스탬프

    ChainParameterCache 등 만료 시각 계산의 기본 clock.
    """
    return to_timestamp_ms(now_utc())


def utc_from_timestamp_ms(ts_ms: int) -> datetime:
    """밀리초 타임스탬프를 UTC datetime으로 변환
    
    Args:
        ts_ms: Unix 타임스탬프 (밀리초)
        
    Returns:
        UTC datetime
        
    Example:
        >>> utc_from_timestamp_ms(1708444800000)
        datetime(2024, 2, 20, 16, 0, 0, tzinfo=timezone.utc)
    """
    return datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc)


def to_timestamp_ms(dt: datetime) -> int:
    """datetime을 밀리초 타임스탬프로 변환
    
    Args:
        dt: datetime 객체 (타임존 포함 권장)
        
    Returns:
        Unix 타임스탬프 (밀리초)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)
