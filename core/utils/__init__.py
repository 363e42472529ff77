"""
유틸리티 패키지

시간(UTC 밀리초) 처리, 동시 실행 등 공통 유틸리티
"""

from core.utils.tasks import gather_or_cancel
from core.utils.timezone import (
    now_utc,
    now_ms,
    utc_from_timestamp_ms,
    to_timestamp_ms,
)

__all__ = [
    "gather_or_cancel",
    "now_utc",
    "now_ms",
    "utc_from_timestamp_ms",
    "to_timestamp_ms",
]
