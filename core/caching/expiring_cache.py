"""
만료 시각 기반 인메모리 캐시

고정 TTL 대신 값마다 만료 시각(expires_at, ms)을 함께 저장.
만료 시각은 호출자가 계산 (예: 다음 유지보수 경계).
"""

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(frozen=True)
class CacheEntry:
    """캐시 항목

    Attributes:
        value: 캐시된 값
        expires_at: 만료 시각 (Unix ms). now >= expires_at 이면 만료
    """

    value: Any
    expires_at: int

    def is_valid(self, now: int) -> bool:
        """now 시점에 유효한지 여부"""
        return now < self.expires_at


class ExpiringCache:
    """키별 (value, expires_at) 저장소

    현재 시각은 조회 시 인자로 받음 (clock 주입은 사용하는 쪽 책임).
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, CacheEntry] = {}

    def get(self, key: Hashable, now: int) -> CacheEntry | None:
        """유효한 캐시 항목 조회

        만료된 항목은 제거 후 None 반환.

        Args:
            key: 캐시 키
            now: 현재 시각 (Unix ms)

        Returns:
            유효한 CacheEntry 또는 None
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_valid(now):
            del self._entries[key]
            return None
        return entry

    def set(self, key: Hashable, value: Any, expires_at: int) -> CacheEntry:
        """값 저장 (기존 항목 덮어쓰기)"""
        entry = CacheEntry(value=value, expires_at=expires_at)
        self._entries[key] = entry
        return entry

    def invalidate(self, key: Hashable | None = None) -> None:
        """항목 제거 (key가 None이면 전체 제거)"""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
