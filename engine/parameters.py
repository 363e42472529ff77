"""
체인 파라미터 캐시

원장 전역 파라미터(단가, 유지보수 주기)는 유지보수 시점에만 바뀜.
다음 유지보수 경계까지 네트워크별로 캐시.

경계 계산:
    next_boundary = interval * (floor(now / interval) + 1)
now가 정확히 경계 위에 있으면 다음 경계로 진행 (즉시 만료로 보지 않음).
"""

import asyncio
import logging
from decimal import Decimal
from typing import Callable

from adapters.interfaces import ILedgerParameterClient
from adapters.models import ChainParameter, find_parameter
from core.caching import ExpiringCache
from core.constants import ChainParameterKeys, Defaults
from core.types import Network
from core.utils.timezone import now_ms, utc_from_timestamp_ms
from engine.errors import ParameterFetchFailed

logger = logging.getLogger(__name__)


def next_maintenance_boundary(now: int, interval: int) -> int:
    """now 이후(엄격히 큰) 첫 유지보수 경계 시각

    Args:
        now: 현재 시각 (Unix ms)
        interval: 유지보수 주기 (ms, 양수)

    Returns:
        다음 경계 시각 (Unix ms)

    Example:
        >>> next_maintenance_boundary(1_000, 600)
        1200
        >>> next_maintenance_boundary(1_200, 600)
        1800
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive: {interval}")
    return interval * (now // interval + 1)


class ChainParameterCache:
    """네트워크별 체인 파라미터 캐시

    - 캐시 미스 시 원장에서 전체 파라미터 조회 후 다음 유지보수 경계까지 보관
    - 네트워크별 asyncio.Lock 으로 동시 미스 시 조회 1회로 직렬화
    - 조회 실패는 ParameterFetchFailed 로 전파, 캐시에 저장하지 않음

    Args:
        client: 체인 파라미터 조회 클라이언트
        clock: 현재 시각(ms) 함수 (테스트에서 주입)
    """

    def __init__(
        self,
        client: ILedgerParameterClient,
        clock: Callable[[], int] = now_ms,
    ):
        self.client = client
        self.clock = clock

        self._cache = ExpiringCache()
        self._locks: dict[Network, asyncio.Lock] = {}

    def _lock_for(self, scope: Network) -> asyncio.Lock:
        lock = self._locks.get(scope)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[scope] = lock
        return lock

    async def get_parameters(self, scope: Network) -> list[ChainParameter]:
        """체인 파라미터 조회 (캐시 우선)

        Args:
            scope: 네트워크

        Returns:
            ChainParameter 목록

        Raises:
            ParameterFetchFailed: 캐시 미스 후 조회 실패
        """
        entry = self._cache.get(scope, self.clock())
        if entry is not None:
            return entry.value

        async with self._lock_for(scope):
            # 대기 중 다른 호출이 갱신했을 수 있음
            entry = self._cache.get(scope, self.clock())
            if entry is not None:
                return entry.value

            return await self._refresh(scope)

    async def _refresh(self, scope: Network) -> list[ChainParameter]:
        """원장에서 파라미터 조회 후 캐시 저장"""
        try:
            parameters = await self.client.get_chain_parameters(scope)
        except Exception as e:
            logger.error(
                "체인 파라미터 조회 실패",
                extra={"network": scope.value, "error": str(e)},
            )
            raise ParameterFetchFailed(scope, e) from e

        interval = find_parameter(
            parameters,
            ChainParameterKeys.MAINTENANCE_INTERVAL,
            Defaults.MAINTENANCE_INTERVAL_MS,
        )
        if interval is None or interval <= 0:
            interval = Defaults.MAINTENANCE_INTERVAL_MS

        now = self.clock()
        expires_at = next_maintenance_boundary(now, interval)
        self._cache.set(scope, parameters, expires_at)

        logger.info(
            "체인 파라미터 갱신",
            extra={
                "network": scope.value,
                "count": len(parameters),
                "ttl_ms": expires_at - now,
                "expires_at": utc_from_timestamp_ms(expires_at).isoformat(),
            },
        )
        return parameters

    async def get_price(self, scope: Network, key: str, default: int) -> Decimal:
        """단가 파라미터 조회 (SUN 단위, 키가 없으면 default)"""
        parameters = await self.get_parameters(scope)
        value = find_parameter(parameters, key, default)
        return Decimal(value if value is not None else default)

    def invalidate(self, scope: Network | None = None) -> None:
        """캐시 무효화 (scope가 None이면 전체)"""
        self._cache.invalidate(scope)
