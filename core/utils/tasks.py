"""
asyncio 동시 실행 유틸리티
"""

import asyncio
from typing import Any, Awaitable


async def gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    """awaitable 을 동시에 실행하고 결과를 순서대로 반환

    asyncio.gather 와 같지만 하나가 예외로 끝나면 남은 작업을
    취소하고 종료까지 기다린 뒤 원래 예외를 다시 던짐.
    (예외 타입은 ExceptionGroup 으로 감싸지 않음)

    Args:
        *aws: 코루틴 또는 Future

    Returns:
        입력 순서대로의 결과 목록
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
