"""Storage Call Guard — applies a caller-imposed timeout to repository coroutines.

Invariants:
    - timeout_seconds=None awaits the call unbounded
    - An expired timeout surfaces as BackendTimeoutError, never silently dropped
    - Exceptions raised by the call itself propagate unchanged
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from fincalc.core.errors import BackendTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_with_timeout(
    call: Awaitable[T], operation: str, timeout_seconds: float | None,
) -> T:
    if timeout_seconds is None:
        return await call
    try:
        return await asyncio.wait_for(call, timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.error(
            f"Storage {operation} exceeded {timeout_seconds}s",
            extra={"operation": operation, "error_code": "BACKEND_TIMEOUT"},
        )
        raise BackendTimeoutError(operation, timeout_seconds) from e
