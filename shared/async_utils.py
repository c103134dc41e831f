# shared/async_utils.py
import asyncio
import nest_asyncio
from typing import Coroutine, Optional, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine, timeout: Optional[float] = None) -> T:
    """
    Helper to run async coroutines in Flask sync context

    Args:
        coro: Async coroutine to execute
        timeout: Seconds before asyncio.TimeoutError is raised; None waits forever

    Returns:
        Result from the coroutine
    """
    if timeout is not None:
        coro = asyncio.wait_for(coro, timeout=timeout)

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None:
        # Apply nest_asyncio if loop is already running
        nest_asyncio.apply(loop)
        return loop.run_until_complete(coro)

    # No running loop, run on a fresh one and close it afterwards
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        return loop.run_until_complete(coro)
    finally:
        asyncio.set_event_loop(None)
        loop.close()
