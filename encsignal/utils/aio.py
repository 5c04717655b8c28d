import asyncio
import logging
from typing import Awaitable, Callable, List

logger = logging.getLogger(__name__)


async def batched_gather(tasks: List[Callable[[], Awaitable]], batch_size: int) -> list:
    """
    Await coroutine factories at most batch_size at a time.
    Results are returned in the order of tasks, not in the order of completion.
    """
    assert batch_size >= 1
    results = []
    while tasks:
        logger.debug(f"tasks left {len(tasks)}")
        batch = tasks[:batch_size]
        batch = await asyncio.gather(*(t() for t in batch))
        tasks = tasks[batch_size:]
        results.extend(batch)
    return results


async def inexecutor(func, *args):
    """Run blocking func(*args) in the default executor"""
    return await asyncio.get_event_loop().run_in_executor(None, lambda: func(*args))
