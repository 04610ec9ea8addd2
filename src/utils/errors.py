"""Error handling helpers shared by the converter components.

Optional side operations (clipboard writes, local file reads) should not take
the orchestrator down when they fail. They go through safe_execute_async,
which logs the failure as a warning and hands back a default value instead.
"""

from typing import Any, Awaitable

from src.utils.logger import logger


async def safe_execute_async(coro: Awaitable[Any], operation_name: str, default_return: Any = None) -> Any:
    """Await a side operation, logging and swallowing any exception.

    Returns:
        Result of the awaitable, or default_return if it raised.

    Example:
        ok = await safe_execute_async(clipboard.write_text(text), "Clipboard write", default_return=False)
    """
    try:
        return await coro
    except Exception as e:
        logger.warning(f"{operation_name}: {e}")
        return default_return
