"""
Bugboard Backend — Shared Service Plumbing
============================================

What:  Base class for the post and bug services.
Why:   Both services call the document store the same way: under a deadline,
       with unexpected driver errors logged and translated into DatabaseError.
How:   `_store_call` applies STORE_TIMEOUT_SECONDS to one store coroutine;
       `_store_failures` wraps a whole operation and converts anything that is
       not already a BugboardError.

Loggers are injected at construction so tests can pass a capturing logger.
"""

import asyncio
import logging
from contextlib import contextmanager
from typing import Any, Awaitable, Iterator, Optional

from app.config import settings
from app.exceptions import BugboardError, DatabaseError, StoreTimeoutError


class PipelineService:

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        store_timeout: Optional[float] = None,
    ):
        self.logger = logger or logging.getLogger(type(self).__module__)
        # None → use settings; 0 → no deadline
        self.store_timeout = (
            settings.store_timeout_seconds if store_timeout is None else store_timeout
        )

    async def _store_call(self, awaitable: Awaitable[Any], operation: str) -> Any:
        if not self.store_timeout:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout=self.store_timeout)
        except asyncio.TimeoutError:
            raise StoreTimeoutError(
                self.store_timeout, context={"operation": operation}
            ) from None

    @contextmanager
    def _store_failures(self, message: str, **meta: Any) -> Iterator[None]:
        try:
            yield
        except BugboardError:
            raise
        except Exception as e:
            self.logger.error(message, extra={**meta, "error": str(e)}, exc_info=True)
            raise DatabaseError(
                message=message,
                context={**meta, "error_type": type(e).__name__},
            ) from e
