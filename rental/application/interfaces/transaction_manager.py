from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Unit of work around a read-modify-write of the backing store."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
