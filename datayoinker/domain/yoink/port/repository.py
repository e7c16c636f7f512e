"""YoinkRepository port - the storage gateway both engines rely on."""

from abc import abstractmethod
from typing import Protocol

from datayoinker.domain.yoink.model.value import StoredYoink


class YoinkRepository(Protocol):
    """Append-only, per-topic store.

    The store assigns ids and timestamps. Rows are visible to any query
    issued after ``append`` returns.
    """

    @abstractmethod
    async def append(self, topic: str, content: str) -> StoredYoink:
        """Durably append one row and return it as stored."""
        ...

    @abstractmethod
    async def query(self, topic: str, limit: int | None = None) -> list[StoredYoink]:
        """Rows for a topic, newest first (timestamp then id, descending)."""
        ...
