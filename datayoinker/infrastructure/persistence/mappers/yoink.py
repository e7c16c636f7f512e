"""Yoink mapper - converts database rows to stored yoinks."""

from datetime import UTC, datetime
from typing import Any

from datayoinker.domain.yoink.model.value import StoredYoink


def _as_utc(value: datetime | str) -> datetime:
    # SQLite CURRENT_TIMESTAMP is UTC but comes back without an offset
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def row_to_stored_yoink(row: dict[str, Any]) -> StoredYoink:
    """Convert database row to StoredYoink."""
    return StoredYoink(
        id=row["id"],
        topic=row["topic"],
        timestamp=_as_utc(row["timestamp"]),
        content=row["content"],
    )
