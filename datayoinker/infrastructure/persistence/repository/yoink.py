"""SQLAlchemy implementation of YoinkRepository."""

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from datayoinker.domain.shared.error import StorageError
from datayoinker.domain.yoink.model.value import StoredYoink
from datayoinker.domain.yoink.port.repository import YoinkRepository
from datayoinker.infrastructure.persistence.mappers.yoink import row_to_stored_yoink
from datayoinker.infrastructure.persistence.tables import yoinks_table

logger = logging.getLogger(__name__)

_COLUMNS = (
    yoinks_table.c.id,
    yoinks_table.c.topic,
    yoinks_table.c.timestamp,
    yoinks_table.c.content,
)


class SQLAlchemyYoinkRepository(YoinkRepository):
    """SQLAlchemy implementation of YoinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, topic: str, content: str) -> StoredYoink:
        """Insert a row and commit. Yoinks are immutable, so this is insert-only.

        All columns come back from the insert itself so the caller sees
        exactly what was saved.
        """
        stmt = insert(yoinks_table).values(topic=topic, content=content).returning(*_COLUMNS)
        try:
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to append yoink to topic %r: %s", topic, e)
            raise StorageError(str(e), detail="Error inserting data to database") from e
        return row_to_stored_yoink(dict(row))

    async def query(self, topic: str, limit: int | None = None) -> list[StoredYoink]:
        """Rows for a topic, newest first. Id breaks timestamp ties."""
        stmt = (
            select(*_COLUMNS)
            .where(yoinks_table.c.topic == topic)
            .order_by(yoinks_table.c.timestamp.desc(), yoinks_table.c.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise StorageError(str(e), detail="Error getting data from database") from e
        return [row_to_stored_yoink(dict(row)) for row in rows]
