"""Schema creation at startup.

Runs unconditionally on every start; only missing tables and indexes are created.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from datayoinker.domain.shared.error import StorageError
from datayoinker.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create the yoinks table if it does not exist. Idempotent."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all, checkfirst=True)
    except SQLAlchemyError as e:
        raise StorageError(str(e), detail="Error creating database schema") from e
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))
