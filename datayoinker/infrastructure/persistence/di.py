from typing import AsyncIterable

from dishka import Provider, from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from datayoinker.config import Config
from datayoinker.domain.yoink.port.repository import YoinkRepository
from datayoinker.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from datayoinker.infrastructure.persistence.repository.yoink import (
    SQLAlchemyYoinkRepository,
)
from datayoinker.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped: one engine per process, disposed when the container closes
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per request)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session

    yoink_repo = provide(SQLAlchemyYoinkRepository, scope=Scope.UOW, provides=YoinkRepository)
