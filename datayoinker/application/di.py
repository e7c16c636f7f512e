from dishka import AsyncContainer, make_async_container

from datayoinker.config import Config
from datayoinker.domain.yoink.util.di import YoinkProvider
from datayoinker.infrastructure.persistence import PersistenceProvider
from datayoinker.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        PersistenceProvider(),
        YoinkProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
