from dishka import Provider, provide

from datayoinker.domain.yoink.command.publish import PublishYoinkHandler
from datayoinker.domain.yoink.query.get_all import GetAllYoinksHandler
from datayoinker.domain.yoink.query.get_last import GetLastYoinksHandler
from datayoinker.domain.yoink.query.get_latest import GetLatestYoinkHandler
from datayoinker.domain.yoink.service.ingestion import IngestionService
from datayoinker.domain.yoink.service.retrieval import RetrievalService
from datayoinker.util.di.scope import Scope


class YoinkProvider(Provider):
    """DI provider for yoink services and handlers."""

    # Services
    ingestion_service = provide(IngestionService, scope=Scope.UOW)
    retrieval_service = provide(RetrievalService, scope=Scope.UOW)

    # Command Handlers
    publish_handler = provide(PublishYoinkHandler, scope=Scope.UOW)

    # Query Handlers
    get_latest_handler = provide(GetLatestYoinkHandler, scope=Scope.UOW)
    get_last_handler = provide(GetLastYoinksHandler, scope=Scope.UOW)
    get_all_handler = provide(GetAllYoinksHandler, scope=Scope.UOW)
