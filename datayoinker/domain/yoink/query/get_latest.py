"""GetLatestYoink query handler."""

from datayoinker.domain.shared.handler import Query, QueryHandler
from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.service.retrieval import RetrievalService


class GetLatestYoink(Query):
    topic: str


class GetLatestYoinkHandler(QueryHandler[GetLatestYoink, Yoink | None]):
    retrieval_service: RetrievalService

    async def run(self, query: GetLatestYoink) -> Yoink | None:
        return await self.retrieval_service.get_latest(query.topic)
