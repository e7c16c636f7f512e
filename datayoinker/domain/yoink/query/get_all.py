"""GetAllYoinks query handler."""

from datayoinker.domain.shared.handler import Query, QueryHandler
from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.service.retrieval import RetrievalService


class GetAllYoinks(Query):
    topic: str


class GetAllYoinksHandler(QueryHandler[GetAllYoinks, list[Yoink]]):
    retrieval_service: RetrievalService

    async def run(self, query: GetAllYoinks) -> list[Yoink]:
        return await self.retrieval_service.get_all(query.topic)
