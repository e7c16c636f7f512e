"""GetLastYoinks query handler - bounded window of the newest yoinks."""

from datayoinker.domain.shared.handler import Query, QueryHandler
from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.service.ingestion import require_topic
from datayoinker.domain.yoink.service.retrieval import RetrievalService, parse_count


class GetLastYoinks(Query):
    topic: str
    number: str  # raw path text, validated by the handler


class GetLastYoinksHandler(QueryHandler[GetLastYoinks, list[Yoink]]):
    retrieval_service: RetrievalService

    async def run(self, query: GetLastYoinks) -> list[Yoink]:
        require_topic(query.topic)
        count = parse_count(query.number)
        return await self.retrieval_service.get_last(query.topic, count)
