"""PublishYoink command - store one reading for a topic."""

from datayoinker.domain.shared.handler import Command, CommandHandler
from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.service.ingestion import IngestionService


class PublishYoink(Command):
    topic: str
    params: dict[str, list[str]]


class PublishYoinkHandler(CommandHandler[PublishYoink, Yoink]):
    ingestion_service: IngestionService

    async def run(self, cmd: PublishYoink) -> Yoink:
        return await self.ingestion_service.publish(cmd.topic, cmd.params)
