"""RetrievalService - ordered, bounded read-back of a topic's history."""

from datayoinker.domain.shared.error import ValidationError
from datayoinker.domain.shared.handler import Service
from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.port.repository import YoinkRepository
from datayoinker.domain.yoink.service.ingestion import require_topic, to_yoink
from datayoinker.domain.yoink.util.content import parse_int64


def _out_of_range() -> ValidationError:
    return ValidationError(
        "number is less than 1",
        code="number_out_of_range",
        detail="Error validating number of yoinks",
        field="number",
    )


def parse_count(raw: str) -> int:
    """Parse the number of yoinks requested from its path text.

    Raises:
        ValidationError: If ``raw`` is not an integer, or is below 1.
    """
    count = parse_int64(raw)
    if count is None:
        raise ValidationError(
            f"invalid number of yoinks: {raw!r}",
            code="invalid_number",
            detail="Error parsing number of yoinks",
            field="number",
        )
    if count < 1:
        raise _out_of_range()
    return count


class RetrievalService(Service):
    """Serves the latest, last N and all yoinks of a topic, newest first."""

    yoink_repo: YoinkRepository

    async def _fetch(self, topic: str, limit: int | None) -> list[Yoink]:
        require_topic(topic)
        rows = await self.yoink_repo.query(topic, limit=limit)
        # Any undecodable row aborts the whole call
        return [to_yoink(row) for row in rows]

    async def get_latest(self, topic: str) -> Yoink | None:
        """The newest yoink of a topic, or None when the topic has none."""
        yoinks = await self._fetch(topic, limit=1)
        return yoinks[0] if yoinks else None

    async def get_last(self, topic: str, count: int) -> list[Yoink]:
        if count < 1:
            raise _out_of_range()
        return await self._fetch(topic, limit=count)

    async def get_all(self, topic: str) -> list[Yoink]:
        return await self._fetch(topic, limit=None)
