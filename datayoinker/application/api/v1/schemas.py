"""Response bodies shared by the HAPI and REST routes."""

from datetime import datetime

from pydantic import BaseModel

from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.model.value import ContentValue


class YoinkResponse(BaseModel):
    """A yoink as sent to clients.

    The all-defaults instance is the empty yoink returned for a topic that
    has nothing published yet.
    """

    id: int = 0
    topic: str = ""
    timestamp: datetime | None = None
    content: dict[str, ContentValue] = {}

    @classmethod
    def from_domain(cls, yoink: Yoink | None) -> "YoinkResponse":
        if yoink is None:
            return cls()
        return cls(
            id=yoink.id,
            topic=yoink.topic,
            timestamp=yoink.timestamp,
            content=yoink.content,
        )

    @classmethod
    def many(cls, yoinks: list[Yoink]) -> list["YoinkResponse"]:
        return [cls.from_domain(y) for y in yoinks]
