"""Yoink aggregate - one immutable published reading."""

from datetime import datetime

from datayoinker.domain.shared.model.value import ValueObject
from datayoinker.domain.yoink.model.value import ContentValue


class Yoink(ValueObject):
    """A persisted publish event with its typed content."""

    id: int
    topic: str
    timestamp: datetime
    content: dict[str, ContentValue]
