"""IngestionService - turns raw request parameters into a stored yoink."""

import logging

from datayoinker.domain.shared.error import ValidationError
from datayoinker.domain.shared.handler import Service
from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.model.value import RawParams, StoredYoink
from datayoinker.domain.yoink.port.repository import YoinkRepository
from datayoinker.domain.yoink.util.content import decode_content, encode_content, infer_content

logger = logging.getLogger(__name__)


def require_topic(topic: str) -> str:
    if not topic:
        raise ValidationError("topic is empty", code="missing_topic", field="topic")
    return topic


def single_values(params: RawParams) -> dict[str, str]:
    """Collapse raw parameters to one value each.

    Raises:
        ValidationError: If any parameter has more than one value.
    """
    flattened: dict[str, str] = {}
    for name, values in params.items():
        if len(values) != 1:
            raise ValidationError(
                f"Parameter '{name}' with more than 1 value found",
                code="multi_valued_parameter",
                field=name,
            )
        flattened[name] = values[0]
    return flattened


def to_yoink(row: StoredYoink) -> Yoink:
    """Decode a stored row into a typed yoink."""
    return Yoink(
        id=row.id,
        topic=row.topic,
        timestamp=row.timestamp,
        content=decode_content(row.content),
    )


class IngestionService(Service):
    """Validates, infers and appends published readings."""

    yoink_repo: YoinkRepository

    async def publish(self, topic: str, params: RawParams) -> Yoink:
        """Persist one yoink for ``topic`` and return it exactly as stored."""
        require_topic(topic)
        document = encode_content(infer_content(single_values(params)))

        row = await self.yoink_repo.append(topic, document)
        logger.debug("Yoink %d appended to topic %r", row.id, topic)

        return to_yoink(row)
