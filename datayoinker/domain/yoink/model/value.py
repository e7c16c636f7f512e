"""Yoink value objects."""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TypeAlias

from datayoinker.domain.shared.model.value import ValueObject

# Order matters for pydantic's smart union: ints stay ints, floats stay floats.
ContentValue: TypeAlias = int | float | str

# Raw request parameters: every name keeps all of its values so that
# repeated parameters can be detected before inference.
RawParams: TypeAlias = Mapping[str, Sequence[str]]


class StoredYoink(ValueObject):
    """A row as held by the storage gateway, content still serialized."""

    id: int
    topic: str
    timestamp: datetime
    content: str  # JSON document text
