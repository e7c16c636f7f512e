"""Yoink domain model."""

from datayoinker.domain.yoink.model.aggregate import Yoink
from datayoinker.domain.yoink.model.value import ContentValue, RawParams, StoredYoink

__all__ = ["Yoink", "StoredYoink", "ContentValue", "RawParams"]
