"""Unit tests for RetrievalService."""

from datetime import UTC, datetime

import pytest

from datayoinker.domain.shared.error import ContentDecodeError, ValidationError
from datayoinker.domain.yoink.model.value import StoredYoink
from datayoinker.domain.yoink.port.repository import YoinkRepository
from datayoinker.domain.yoink.service.retrieval import RetrievalService, parse_count


def _make_row(id: int, content: str = "{}", topic: str = "sensors") -> StoredYoink:
    return StoredYoink(
        id=id,
        topic=topic,
        timestamp=datetime(2022, 10, 26, 11, 21, 11, tzinfo=UTC),
        content=content,
    )


class TestParseCount:
    @pytest.mark.parametrize("raw, expected", [("1", 1), ("3", 3), ("007", 7), ("+2", 2)])
    def test_valid_numbers(self, raw: str, expected: int):
        assert parse_count(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", " 3", "", "99999999999999999999"])
    def test_invalid_number(self, raw: str):
        with pytest.raises(ValidationError) as exc_info:
            parse_count(raw)
        assert exc_info.value.code == "invalid_number"

    @pytest.mark.parametrize("raw", ["0", "-1"])
    def test_number_out_of_range(self, raw: str):
        with pytest.raises(ValidationError) as exc_info:
            parse_count(raw)
        assert exc_info.value.code == "number_out_of_range"


class TestRetrievalService:
    @pytest.mark.asyncio
    async def test_get_latest_queries_one_row(self, mock_yoink_repo: YoinkRepository):
        mock_yoink_repo.query.return_value = [_make_row(5, '{"a":1}')]
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        yoink = await service.get_latest("sensors")

        assert yoink is not None
        assert yoink.id == 5
        assert yoink.content == {"a": 1}
        mock_yoink_repo.query.assert_called_once_with("sensors", limit=1)

    @pytest.mark.asyncio
    async def test_get_latest_on_empty_topic_returns_none(self, mock_yoink_repo: YoinkRepository):
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        assert await service.get_latest("nobody-home") is None

    @pytest.mark.asyncio
    async def test_get_last_passes_limit_and_keeps_order(self, mock_yoink_repo: YoinkRepository):
        mock_yoink_repo.query.return_value = [_make_row(3), _make_row(2), _make_row(1)]
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        yoinks = await service.get_last("sensors", 3)

        assert [y.id for y in yoinks] == [3, 2, 1]
        mock_yoink_repo.query.assert_called_once_with("sensors", limit=3)

    @pytest.mark.asyncio
    async def test_get_last_rejects_counts_below_one(self, mock_yoink_repo: YoinkRepository):
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        with pytest.raises(ValidationError):
            await service.get_last("sensors", 0)

        mock_yoink_repo.query.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_all_is_unbounded(self, mock_yoink_repo: YoinkRepository):
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        assert await service.get_all("sensors") == []
        mock_yoink_repo.query.assert_called_once_with("sensors", limit=None)

    @pytest.mark.asyncio
    async def test_empty_topic_is_rejected(self, mock_yoink_repo: YoinkRepository):
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.get_all("")

        assert exc_info.value.code == "missing_topic"
        mock_yoink_repo.query.assert_not_called()

    @pytest.mark.asyncio
    async def test_one_corrupt_row_aborts_the_whole_call(self, mock_yoink_repo: YoinkRepository):
        mock_yoink_repo.query.return_value = [_make_row(2, '{"a":1}'), _make_row(1, "{broken")]
        service = RetrievalService(yoink_repo=mock_yoink_repo)

        with pytest.raises(ContentDecodeError):
            await service.get_all("sensors")
