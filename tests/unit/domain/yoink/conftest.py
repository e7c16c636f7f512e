"""Fixtures for yoink domain unit tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from datayoinker.domain.yoink.port.repository import YoinkRepository


@pytest.fixture
def mock_yoink_repo() -> YoinkRepository:
    """Create a mock YoinkRepository."""
    repo = MagicMock(spec=YoinkRepository)
    repo.append = AsyncMock()
    repo.query = AsyncMock(return_value=[])
    return repo
