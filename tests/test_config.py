"""
Tests for Settings validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from reddit.core.config import MAX_PAGE_SIZE, Settings


class TestDefaultPageSize:
    """DEFAULT_PAGE_SIZE must be a page size PagedList accepts."""

    @pytest.mark.parametrize("size", [1, 10, MAX_PAGE_SIZE])
    def test_accepts_valid_sizes(self, size):
        assert Settings(DEFAULT_PAGE_SIZE=size).default_page_size == size

    @pytest.mark.parametrize("size", [0, -1, MAX_PAGE_SIZE + 1, 100])
    def test_rejects_out_of_range_sizes(self, size):
        with pytest.raises(PydanticValidationError):
            Settings(DEFAULT_PAGE_SIZE=size)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "100")

        with pytest.raises(PydanticValidationError):
            Settings()
