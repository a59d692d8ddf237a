"""ConstituencyResult 値オブジェクトのテスト."""

import dataclasses

import pytest

from src.domain.value_objects.constituency_result import ConstituencyResult


class TestConstituencyResult:
    def test_holds_name_and_count(self) -> None:
        result = ConstituencyResult(name="Bath", count=12)
        assert result.name == "Bath"
        assert result.count == 12

    def test_is_immutable(self) -> None:
        result = ConstituencyResult(name="Bath", count=12)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.count = 13  # type: ignore[misc]

    def test_empty_name_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConstituencyResult(name="", count=1)

    def test_negative_count_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConstituencyResult(name="Bath", count=-1)
