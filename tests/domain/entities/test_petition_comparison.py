"""Tests for PetitionComparison entity."""

import pytest

from src.domain.entities.petition import Petition
from src.domain.entities.petition_comparison import PetitionComparison
from src.domain.value_objects.constituency_comparison import ConstituencyComparison
from src.domain.value_objects.constituency_result import ConstituencyResult


def _make_petition(petition_id: int, results: dict[str, int]) -> Petition:
    petition = Petition(id=petition_id, title=f"Petition {petition_id}")
    for name, count in results.items():
        petition.add_constituency_result(ConstituencyResult(name=name, count=count))
    return petition


def _build(petition_a: Petition, petition_b: Petition) -> PetitionComparison:
    comparison = PetitionComparison(petition_a, petition_b)
    for name in petition_a.results:
        comparison.add_constituency_comparison(
            ConstituencyComparison(petition_a, petition_b, name)
        )
    return comparison


@pytest.fixture
def comparison() -> PetitionComparison:
    petition_a = _make_petition(
        1, {"Low": 10, "High": 90, "Mid": 40, "Gone": 0, "Even": 40}
    )
    petition_b = _make_petition(
        2, {"Low": 40, "High": 10, "Mid": 40, "Gone": 30, "Even": 40}
    )
    return _build(petition_a, petition_b)


class TestAddConstituencyComparison:
    def test_invalid_comparisons_are_dropped(
        self, comparison: PetitionComparison
    ) -> None:
        names = [c.name for c in comparison.get_constituency_comparisons()]

        assert "Gone" not in names
        assert len(comparison) == 4


class TestGetConstituencyComparisons:
    def test_sorted_by_bias_descending(self, comparison: PetitionComparison) -> None:
        biases = [c.bias for c in comparison.get_constituency_comparisons()]

        assert biases == sorted(biases, reverse=True)
        assert all(a >= b for a, b in zip(biases, biases[1:]))

    def test_ties_keep_insertion_order(self, comparison: PetitionComparison) -> None:
        names = [c.name for c in comparison.get_constituency_comparisons()]

        assert names == ["High", "Mid", "Even", "Low"]

    def test_returns_new_list_each_call(self, comparison: PetitionComparison) -> None:
        first = comparison.get_constituency_comparisons()
        first.clear()

        assert len(comparison.get_constituency_comparisons()) == 4

    def test_empty_comparison(self) -> None:
        petition_a = _make_petition(1, {"A": 0})
        petition_b = _make_petition(2, {"A": 5})

        comparison = _build(petition_a, petition_b)

        assert comparison.get_constituency_comparisons() == []


class TestRankingSlices:
    def test_most_biased_towards_first(self, comparison: PetitionComparison) -> None:
        names = [c.name for c in comparison.most_biased_towards_first(2)]
        assert names == ["High", "Mid"]

    def test_most_biased_towards_second(self, comparison: PetitionComparison) -> None:
        names = [c.name for c in comparison.most_biased_towards_second(2)]
        assert names == ["Even", "Low"]

    def test_limit_larger_than_ranking(self, comparison: PetitionComparison) -> None:
        assert len(comparison.most_biased_towards_first(20)) == 4
        assert len(comparison.most_biased_towards_second(20)) == 4

    def test_zero_limit(self, comparison: PetitionComparison) -> None:
        assert comparison.most_biased_towards_first(0) == []
        assert comparison.most_biased_towards_second(0) == []

    def test_negative_limit_is_rejected(
        self, comparison: PetitionComparison
    ) -> None:
        with pytest.raises(ValueError):
            comparison.most_biased_towards_second(-1)


class TestPetitions:
    def test_returns_source_petitions(self) -> None:
        petition_a = _make_petition(1, {"A": 1})
        petition_b = _make_petition(2, {"A": 1})

        comparison = PetitionComparison(petition_a, petition_b)

        assert comparison.get_petition1() is petition_a
        assert comparison.get_petition2() is petition_b
        assert comparison.petition1 is petition_a
        assert comparison.petition2 is petition_b
