"""PetitionComparison entity."""

from __future__ import annotations

import logging

from operator import attrgetter

from src.domain.entities.petition import Petition
from src.domain.value_objects.constituency_comparison import ConstituencyComparison


logger = logging.getLogger(__name__)


class PetitionComparison:
    """2つの請願の選挙区別比較結果.

    有効な ConstituencyComparison のみを保持し、
    参照時に bias の降順（請願A寄りの選挙区が先頭）で並べて返す。
    """

    def __init__(self, petition1: Petition, petition2: Petition) -> None:
        self._petition1 = petition1
        self._petition2 = petition2
        self._constituency_comparisons: list[ConstituencyComparison] = []

    def add_constituency_comparison(self, comparison: ConstituencyComparison) -> None:
        """選挙区比較を追加する. 無効な比較は捨てる."""
        if not comparison.is_valid:
            logger.debug("選挙区 '%s' はデータ不足のため除外", comparison.name)
            return
        self._constituency_comparisons.append(comparison)

    def get_constituency_comparisons(self) -> list[ConstituencyComparison]:
        """bias の降順に並べた選挙区比較の一覧を返す."""
        return sorted(
            self._constituency_comparisons, key=attrgetter("bias"), reverse=True
        )

    def most_biased_towards_first(self, limit: int) -> list[ConstituencyComparison]:
        """請願1寄りの選挙区を上位 limit 件返す."""
        self._check_limit(limit)
        return self.get_constituency_comparisons()[:limit]

    def most_biased_towards_second(self, limit: int) -> list[ConstituencyComparison]:
        """請願2寄りの選挙区を limit 件返す.

        ランキング末尾の limit 件を、ランキングの並び順のまま返す。
        """
        self._check_limit(limit)
        if limit == 0:
            return []
        return self.get_constituency_comparisons()[-limit:]

    def get_petition1(self) -> Petition:
        return self._petition1

    def get_petition2(self) -> Petition:
        return self._petition2

    @property
    def petition1(self) -> Petition:
        return self._petition1

    @property
    def petition2(self) -> Petition:
        return self._petition2

    def __len__(self) -> int:
        return len(self._constituency_comparisons)

    @staticmethod
    def _check_limit(limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit は0以上である必要があります: {limit}")
