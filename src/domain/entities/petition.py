"""Petition entity."""

from __future__ import annotations

import logging

from collections.abc import Mapping
from types import MappingProxyType

from src.domain.entities.base import BaseEntity
from src.domain.value_objects.constituency_result import ConstituencyResult


logger = logging.getLogger(__name__)


class Petition(BaseEntity):
    """議会請願を表すエンティティ.

    選挙区名 → ConstituencyResult の対応を追加順に保持し、
    全選挙区の署名数合計を追加のたびに更新する。
    """

    def __init__(self, id: int, title: str) -> None:
        """請願エンティティを初期化する.

        Args:
            id: 請願ID（外部サイト上の番号）
            title: 請願タイトル
        """
        if id <= 0:
            raise ValueError(f"請願IDは正の整数である必要があります: {id}")
        super().__init__(id)
        self.title = title
        self._results: dict[str, ConstituencyResult] = {}
        self._total = 0

    def add_constituency_result(self, result: ConstituencyResult) -> None:
        """選挙区の署名数を追加する.

        同じ選挙区名が既に登録されている場合は何もしない（先に追加した方が優先）。
        """
        if result.name in self._results:
            logger.debug(
                "請願 %d: 選挙区 '%s' は登録済みのため無視します",
                self.id,
                result.name,
            )
            return

        self._results[result.name] = result
        self._total += result.count

    def get_constituency_result(self, name: str) -> ConstituencyResult:
        """選挙区の署名数を返す.

        未登録の選挙区は署名数0のプレースホルダーを返す。
        """
        result = self._results.get(name)
        if result is None:
            return ConstituencyResult(name=name, count=0)
        return result

    @property
    def total(self) -> int:
        """全選挙区の署名数合計."""
        return self._total

    def get_total(self) -> int:
        return self._total

    @property
    def results(self) -> Mapping[str, ConstituencyResult]:
        """選挙区名 → ConstituencyResult の読み取り専用ビュー（追加順）."""
        return MappingProxyType(self._results)

    def get_results(self) -> Mapping[str, ConstituencyResult]:
        return self.results

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, name: object) -> bool:
        return name in self._results

    def __str__(self) -> str:
        """文字列表現を返す."""
        return f"#{self.id} {self.title}"
