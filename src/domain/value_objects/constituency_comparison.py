"""選挙区単位の請願比較を表す値オブジェクト."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import InvalidComparisonStateError


if TYPE_CHECKING:
    from src.domain.entities.petition import Petition


class ConstituencyComparison:
    """2つの請願の、ある選挙区における署名の偏りを表す.

    bias = (選挙区の署名数A / 署名数B) / (請願全体の合計A / 合計B)

    1より大きければ請願A寄り、1より小さければ請願B寄り。
    どちらかの署名数、またはどちらかの請願合計が0の場合は比較不能（無効）とし、
    bias は保持しない。
    """

    __slots__ = ("_name", "_bias")

    def __init__(self, petition_a: Petition, petition_b: Petition, name: str) -> None:
        self._name = name
        self._bias: float | None = None

        total_a = petition_a.total
        total_b = petition_b.total
        count_a = petition_a.get_constituency_result(name).count
        count_b = petition_b.get_constituency_result(name).count

        if not (count_a > 0 and count_b > 0 and total_a > 0 and total_b > 0):
            return

        petition_ratio = total_a / total_b
        result_ratio = count_a / count_b
        self._bias = result_ratio / petition_ratio

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def is_valid(self) -> bool:
        """bias が算出できたかどうか."""
        return self._bias is not None

    @property
    def bias(self) -> float:
        """正規化済みの偏り.

        Raises:
            InvalidComparisonStateError: 無効な比較に対して呼び出した場合
        """
        if self._bias is None:
            raise InvalidComparisonStateError(self._name)
        return self._bias

    def get_bias(self) -> float:
        return self.bias

    def __repr__(self) -> str:
        if self._bias is None:
            return f"ConstituencyComparison(name={self._name!r}, invalid)"
        return f"ConstituencyComparison(name={self._name!r}, bias={self._bias:.3f})"
