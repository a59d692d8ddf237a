"""請願比較関連のDTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparePetitionsInputDTO:
    """請願比較入力DTO."""

    petition_id_a: int
    petition_id_b: int

    def __post_init__(self) -> None:
        for petition_id in (self.petition_id_a, self.petition_id_b):
            if petition_id <= 0:
                raise ValueError(
                    f"請願IDは正の整数である必要があります: {petition_id}"
                )
