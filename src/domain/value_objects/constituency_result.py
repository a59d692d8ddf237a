"""選挙区別署名数の値オブジェクト."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConstituencyResult:
    """1つの請願における、ある選挙区の署名数."""

    name: str
    count: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("選挙区名は空にできません")
        if self.count < 0:
            raise ValueError(
                f"署名数は0以上である必要があります: {self.name}={self.count}"
            )
