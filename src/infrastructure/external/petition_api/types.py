"""請願サイトAPIのレスポンス型定義."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConstituencySignatureRecord:
    """signatures_by_constituency の個別レコード."""

    name: str
    signature_count: int


@dataclass(frozen=True)
class PetitionRecord:
    """請願詳細APIのレスポンス全体."""

    id: int
    action: str
    signature_count: int | None = None
    signatures_by_constituency: list[ConstituencySignatureRecord] = field(
        default_factory=list
    )
