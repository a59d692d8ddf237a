"""請願データ取得サービスのインターフェース."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.petition import Petition


class IPetitionDataSourceService(Protocol):
    """外部データソースから請願を取得するサービスのインターフェース."""

    async def fetch_petition(self, petition_id: int) -> Petition:
        """請願を取得する.

        返却時点で選挙区別の署名数はすべて Petition に追加済みであること。
        取得に失敗した場合は例外を送出する。
        """
        ...
