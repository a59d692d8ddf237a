"""IPetitionDataSourceService のインフラストラクチャ実装.

PetitionApiClient をラップし、APIレスポンスを Petition エンティティに変換する。
"""

from __future__ import annotations

import logging

from src.domain.entities.petition import Petition
from src.domain.value_objects.constituency_result import ConstituencyResult
from src.infrastructure.external.petition_api.client import (
    PetitionApiClient,
    PetitionApiError,
)
from src.infrastructure.external.petition_api.types import PetitionRecord


logger = logging.getLogger(__name__)


class PetitionDataSourceServiceImpl:
    """IPetitionDataSourceService の具象実装."""

    def __init__(self, client: PetitionApiClient | None = None) -> None:
        self._client = client or PetitionApiClient()

    async def fetch_petition(self, petition_id: int) -> Petition:
        """請願を取得し Petition エンティティに変換して返す."""
        record = await self._client.get_petition(petition_id)
        return self._to_entity(record)

    @staticmethod
    def _to_entity(record: PetitionRecord) -> Petition:
        """APIレスポンス型を Petition エンティティに変換.

        Raises:
            PetitionApiError: レスポンスの値がドメインの制約を満たさない場合
        """
        try:
            petition = Petition(id=record.id, title=record.action)
            for r in record.signatures_by_constituency:
                petition.add_constituency_result(
                    ConstituencyResult(name=r.name, count=r.signature_count)
                )
        except ValueError as e:
            raise PetitionApiError(f"請願 {record.id} のデータが不正です: {e}") from e

        if (
            record.signature_count is not None
            and record.signature_count != petition.total
        ):
            # 海外在住者など選挙区に属さない署名は内訳に含まれない
            logger.warning(
                "請願 %d: 公表署名数 %d と選挙区別合計 %d が一致しません",
                record.id,
                record.signature_count,
                petition.total,
            )
        return petition
