"""請願比較ユースケース.

2つの請願を並行して取得し、請願Aの各選挙区について
署名の偏り（bias）を算出してランキング可能な比較結果を組み立てる。
"""

from __future__ import annotations

import asyncio
import logging

from src.application.dtos.petition_comparison_dto import ComparePetitionsInputDTO
from src.domain.entities.petition import Petition
from src.domain.entities.petition_comparison import PetitionComparison
from src.domain.services.interfaces.petition_data_source_service import (
    IPetitionDataSourceService,
)
from src.domain.value_objects.constituency_comparison import ConstituencyComparison


logger = logging.getLogger(__name__)


class ComparePetitionsUseCase:
    """2つの請願を選挙区別に比較するユースケース."""

    def __init__(self, data_source: IPetitionDataSourceService) -> None:
        self._data_source = data_source

    async def execute(self, input_dto: ComparePetitionsInputDTO) -> PetitionComparison:
        """メイン処理: 並行取得 → 選挙区比較 → 比較結果.

        どちらかの取得が失敗した場合、もう一方の取得はキャンセルし、
        発生した例外をそのまま送出する。部分的な結果は返さない。
        """
        logger.info(
            "請願比較開始: A=%d, B=%d",
            input_dto.petition_id_a,
            input_dto.petition_id_b,
        )

        petition_a, petition_b = await self._fetch_both(
            input_dto.petition_id_a, input_dto.petition_id_b
        )
        comparison = self.build_comparison(petition_a, petition_b)

        logger.info(
            "請願比較完了: 選挙区 %d 件中 %d 件を比較対象に採用",
            len(petition_a),
            len(comparison),
        )
        return comparison

    async def get_comparison(
        self, petition_id_a: int, petition_id_b: int
    ) -> PetitionComparison:
        """請願IDを直接指定して比較する."""
        return await self.execute(
            ComparePetitionsInputDTO(
                petition_id_a=petition_id_a, petition_id_b=petition_id_b
            )
        )

    @staticmethod
    def build_comparison(
        petition_a: Petition, petition_b: Petition
    ) -> PetitionComparison:
        """取得済みの2請願から比較結果を組み立てる.

        走査対象は請願Aの選挙区のみ（追加順）。請願Bにしかない選挙区は扱わない。
        """
        comparison = PetitionComparison(petition_a, petition_b)
        for name in petition_a.results:
            comparison.add_constituency_comparison(
                ConstituencyComparison(petition_a, petition_b, name)
            )
        return comparison

    async def _fetch_both(
        self, petition_id_a: int, petition_id_b: int
    ) -> tuple[Petition, Petition]:
        """2つの請願を並行取得する."""
        tasks = [
            asyncio.create_task(self._data_source.fetch_petition(petition_id))
            for petition_id in (petition_id_a, petition_id_b)
        ]
        try:
            petition_a, petition_b = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return petition_a, petition_b
