"""請願比較コマンド."""

from __future__ import annotations

import asyncio

from typing import TYPE_CHECKING

import click

from src.interfaces.cli.base import BaseCommand, with_error_handling


if TYPE_CHECKING:
    from src.domain.entities.petition_comparison import PetitionComparison
    from src.domain.value_objects.constituency_comparison import (
        ConstituencyComparison,
    )
    from src.infrastructure.config.settings import Settings


@click.command()
@click.argument("petition_id_a", type=click.IntRange(min=1))
@click.argument("petition_id_b", type=click.IntRange(min=1))
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="各方向に表示する選挙区の件数（デフォルトは設定値）",
)
@with_error_handling
def compare(petition_id_a: int, petition_id_b: int, limit: int | None):
    """2つの請願で署名の偏りが大きい選挙区を表示する."""
    from src.infrastructure.config.settings import get_settings

    settings = get_settings()
    BaseCommand.show_progress(f"請願 {petition_id_a} と {petition_id_b} を取得中...")
    comparison = asyncio.run(_run_compare(settings, petition_id_a, petition_id_b))
    render_comparison(comparison, limit or settings.ranking_limit)


async def _run_compare(
    settings: Settings, petition_id_a: int, petition_id_b: int
) -> PetitionComparison:
    from src.application.dtos.petition_comparison_dto import (
        ComparePetitionsInputDTO,
    )
    from src.application.usecases.compare_petitions_usecase import (
        ComparePetitionsUseCase,
    )
    from src.infrastructure.external.petition_api.client import PetitionApiClient
    from src.infrastructure.external.petition_api.service import (
        PetitionDataSourceServiceImpl,
    )

    client = PetitionApiClient(
        base_url=settings.api_base_url, timeout=settings.request_timeout
    )
    usecase = ComparePetitionsUseCase(PetitionDataSourceServiceImpl(client))
    return await usecase.execute(
        ComparePetitionsInputDTO(
            petition_id_a=petition_id_a, petition_id_b=petition_id_b
        )
    )


def render_comparison(comparison: PetitionComparison, limit: int) -> None:
    """比較結果をテキストで出力する."""
    click.echo(f'A: "{comparison.get_petition1().title}"')
    click.echo("\tvs")
    click.echo(f'B: "{comparison.get_petition2().title}"')

    if len(comparison) == 0:
        click.echo("\n比較可能な選挙区がありません。")
        return

    click.echo(f"\n=== Aに偏っている選挙区 (上位{limit}件) ===")
    _echo_rows(comparison.most_biased_towards_first(limit))

    click.echo(f"\n=== Bに偏っている選挙区 (上位{limit}件) ===")
    _echo_rows(comparison.most_biased_towards_second(limit))


def _echo_rows(rows: list[ConstituencyComparison]) -> None:
    for row in rows:
        click.echo(f"\t- {row.name} ({row.bias:.3f})")
