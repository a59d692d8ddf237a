"""petibias CLI エントリーポイント."""

import logging

import click

from src.interfaces.cli.commands.petition import petition


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（デフォルトは設定値）",
)
def cli(log_level: str | None):
    """英国議会請願の選挙区別署名分布を比較するツール."""
    from src.infrastructure.config.settings import get_settings

    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


cli.add_command(petition)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
