"""請願比較 CLI コマンドグループ."""

import click

from src.interfaces.cli.commands.petition.compare import compare


@click.group()
def petition():
    """英国議会請願の比較コマンド."""
    pass


petition.add_command(compare)
