"""CLIコマンド共通の基底クラスとエラーハンドリング."""

from __future__ import annotations

import functools
import logging

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from src.infrastructure.external.petition_api.client import PetitionApiError


logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class BaseCommand:
    """CLIコマンドの出力ヘルパー."""

    @staticmethod
    def show_progress(message: str) -> None:
        click.echo(message, err=True)

    @staticmethod
    def error(message: str, exit_code: int = 1) -> NoReturn:
        """エラーメッセージを表示して終了する."""
        click.secho(f"Error: {message}", fg="red", err=True)
        raise SystemExit(exit_code)


def with_error_handling(func: F) -> F:
    """コマンド実行中の例外をエラーメッセージと終了コード1に変換する."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except PetitionApiError as e:
            logger.error("請願データの取得に失敗: %s", e)
            BaseCommand.error(f"請願データの取得に失敗しました: {e}")
        except Exception as e:
            logger.exception("コマンド実行中に予期しないエラー")
            BaseCommand.error(str(e))

    return wrapper  # type: ignore[return-value]
