"""英国議会請願サイトAPIクライアント.

httpx asyncベースのHTTPクライアントで、/petitions/{id}.json
エンドポイントに対応。
"""

from __future__ import annotations

import logging

from typing import Any

import httpx

from .types import ConstituencySignatureRecord, PetitionRecord


logger = logging.getLogger(__name__)


class PetitionApiError(Exception):
    """請願APIクライアントのエラー."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class PetitionApiClient:
    """英国議会請願サイトAPIクライアント (httpx async)."""

    BASE_URL = "https://petition.parliament.uk"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._external_client = client
        self._owns_client = client is None
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout or self.DEFAULT_TIMEOUT

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTPクライアントを取得（外部注入 or 自動生成）."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout)

    def build_url(self, petition_id: int) -> str:
        return f"{self._base_url}/petitions/{petition_id}.json"

    async def get_petition(self, petition_id: int) -> PetitionRecord:
        """請願1件の詳細（選挙区別署名数を含む）を取得."""
        data = await self._request(self.build_url(petition_id))
        record = self._parse_petition_response(data)
        logger.info(
            "請願 %d を取得: 選挙区 %d 件",
            record.id,
            len(record.signatures_by_constituency),
        )
        return record

    async def _request(self, url: str) -> dict[str, Any]:
        """APIリクエスト実行."""
        client = await self._get_client()

        try:
            response = await client.get(url)
            response.raise_for_status()
            data: dict[str, Any] = response.json()
            return data
        except httpx.HTTPStatusError as e:
            raise PetitionApiError(
                f"APIリクエストエラー: {e.response.status_code} ({url})",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise PetitionApiError(f"APIリクエストタイムアウト ({url})") from e
        except httpx.HTTPError as e:
            raise PetitionApiError(f"HTTPエラー: {e}") from e
        except ValueError as e:
            raise PetitionApiError(f"JSONの解析に失敗しました ({url})") from e
        finally:
            if self._owns_client:
                await client.aclose()

    @staticmethod
    def _parse_petition_response(data: Any) -> PetitionRecord:
        """APIレスポンスJSONをPetitionRecordに変換."""
        try:
            petition = _require_dict(_require_dict(data, "body")["data"], "data")
            attributes = _require_dict(petition["attributes"], "data.attributes")
            raw_records = attributes.get("signatures_by_constituency") or []
            if not isinstance(raw_records, list):
                raise TypeError("signatures_by_constituency は配列である必要があります")
            records = []
            for raw in raw_records:
                r = _require_dict(raw, "signatures_by_constituency[]")
                records.append(
                    ConstituencySignatureRecord(
                        name=r["name"],
                        signature_count=_require_int(
                            r["signature_count"], "signature_count"
                        ),
                    )
                )
            signature_count = attributes.get("signature_count")
            return PetitionRecord(
                id=_require_int(petition["id"], "data.id"),
                action=attributes["action"],
                signature_count=(
                    None
                    if signature_count is None
                    else _require_int(signature_count, "signature_count")
                ),
                signatures_by_constituency=records,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise PetitionApiError(f"不正なレスポンス形式: {e!r}") from e


def _require_dict(value: Any, field: str) -> dict[str, Any]:
    """JSONオブジェクトであることを確認."""
    if not isinstance(value, dict):
        raise TypeError(f"{field} はオブジェクトである必要があります: {value!r}")
    return value


def _require_int(value: Any, field: str) -> int:
    """boolを除く整数値であることを確認（1.9 や "12" は受け付けない）."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} は整数である必要があります: {value!r}")
    return value
