"""
ストレージ API 呼び出しに必要な設定値。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, cast

DEFAULT_BASE_URL = "https://storage.bunnycdn.com/"


@dataclass(frozen=True)
class StorageSettings:
    """
    ``storage`` セクションから構築される接続設定。

    Attributes:
        base_url: ストレージ API のベース URL。末尾は必ず '/' で終わる。
        timeout_seconds: httpx に渡すタイムアウト秒数。
        verify_ssl: TLS 証明書を検証するか。
        strict_validation: クライアント生成時にトークン・ゾーン名の書式を検証するか。
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    strict_validation: bool = False

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any]) -> "StorageSettings":
        try:
            raw_base_url = mapping["base_url"]
        except KeyError as exc:
            raise ValueError("storage.base_url が設定されていません。") from exc

        if raw_base_url in (None, ""):
            raise ValueError("storage.base_url は環境設定で必須です。")

        raw_timeout: Any = mapping.get("timeout_seconds", 30.0)
        if isinstance(raw_timeout, bool):
            raise ValueError("storage.timeout_seconds は真偽値ではなく数値で指定してください。")
        try:
            timeout_seconds = float(cast(Any, raw_timeout))
        except (TypeError, ValueError) as exc:
            raise ValueError("storage.timeout_seconds は数値で指定してください。") from exc

        if timeout_seconds <= 0:
            raise ValueError("storage.timeout_seconds は正の値である必要があります。")

        return StorageSettings(
            base_url=_normalize_base_url(str(raw_base_url)),
            timeout_seconds=timeout_seconds,
            verify_ssl=bool(mapping.get("verify_ssl", True)),
            strict_validation=bool(mapping.get("strict_validation", False)),
        )


def _normalize_base_url(value: str) -> str:
    return value.rstrip("/") + "/"
