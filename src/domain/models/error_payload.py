"""
ストレージ API の失敗応答に含まれるエラー本文。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorPayload:
    """
    失敗応答に含まれる任意のエラー情報。メッセージの補足にのみ利用する。
    """

    message: str | None = None
    http_code: int | None = None

    @property
    def has_message(self) -> bool:
        return bool(self.message and self.message.strip())
