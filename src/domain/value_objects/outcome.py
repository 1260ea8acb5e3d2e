"""
HTTP 応答を分類した結果を表すタグ付きバリアント。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Success:
    """操作ごとの成功ステータスを受信した。"""

    body: bytes
    kind: ClassVar[str] = "success"


@dataclass(frozen=True)
class AuthFailure:
    """資格情報が拒否された (401)。"""

    kind: ClassVar[str] = "auth_failure"


@dataclass(frozen=True)
class NotFound:
    """対象パスが存在しない (404)。"""

    kind: ClassVar[str] = "not_found"


@dataclass(frozen=True)
class BadRequest:
    """
    リクエストが不正と判定された (400)。

    message は応答本文から抽出できた場合のみ設定される。
    """

    message: str | None = None
    kind: ClassVar[str] = "bad_request"


@dataclass(frozen=True)
class Unexpected:
    """当該操作では扱わないステータス。"""

    status_code: int
    kind: ClassVar[str] = "unexpected"


HttpOutcome = Union[Success, AuthFailure, NotFound, BadRequest, Unexpected]
