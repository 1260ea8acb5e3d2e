"""
ストレージ API クライアントが送出する例外定義。

トランスポート層の失敗（接続エラー、タイムアウト、キャンセル）はここに含めず、
httpx / asyncio の例外のまま呼び出し元へ伝播させる。
"""

from __future__ import annotations


class StorageAPIError(RuntimeError):
    """ストレージ API クライアントが発生させる基底例外。"""


class ConfigurationError(StorageAPIError):
    """クライアント生成時の資格情報またはゾーン指定が不正。"""


class InvalidCredentialError(ConfigurationError):
    """アクセストークンが未指定、または書式が不正。"""


class InvalidZoneError(ConfigurationError):
    """ゾーン名が未指定、または書式が不正。"""


class AuthenticationError(StorageAPIError):
    """リモートが資格情報を拒否した (401)。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"アクセストークンが拒否されました (path={path})")
        self.path = path


class NotFoundError(StorageAPIError):
    """要求したパスがゾーン内に存在しない (404)。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"指定されたパスが存在しません (path={path})")
        self.path = path


class BadRequestError(StorageAPIError):
    """リモートの入力検証でリクエストが拒否された (400)。"""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class InvalidResponseError(StorageAPIError):
    """応答本文を期待した形式へ復号できない。"""


class UnexpectedResponseError(StorageAPIError):
    """当該操作で想定していないステータスを受信した。"""

    def __init__(self, status_code: int, *, path: str | None = None) -> None:
        super().__init__(f"想定外の応答を受信しました (status={status_code}, path={path})")
        self.status_code = status_code
        self.path = path
