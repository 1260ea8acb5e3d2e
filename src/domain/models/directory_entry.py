"""
ストレージゾーンのディレクトリ一覧で返されるエントリ。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DirectoryEntry:
    """
    一覧取得 API が返すオブジェクトまたはサブディレクトリ 1 件分のメタデータ。

    Attributes:
        object_name: オブジェクト名（ディレクトリの場合はディレクトリ名）。
        path: ゾーン名を含む親ディレクトリのパス。
        is_directory: ディレクトリであれば True。
        length: バイト数。ディレクトリの場合は 0。
        last_changed: 最終更新日時。
        date_created: 作成日時。
    """

    object_name: str
    path: str = ""
    is_directory: bool = False
    length: int = 0
    last_changed: datetime | None = None
    date_created: datetime | None = None
    guid: str | None = None
    storage_zone_name: str | None = None
    storage_zone_id: int | None = None
    server_id: int | None = None
    user_id: str | None = None
    checksum: str | None = None
    content_type: str | None = None
    replicated_zones: str | None = None

    def __post_init__(self) -> None:
        if not self.object_name:
            raise ValueError("object_name は必須です。")
        if self.length < 0:
            raise ValueError("length は 0 以上である必要があります。")

    @property
    def full_path(self) -> str:
        """親パスとオブジェクト名を連結したパス。ディレクトリは末尾に '/' を付与する。"""

        joined = f"{self.path.rstrip('/')}/{self.object_name}" if self.path else self.object_name
        return f"{joined}/" if self.is_directory else joined
