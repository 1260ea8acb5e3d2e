"""
ドメインエンティティの公開API。
"""

from .directory_entry import DirectoryEntry
from .error_payload import ErrorPayload

__all__ = [
    "DirectoryEntry",
    "ErrorPayload",
]
