"""
ドメイン層のパッケージ初期化。
"""

from .models import DirectoryEntry, ErrorPayload
from .value_objects import AuthFailure, BadRequest, HttpOutcome, NotFound, Success, Unexpected

__all__ = [
    "DirectoryEntry",
    "ErrorPayload",
    "AuthFailure",
    "BadRequest",
    "HttpOutcome",
    "NotFound",
    "Success",
    "Unexpected",
]
