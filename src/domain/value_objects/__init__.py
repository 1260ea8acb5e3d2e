"""
ドメイン値オブジェクトの公開API。
"""

from .identifiers import (
    is_access_token,
    is_account_token,
    is_base64,
    is_pull_zone_name,
    is_storage_token,
    is_storage_zone_name,
)
from .outcome import AuthFailure, BadRequest, HttpOutcome, NotFound, Success, Unexpected

__all__ = [
    "AuthFailure",
    "BadRequest",
    "HttpOutcome",
    "NotFound",
    "Success",
    "Unexpected",
    "is_access_token",
    "is_account_token",
    "is_base64",
    "is_pull_zone_name",
    "is_storage_token",
    "is_storage_zone_name",
]
