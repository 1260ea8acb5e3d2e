"""
アクセストークンやゾーン名の書式を検証する述語群。

いずれも状態を持たない純粋関数であり、ネットワークへ不正な識別子を
送出する前の任意の厳格チェックとして利用する。
"""

from __future__ import annotations

import re

_HEX = "[0-9a-fA-F]"

ACCOUNT_TOKEN_PATTERN = re.compile(
    rf"^{_HEX}{{8}}(-{_HEX}{{4}}){{2,3}}-{_HEX}{{20}}(-{_HEX}{{4}}){{3}}-{_HEX}{{12}}$"
)
STORAGE_TOKEN_PATTERN = re.compile(rf"^{_HEX}{{8}}(-{_HEX}{{4}}){{2}}-{_HEX}{{12}}(-{_HEX}{{4}}){{2}}$")
STORAGE_ZONE_NAME_PATTERN = re.compile(r"^[-a-zA-Z0-9]{3,20}$")
PULL_ZONE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9]{3,20}$")
BASE64_PATTERN = re.compile(r"^[a-zA-Z0-9+/]*={0,2}$")


def _fullmatch(pattern: re.Pattern[str], value: object) -> bool:
    if not isinstance(value, str):
        return False
    # '$' は末尾改行を許容するため fullmatch で判定する
    return pattern.fullmatch(value) is not None


def is_account_token(value: object) -> bool:
    """アカウント API 用の長形式トークンか判定する。"""

    return _fullmatch(ACCOUNT_TOKEN_PATTERN, value)


def is_storage_token(value: object) -> bool:
    """ストレージゾーン用の UUID 類似形式トークンか判定する。"""

    return _fullmatch(STORAGE_TOKEN_PATTERN, value)


def is_access_token(value: object) -> bool:
    """
    いずれかのトークン形式に一致するか判定する。

    リモート側はアカウント用とストレージ用の 2 種類のトークンを発行するため、
    両形式を受け付ける。
    """

    return is_account_token(value) or is_storage_token(value)


def is_storage_zone_name(value: object) -> bool:
    return _fullmatch(STORAGE_ZONE_NAME_PATTERN, value)


def is_pull_zone_name(value: object) -> bool:
    return _fullmatch(PULL_ZONE_NAME_PATTERN, value)


def is_base64(value: object) -> bool:
    return _fullmatch(BASE64_PATTERN, value)
