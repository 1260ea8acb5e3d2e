"""
HTTP ステータスと応答本文を型付きの結果へ変換する純粋関数群。

各操作は ``classify_response`` で得た HttpOutcome のうち、自身が認識する
バリアントのみを成功値または例外へ写像する。
"""

from __future__ import annotations

from typing import AbstractSet

from pydantic import ValidationError

from domain import (
    AuthFailure,
    BadRequest,
    DirectoryEntry,
    HttpOutcome,
    NotFound,
    Success,
    Unexpected,
)

from .exceptions import (
    AuthenticationError,
    BadRequestError,
    InvalidResponseError,
    NotFoundError,
    UnexpectedResponseError,
)
from .schemas import DIRECTORY_LISTING_ADAPTER, ErrorPayloadSchema

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_NOT_FOUND = 404

NO_ERROR_DETAIL = "no error detail provided"

READ_STATUSES: frozenset[int] = frozenset({HTTP_UNAUTHORIZED, HTTP_NOT_FOUND})
LIST_STATUSES: frozenset[int] = frozenset({HTTP_BAD_REQUEST, HTTP_UNAUTHORIZED, HTTP_NOT_FOUND})
MUTATION_STATUSES: frozenset[int] = frozenset({HTTP_UNAUTHORIZED})


def classify_response(
    status_code: int,
    body: bytes,
    *,
    success_status: int,
    recognized: AbstractSet[int],
) -> HttpOutcome:
    """
    ステータスコードを HttpOutcome へ分類する。

    Args:
        status_code: 受信した HTTP ステータス。
        body: 応答本文。
        success_status: 当該操作で成功とみなすステータス。
        recognized: 成功以外で個別に扱うステータスの集合。

    Returns:
        HttpOutcome: recognized に含まれないステータスは Unexpected となる。
    """

    if status_code == success_status:
        return Success(body=body)
    if status_code not in recognized:
        return Unexpected(status_code=status_code)
    if status_code == HTTP_UNAUTHORIZED:
        return AuthFailure()
    if status_code == HTTP_NOT_FOUND:
        return NotFound()
    if status_code == HTTP_BAD_REQUEST:
        return BadRequest(message=extract_error_message(body))
    return Unexpected(status_code=status_code)


def extract_error_message(body: bytes) -> str | None:
    """
    失敗応答からエラーメッセージを取り出す。

    復号できない場合とメッセージが空の場合はどちらも None を返す。
    """

    if not body:
        return None
    try:
        payload = ErrorPayloadSchema.model_validate_json(body).to_domain()
    except ValidationError:
        return None
    if not payload.has_message:
        return None
    return payload.message


def interpret_read(status_code: int, body: bytes, *, path: str) -> bytes:
    outcome = classify_response(status_code, body, success_status=HTTP_OK, recognized=READ_STATUSES)
    if isinstance(outcome, Success):
        return outcome.body
    raise _error_for(outcome, path)


def interpret_listing(status_code: int, body: bytes, *, path: str) -> list[DirectoryEntry]:
    outcome = classify_response(status_code, body, success_status=HTTP_OK, recognized=LIST_STATUSES)
    if isinstance(outcome, Success):
        return decode_directory_listing(outcome.body)
    raise _error_for(outcome, path)


def interpret_write(status_code: int, body: bytes, *, path: str) -> bool:
    return _interpret_mutation(status_code, body, success_status=HTTP_CREATED, path=path)


def interpret_delete(status_code: int, body: bytes, *, path: str) -> bool:
    return _interpret_mutation(status_code, body, success_status=HTTP_OK, path=path)


def decode_directory_listing(body: bytes) -> list[DirectoryEntry]:
    """
    一覧取得の応答本文を DirectoryEntry の列へ復号する。

    Raises:
        InvalidResponseError: JSON 配列として復号できない、または要素が不正な場合。
    """

    try:
        schemas = DIRECTORY_LISTING_ADAPTER.validate_json(body)
        return [schema.to_domain() for schema in schemas]
    except (ValidationError, ValueError) as exc:
        raise InvalidResponseError("ディレクトリ一覧の応答を復号できませんでした。") from exc


def _interpret_mutation(status_code: int, body: bytes, *, success_status: int, path: str) -> bool:
    # 認証失敗以外はソフトフェイルとして False を返す
    outcome = classify_response(status_code, body, success_status=success_status, recognized=MUTATION_STATUSES)
    if isinstance(outcome, Success):
        return True
    if isinstance(outcome, AuthFailure):
        raise AuthenticationError(path)
    return False


def _error_for(outcome: HttpOutcome, path: str) -> Exception:
    if isinstance(outcome, AuthFailure):
        return AuthenticationError(path)
    if isinstance(outcome, NotFound):
        return NotFoundError(path)
    if isinstance(outcome, BadRequest):
        return BadRequestError(outcome.message or NO_ERROR_DETAIL, path=path)
    if isinstance(outcome, Unexpected):
        return UnexpectedResponseError(outcome.status_code, path=path)
    raise TypeError(f"成功結果は例外へ変換できません: {outcome!r}")
