"""
ストレージアクセス層の公開API。
"""

from .exceptions import (
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    InvalidCredentialError,
    InvalidResponseError,
    InvalidZoneError,
    NotFoundError,
    StorageAPIError,
    UnexpectedResponseError,
)
from .response_interpreter import (
    NO_ERROR_DETAIL,
    classify_response,
    decode_directory_listing,
    extract_error_message,
    interpret_delete,
    interpret_listing,
    interpret_read,
    interpret_write,
)
from .settings import DEFAULT_BASE_URL, StorageSettings
from .storage_client import ACCESS_KEY_HEADER, ObjectStorageClient, StorageClient

__all__ = [
    "ACCESS_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "NO_ERROR_DETAIL",
    "AuthenticationError",
    "BadRequestError",
    "ConfigurationError",
    "InvalidCredentialError",
    "InvalidResponseError",
    "InvalidZoneError",
    "NotFoundError",
    "ObjectStorageClient",
    "StorageAPIError",
    "StorageClient",
    "StorageSettings",
    "UnexpectedResponseError",
    "classify_response",
    "decode_directory_listing",
    "extract_error_message",
    "interpret_delete",
    "interpret_listing",
    "interpret_read",
    "interpret_write",
]
