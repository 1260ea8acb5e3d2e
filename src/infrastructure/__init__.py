"""
インフラ層のパッケージ初期化。
"""

from .metrics import MetricsRecorder, PrometheusMetricsRegistry
from .storage import (
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    InvalidCredentialError,
    InvalidResponseError,
    InvalidZoneError,
    NotFoundError,
    ObjectStorageClient,
    StorageAPIError,
    StorageClient,
    StorageSettings,
    UnexpectedResponseError,
)

__all__ = [
    "MetricsRecorder",
    "PrometheusMetricsRegistry",
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
]
