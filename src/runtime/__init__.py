"""
runtime パッケージ公開 API。
"""

from .dependencies import build_bootstrap_container, build_storage_client, initialize_runtime

__all__ = [
    "build_bootstrap_container",
    "build_storage_client",
    "initialize_runtime",
]
