"""
ランタイム依存関係のビルダー。
"""

from __future__ import annotations

import os
from pathlib import Path

from bootstrap import (
    BootstrapContainer,
    BootstrapContext,
    DictConfigLoggingConfigurator,
    YamlConfigLoader,
    default_metrics_configurator,
)
from infrastructure.storage import StorageClient, StorageSettings


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _environment() -> str:
    return os.getenv("SERVICE_ENV", "dev")


def build_bootstrap_container(
    *,
    environment: str | None = None,
    project_root: Path | None = None,
) -> BootstrapContainer:
    env = environment or _environment()
    return BootstrapContainer(
        project_root=project_root or _project_root(),
        config_loader_factory=lambda root: YamlConfigLoader(root, environment=env),
        logging_configurator=DictConfigLoggingConfigurator(),
        metrics_configurator=default_metrics_configurator(),
    )


def initialize_runtime(
    *,
    environment: str | None = None,
    project_root: Path | None = None,
) -> BootstrapContext:
    """設定ロード・ロギング・メトリクス初期化を行い、コンテキストを返す。"""

    return build_bootstrap_container(environment=environment, project_root=project_root).initialize()


def build_storage_client(
    access_key: str,
    zone: str,
    *,
    settings: StorageSettings | None = None,
    environment: str | None = None,
    project_root: Path | None = None,
) -> StorageClient:
    """
    設定済みの StorageSettings で StorageClient を生成する。

    settings が省略された場合は storage セクションのみを読み込む。ロギングと
    メトリクスの初期化は initialize_runtime の責務であり、ここでは行わない。
    """

    if settings is None:
        env = environment or _environment()
        settings = YamlConfigLoader(project_root or _project_root(), environment=env).load().storage_settings()
    return StorageClient(access_key, zone, settings=settings)
