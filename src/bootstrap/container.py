"""
クライアント利用前の初期化を担う DI コンテナ。

設定は YAML から読み込み、ロギングとメトリクスを初期化したうえで、
ストレージ接続設定を含むコンテキストを利用側へ返す。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

from infrastructure.storage import StorageSettings


class ConfigLoader(Protocol):
    """設定ファイル群を読み込み、検証済みの構成を返すインターフェース。"""

    def load(self) -> "ConfigBundle":
        raise NotImplementedError


class LoggingConfigurator(Protocol):
    """ロギング設定を適用するインターフェース。"""

    def configure(self, config: Mapping[str, Any]) -> None:
        raise NotImplementedError


class MetricsConfigurator(Protocol):
    """メトリクスの初期化を行うインターフェース。"""

    def configure(self, config: Mapping[str, Any]) -> None:
        raise NotImplementedError


class BootstrapError(RuntimeError):
    """ブートストラップ処理でのエラーを表す基底例外。"""


class MissingConfigurationError(BootstrapError):
    """必須設定が欠落している場合の例外。"""


class InvalidConfigurationError(BootstrapError):
    """設定値が期待する形式ではない場合の例外。"""


@dataclass(frozen=True)
class ConfigBundle:
    """設定 YAML から構築された辞書ラッパー。"""

    root: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return dict(self.root)

    def require_section(self, section: str) -> Mapping[str, Any]:
        """
        指定セクションの存在と型を検証して返す。

        Raises:
            MissingConfigurationError: セクションが存在しない場合。
            InvalidConfigurationError: セクションがマッピングではない場合。
        """

        if section not in self.root:
            raise MissingConfigurationError(f"設定セクション '{section}' が存在しません。")

        value = self.root[section]
        if not isinstance(value, Mapping):
            raise InvalidConfigurationError(
                f"設定セクション '{section}' は Mapping である必要があります。"
            )
        return value

    def storage_settings(self) -> StorageSettings:
        """
        ``storage`` セクションから StorageSettings を構築する。

        Raises:
            InvalidConfigurationError: 値の検証に失敗した場合。
        """

        section = self.require_section("storage")
        try:
            return StorageSettings.from_mapping(section)
        except ValueError as exc:
            raise InvalidConfigurationError(str(exc)) from exc


@dataclass(frozen=True)
class BootstrapContext:
    """
    ブートストラップ処理後に利用側へ渡すコンテキスト。
    """

    config: ConfigBundle
    storage: StorageSettings


@dataclass
class BootstrapContainer:
    """
    設定ロード・ロギング・メトリクスの初期化を司るコンテナ。

    Attributes:
        project_root: プロジェクトのルートパス。
        config_loader_factory: ConfigLoader を生成するファクトリ。
        logging_configurator: ロギング設定適用オブジェクト。
        metrics_configurator: メトリクス設定適用オブジェクト。
    """

    project_root: Path
    config_loader_factory: Callable[[Path], ConfigLoader]
    logging_configurator: LoggingConfigurator
    metrics_configurator: MetricsConfigurator

    def initialize(self) -> BootstrapContext:
        """
        設定ロード・ロギング初期化・メトリクス初期化を順に実行する。

        Raises:
            BootstrapError: 初期化過程での検証エラー。
        """

        config_bundle = self.config_loader_factory(self.project_root).load()

        storage_settings = config_bundle.storage_settings()
        self.logging_configurator.configure(config_bundle.require_section("logging"))
        self.metrics_configurator.configure(config_bundle.require_section("metrics"))

        return BootstrapContext(config=config_bundle, storage=storage_settings)
