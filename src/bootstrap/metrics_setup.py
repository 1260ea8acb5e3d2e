"""
メトリクス初期化ロジック。
"""

from __future__ import annotations

from typing import Any, Mapping

from prometheus_client import CollectorRegistry

from infrastructure.metrics import MetricsRecorder, PrometheusMetricsRegistry

from .container import InvalidConfigurationError, MetricsConfigurator


class MetricsConfiguratorRegistry(MetricsConfigurator):
    """
    provider 名に応じて委譲するディスパッチャ。
    """

    def __init__(self, delegates: Mapping[str, MetricsConfigurator]) -> None:
        if not delegates:
            raise ValueError("メトリクス設定の委譲先が定義されていません。")
        self._delegates = dict(delegates)

    def configure(self, config: Mapping[str, Any]) -> None:
        provider = _require_string(config, "provider")
        delegate = self._delegates.get(provider)
        if delegate is None:
            raise InvalidConfigurationError(
                f"metrics provider '{provider}' に対応する初期化ロジックが見つかりません。"
            )
        delegate.configure(config)


class NoopMetricsConfigurator(MetricsConfigurator):
    """
    provider == noop の場合に適用する実装。記録先を解除する。
    """

    EXPECTED_PROVIDER = "noop"

    def configure(self, config: Mapping[str, Any]) -> None:
        provider = _require_string(config, "provider")
        if provider != self.EXPECTED_PROVIDER:
            raise InvalidConfigurationError(
                f"provider '{provider}' は NoopMetricsConfigurator では扱えません。"
            )
        MetricsRecorder.reset()


class PrometheusMetricsConfigurator(MetricsConfigurator):
    """
    provider == prometheus の場合に適用する実装。

    CollectorRegistry はインスタンスごとに一度だけ生成し、公開方法 (/metrics エンドポイント等) は
    ホスト側が registry プロパティを通じて決める。
    """

    EXPECTED_PROVIDER = "prometheus"

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._metrics_registry = PrometheusMetricsRegistry(registry=registry or CollectorRegistry())

    @property
    def registry(self) -> CollectorRegistry:
        return self._metrics_registry.registry

    def configure(self, config: Mapping[str, Any]) -> None:
        provider = _require_string(config, "provider")
        if provider != self.EXPECTED_PROVIDER:
            raise InvalidConfigurationError(
                f"provider '{provider}' は PrometheusMetricsConfigurator では扱えません。"
            )

        options = config.get("options", {})
        if not isinstance(options, Mapping):
            raise InvalidConfigurationError("metrics.options は Mapping である必要があります。")

        MetricsRecorder.configure(
            self._metrics_registry,
            default_labels=_parse_default_labels(options.get("default_labels")),
        )


def default_metrics_configurator() -> MetricsConfiguratorRegistry:
    return MetricsConfiguratorRegistry(
        {
            NoopMetricsConfigurator.EXPECTED_PROVIDER: NoopMetricsConfigurator(),
            PrometheusMetricsConfigurator.EXPECTED_PROVIDER: PrometheusMetricsConfigurator(),
        }
    )


def _require_string(config: Mapping[str, Any], key: str) -> str:
    if key not in config:
        raise InvalidConfigurationError(f"metrics 設定に '{key}' が存在しません。")
    value = config[key]
    if not isinstance(value, str) or not value:
        raise InvalidConfigurationError(f"metrics 設定の '{key}' は非空の str である必要があります。")
    return value


def _parse_default_labels(raw: object) -> Mapping[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidConfigurationError("metrics.options.default_labels は Mapping である必要があります。")
    labels: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not key:
            raise InvalidConfigurationError("default_labels のキーは非空の文字列である必要があります。")
        labels[key] = str(value)
    return labels
