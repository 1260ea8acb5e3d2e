"""
ストレージ API 呼び出しのメトリクス記録ユーティリティ。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .prometheus_exporter import Counter, Histogram, MetricsRegistry


@dataclass
class _MetricHandles:
    storage_requests_total: Counter
    storage_request_duration_seconds: Histogram


class MetricsRecorder:
    """
    グローバルなメトリクス記録を担当するヘルパ。
    MetricsRegistry が未設定の場合はすべての更新を無視する。
    """

    _registry: MetricsRegistry | None = None
    _handles: _MetricHandles | None = None
    _default_labels: Mapping[str, str] = {}

    @classmethod
    def configure(
        cls,
        registry: MetricsRegistry,
        *,
        default_labels: Mapping[str, str] | None = None,
    ) -> None:
        cls._registry = registry
        cls._default_labels = default_labels or {}
        base_label_names = tuple(cls._default_labels.keys())

        def _label_names(*names: str) -> tuple[str, ...]:
            return base_label_names + names

        cls._handles = _MetricHandles(
            storage_requests_total=registry.counter(
                "storage_requests",
                "Number of storage API requests by operation and outcome",
                labels=_label_names("operation", "outcome"),
            ),
            storage_request_duration_seconds=registry.histogram(
                "storage_request_duration_seconds",
                "Round-trip duration of storage API requests in seconds",
                labels=_label_names("operation"),
            ),
        )

    @classmethod
    def _merge_labels(cls, extra: Mapping[str, str] | None) -> Mapping[str, str]:
        if not extra:
            return cls._default_labels
        merged = dict(cls._default_labels)
        merged.update(extra)
        return merged

    @classmethod
    def observe_storage_request(cls, operation: str, outcome: str, duration_seconds: float) -> None:
        """
        outcome には HTTP ステータスコード、トランスポート失敗時は "error" を渡す。
        """

        if not cls._handles:
            return
        cls._handles.storage_requests_total.inc(labels=cls._merge_labels({"operation": operation, "outcome": outcome}))
        cls._handles.storage_request_duration_seconds.observe(
            duration_seconds, labels=cls._merge_labels({"operation": operation})
        )

    @classmethod
    def reset(cls) -> None:
        cls._registry = None
        cls._handles = None
        cls._default_labels = {}
