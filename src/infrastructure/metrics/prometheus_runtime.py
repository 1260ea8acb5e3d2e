"""
prometheus-client を利用する MetricsRegistry 実装。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from prometheus_client import CollectorRegistry, Counter as PrometheusCounter, Histogram as PrometheusHistogram

from .prometheus_exporter import Counter, Histogram, MetricsRegistry


class _LabelledCounter(Counter):
    def __init__(self, metric: PrometheusCounter) -> None:
        self._metric = metric

    def inc(self, value: float = 1.0, labels: Mapping[str, str] | None = None) -> None:
        target = self._metric.labels(**labels) if labels else self._metric
        target.inc(value)


class _LabelledHistogram(Histogram):
    def __init__(self, metric: PrometheusHistogram) -> None:
        self._metric = metric

    def observe(self, value: float, labels: Mapping[str, str] | None = None) -> None:
        target = self._metric.labels(**labels) if labels else self._metric
        target.observe(value)


@dataclass
class PrometheusMetricsRegistry(MetricsRegistry):
    """
    CollectorRegistry にメトリクスを登録する。

    同じ名前とラベル集合の要求には登録済みのメトリクスを返すため、
    MetricsRecorder を何度構成し直しても重複登録エラーにならない。
    """

    registry: CollectorRegistry

    _counters: dict[tuple[str, tuple[str, ...]], PrometheusCounter] = field(default_factory=dict, init=False)
    _histograms: dict[tuple[str, tuple[str, ...]], PrometheusHistogram] = field(default_factory=dict, init=False)

    def counter(self, name: str, documentation: str, labels: tuple[str, ...] | None = None) -> Counter:
        label_names = _sorted_labels(labels)
        metric = self._counters.get((name, label_names))
        if metric is None:
            metric = PrometheusCounter(name, documentation, labelnames=label_names, registry=self.registry)
            self._counters[(name, label_names)] = metric
        return _LabelledCounter(metric)

    def histogram(self, name: str, documentation: str, labels: tuple[str, ...] | None = None) -> Histogram:
        label_names = _sorted_labels(labels)
        metric = self._histograms.get((name, label_names))
        if metric is None:
            metric = PrometheusHistogram(name, documentation, labelnames=label_names, registry=self.registry)
            self._histograms[(name, label_names)] = metric
        return _LabelledHistogram(metric)


def _sorted_labels(labels: Sequence[str] | None) -> tuple[str, ...]:
    return tuple(sorted(labels)) if labels else ()
