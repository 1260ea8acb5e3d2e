"""
メトリクス関連の公開API。
"""

from .prometheus_exporter import Counter, Histogram, MetricsRegistry
from .prometheus_runtime import PrometheusMetricsRegistry
from .recorder import MetricsRecorder

__all__ = [
    "Counter",
    "Histogram",
    "MetricsRegistry",
    "PrometheusMetricsRegistry",
    "MetricsRecorder",
]
