"""
メトリクスレジストリの抽象インターフェース。
"""

from __future__ import annotations

from typing import Mapping, Protocol


class Counter(Protocol):
    def inc(self, value: float = 1.0, labels: Mapping[str, str] | None = None) -> None:
        ...


class Histogram(Protocol):
    def observe(self, value: float, labels: Mapping[str, str] | None = None) -> None:
        ...


class MetricsRegistry(Protocol):
    """
    Prometheus レジストリを抽象化。
    """

    def counter(self, name: str, documentation: str, labels: tuple[str, ...] | None = None) -> Counter:
        ...

    def histogram(self, name: str, documentation: str, labels: tuple[str, ...] | None = None) -> Histogram:
        ...
