from __future__ import annotations

from typing import Iterator

import httpx
import pytest
from prometheus_client import CollectorRegistry

from infrastructure.metrics.prometheus_runtime import PrometheusMetricsRegistry
from infrastructure.metrics.recorder import MetricsRecorder
from infrastructure.storage import StorageClient, StorageSettings


@pytest.fixture()
def registry() -> Iterator[CollectorRegistry]:
    collector = CollectorRegistry()
    MetricsRecorder.configure(PrometheusMetricsRegistry(registry=collector), default_labels={"service": "test"})
    yield collector
    MetricsRecorder.reset()


def test_metrics_recorder_updates_prometheus_metrics(registry: CollectorRegistry) -> None:
    MetricsRecorder.observe_storage_request("read", "200", 0.25)
    MetricsRecorder.observe_storage_request("read", "200", 0.5)

    total = registry.get_sample_value(
        "storage_requests_total",
        labels={"operation": "read", "outcome": "200", "service": "test"},
    )
    assert total == 2.0

    duration_sum = registry.get_sample_value(
        "storage_request_duration_seconds_sum",
        labels={"operation": "read", "service": "test"},
    )
    assert duration_sum == pytest.approx(0.75)


def test_metrics_recorder_is_noop_when_unconfigured() -> None:
    MetricsRecorder.reset()
    MetricsRecorder.observe_storage_request("read", "200", 0.1)


@pytest.mark.anyio
async def test_storage_client_records_outcome_and_transport_errors(registry: CollectorRegistry) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("broken.txt"):
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(404)

    transport = httpx.MockTransport(handler)
    client = StorageClient(
        "token",
        "zone",
        settings=StorageSettings(base_url="https://storage.example/"),
        client_factory=lambda cfg, _: httpx.AsyncClient(base_url=cfg.base_url, transport=transport),
    )

    async with client:
        assert await client.delete("gone.txt") is False
        with pytest.raises(httpx.ReadTimeout):
            await client.delete("broken.txt")

    assert (
        registry.get_sample_value(
            "storage_requests_total",
            labels={"operation": "delete", "outcome": "404", "service": "test"},
        )
        == 1.0
    )
    assert (
        registry.get_sample_value(
            "storage_requests_total",
            labels={"operation": "delete", "outcome": "error", "service": "test"},
        )
        == 1.0
    )
