# src/nzb_kit/observability/base.py

from typing import Protocol


class MetricsHook(Protocol):
    """
    Receives parse metrics; see nzb_kit.observability.names.

    Implementations forward to a backend (Prometheus, StatsD, ...) and must
    not raise, since they are called on the parse path.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
