"""Metrics hook protocol and no-op default implementation.

listiller emits counters, timings and gauges for every diff cycle and
every client finalize pass.  By default a :class:`NoopMetricsHook` is
used so there is zero overhead.  Supply any object satisfying
:class:`MetricsHook` via ``ListillerConfig(metrics=...)`` to route them
to a real backend.

Emitted metric names:

* ``listiller.cycles_total``          -- counter, tag ``result``
* ``listiller.diff_ops_total``        -- counter, tag ``op_type``
* ``listiller.cycle_duration_ms``     -- timing
* ``listiller.list_size``             -- gauge
* ``listiller.client.moves_total``    -- counter, tag ``outcome``
* ``listiller.client.deletes_total``  -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict whose keys and values are
    strings.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(metrics: MetricsHook | None) -> MetricsHook:
    """Return *metrics*, or a :class:`NoopMetricsHook` when it is ``None``."""
    return metrics if metrics is not None else NoopMetricsHook()
