"""In-memory metrics registry exposed on /metrics."""

from __future__ import annotations

import time
from collections import defaultdict
from contextlib import contextmanager
from threading import Lock
from typing import Dict, Iterator

_lock = Lock()
_counters: Dict[str, float] = defaultdict(float)
_hist_sum: Dict[str, float] = defaultdict(float)
_hist_count: Dict[str, float] = defaultdict(float)


def _build_key(name: str, labels: dict[str, str] | None = None) -> str:
    if not labels:
        return name
    label_expr = ",".join(f'{k}="{v}"' for k, v in sorted(labels.items()))
    return f"{name}{{{label_expr}}}"


def inc_counter(name: str, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
    key = _build_key(name, labels)
    with _lock:
        _counters[key] += value


def get_counter(name: str, labels: dict[str, str] | None = None) -> float:
    with _lock:
        return _counters.get(_build_key(name, labels), 0.0)


def observe_histogram(name: str, value: float, labels: dict[str, str] | None = None) -> None:
    sum_key = _build_key(f"{name}_sum", labels)
    count_key = _build_key(f"{name}_count", labels)
    with _lock:
        _hist_sum[sum_key] += value
        _hist_count[count_key] += 1.0


@contextmanager
def timed(name: str, labels: dict[str, str] | None = None) -> Iterator[None]:
    """Observes the elapsed seconds of the block, including when it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        observe_histogram(name, time.perf_counter() - start, labels)


def render_metrics() -> str:
    with _lock:
        lines = [f"{key} {val}" for key, val in sorted(_counters.items())]
        lines += [f"{key} {val}" for key, val in sorted(_hist_sum.items())]
        lines += [f"{key} {val}" for key, val in sorted(_hist_count.items())]
    return "\n".join(lines) + ("\n" if lines else "")
