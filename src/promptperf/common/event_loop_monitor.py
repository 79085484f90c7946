# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Event loop health monitoring during a benchmark sweep.

Latency and time-to-first-chunk are measured on the event loop. If the loop is
blocked while a stream is being consumed, chunk timestamps are recorded late
and the measurements are inflated. This monitor runs alongside the sweep and
reports such stalls so they can be taken into account when reading results.
"""

import asyncio
import time
from collections.abc import Callable

from promptperf.common.constants import (
    MILLIS_PER_SECOND,
    NANOS_PER_MILLIS,
    NANOS_PER_SECOND,
)
from promptperf.common.environment import Environment
from promptperf.common.mixins import PromptPerfLoggerMixin


class EventLoopMonitor(PromptPerfLoggerMixin):
    """Background task that detects a blocked event loop.

    Sleeps for a known interval and compares it with the elapsed time. A delta
    above the threshold means something blocked the loop.

    Configurable via Environment.RUNNER:
    - PROMPTPERF_RUNNER_EVENT_LOOP_HEALTH_ENABLED (default: True)
    - PROMPTPERF_RUNNER_EVENT_LOOP_HEALTH_INTERVAL (default: 0.25)
    - PROMPTPERF_RUNNER_EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS (default: 10)
    """

    def __init__(self, name: str = "benchmark", **kwargs) -> None:
        super().__init__(**kwargs)
        self._name = name
        self._task: asyncio.Task | None = None
        self._stop_requested = False
        self._callback: Callable[[float], None] | None = None
        self.stall_count = 0
        self.max_stall_ms = 0.0

    def set_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback invoked with the blocked duration (ms) of every stall."""
        self._callback = callback

    def start(self) -> None:
        """Start the monitoring task. Must be called from a running event loop."""
        self._stop_requested = False
        self.stall_count = 0
        self.max_stall_ms = 0.0
        if self._task is None:
            self._task = asyncio.create_task(self._monitor_event_loop())

    def stop(self) -> None:
        """Stop the monitoring task."""
        if self._stop_requested:
            return
        self._stop_requested = True
        if self._task is not None:
            self._task.cancel()
        self._task = None

    async def _monitor_event_loop(self) -> None:
        if not Environment.RUNNER.EVENT_LOOP_HEALTH_ENABLED:
            return

        interval_sec = Environment.RUNNER.EVENT_LOOP_HEALTH_INTERVAL
        threshold_ns = (
            Environment.RUNNER.EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS * NANOS_PER_MILLIS
        )
        expected_ns = round(interval_sec * NANOS_PER_SECOND)

        while not self._stop_requested:
            start_perf_ns = time.perf_counter_ns()
            await asyncio.sleep(interval_sec)
            elapsed_ns = time.perf_counter_ns() - start_perf_ns
            delta_ns = elapsed_ns - expected_ns
            if self.is_trace_enabled:
                self.trace(
                    f"Event loop health check: expected {interval_sec * MILLIS_PER_SECOND:.1f}ms, "
                    f"actual {elapsed_ns / NANOS_PER_MILLIS:.2f}ms, delta {delta_ns / NANOS_PER_MILLIS:.2f}ms"
                )
            if delta_ns > threshold_ns:
                stall_ms = delta_ns / NANOS_PER_MILLIS
                self.stall_count += 1
                self.max_stall_ms = max(self.max_stall_ms, stall_ms)
                self.warning(
                    f"Event loop for {self._name} was blocked for {stall_ms:,.2f}ms. "
                    "Latency measurements taken during this window are inflated."
                )
                if self._callback is not None:
                    self._callback(stall_ms)
