# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass, field
from pathlib import Path

from promptperf.common.enums import CacheMode, RunnerStatus
from promptperf.common.models import AggregatedMetrics, FailedRun


@dataclass(slots=True)
class RunnerState:
    """Observable state of a BenchmarkRunner.

    Written only by the runner while a sweep is in progress; read by the
    presentation layer at any time. Survives between sweeps until the next
    `run_all` resets it.

    Attributes:
        status: IDLE or RUNNING
        progress: Fraction of first-pass runs completed, in [0, 1]
        results_path: Location of the results CSV of the last sweep
        failures_path: Location of the failures CSV, None on a clean sweep
        summary_path: Location of the JSON summary of the last sweep
        error_message: Export error of the last sweep, if any
        aggregates: Ordered per-prompt summaries of the last sweep
        failures: One entry per failed first-pass run, in execution order. Carries
            the retry error when the retry failed too, otherwise marked recovered
        cache_mode: Warm or cold cache policy used by the next sweep
        event_loop_stalls: Number of event loop stalls detected during the last sweep
    """

    status: RunnerStatus = RunnerStatus.IDLE
    progress: float = 0.0
    results_path: Path | None = None
    failures_path: Path | None = None
    summary_path: Path | None = None
    error_message: str | None = None
    aggregates: list[AggregatedMetrics] = field(default_factory=list)
    failures: list[FailedRun] = field(default_factory=list)
    cache_mode: CacheMode = CacheMode.WARM
    event_loop_stalls: int = 0

    @property
    def is_running(self) -> bool:
        return self.status == RunnerStatus.RUNNING

    def reset(self) -> None:
        """Clear the results of the previous sweep. Status and cache mode are kept."""
        self.progress = 0.0
        self.results_path = None
        self.failures_path = None
        self.summary_path = None
        self.error_message = None
        self.aggregates = []
        self.failures = []
        self.event_loop_stalls = 0
