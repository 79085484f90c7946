# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for artifact exporters."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from promptperf.common.models import AggregatedMetrics, FailedRun, RunResult


@dataclass(slots=True)
class ExporterConfig:
    """Everything the exporters need from a finished sweep.

    Attributes:
        raw_results: First-pass successes in execution order (trial-major, bank order)
        failures: One entry per failed first-pass run, in execution order. An entry
            carries the retry error if the retry failed too, otherwise `recovered=True`
        aggregates: Ordered per-prompt summaries
        output_dir: Directory where export files are written
        metadata: Extra run information for the JSON summary (trials, cache mode, ...)
    """

    raw_results: Sequence[RunResult]
    failures: Sequence[FailedRun]
    output_dir: Path
    aggregates: Sequence[AggregatedMetrics] = ()
    metadata: dict[str, Any] = field(default_factory=dict)
