# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promptperf.orchestrator.aggregation import (
    aggregate_buckets,
    aggregate_prompt,
    compute_stats,
)
from promptperf.orchestrator.executor import SingleRunExecutor
from promptperf.orchestrator.orchestrator import BenchmarkRunner
from promptperf.orchestrator.state import RunnerState

__all__ = [
    "BenchmarkRunner",
    "RunnerState",
    "SingleRunExecutor",
    "aggregate_buckets",
    "aggregate_prompt",
    "compute_stats",
]
