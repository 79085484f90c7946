# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Aggregation of per-prompt run results."""

from promptperf.orchestrator.aggregation.aggregator import (
    aggregate_buckets,
    aggregate_prompt,
)
from promptperf.orchestrator.aggregation.stats import compute_stats

__all__ = [
    "aggregate_buckets",
    "aggregate_prompt",
    "compute_stats",
]
