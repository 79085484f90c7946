# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Reduction of per-prompt result buckets into ordered summaries."""

import logging
from collections.abc import Mapping, Sequence

from promptperf.common.models import AggregatedMetrics, PromptSpec, RunResult
from promptperf.orchestrator.aggregation.stats import compute_stats

logger = logging.getLogger(__name__)


def aggregate_prompt(prompt: PromptSpec, results: Sequence[RunResult]) -> AggregatedMetrics:
    """Compute statistics over every successful run of one prompt.

    Args:
        prompt: The prompt the results belong to
        results: Successful runs, in the order they completed (must not be empty)

    Returns:
        AggregatedMetrics whose sample output is the first result's text

    Raises:
        ValueError: If results is empty
    """
    if not results:
        raise ValueError(f"Cannot aggregate prompt without successful runs: {prompt.label}")

    return AggregatedMetrics(
        prompt=prompt,
        tokens=compute_stats([float(r.chunk_count) for r in results]),
        ttft=compute_stats([r.ttft_ms for r in results]),
        latency=compute_stats([r.latency_ms for r in results]),
        throughput=compute_stats([r.throughput for r in results]),
        sample_output=results[0].generated_text,
        sample_count=len(results),
    )


def aggregate_buckets(
    buckets: Mapping[PromptSpec, Sequence[RunResult]],
) -> list[AggregatedMetrics]:
    """Aggregate every non-empty bucket and order the summaries for display.

    Prompts with an empty bucket produce no summary. The output is sorted by
    difficulty (easy, medium, hard), then reasoning before generative. The sort
    is stable, so prompts that tie on both keep their bucket order.

    Args:
        buckets: Mapping of prompt to its successful runs

    Returns:
        List of AggregatedMetrics, one per prompt with at least one success
    """
    aggregates = []
    for prompt, results in buckets.items():
        if not results:
            logger.debug(f"No successful runs for {prompt.label}; skipping aggregate")
            continue
        aggregates.append(aggregate_prompt(prompt, results))

    return sorted(aggregates, key=lambda agg: agg.prompt.sort_key)
