# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from promptperf.common.models import AggregatedMetrics, FailedRun, Stats


def format_stats(stats: Stats, decimals: int = 1) -> str:
    """Render `mean ± sd`."""
    return f"{stats.mean:.{decimals}f} ± {stats.sd:.{decimals}f}"


class ConsoleSummaryExporter:
    """Prints per-prompt aggregates and failed prompts to the console."""

    def __init__(
        self,
        aggregates: Sequence[AggregatedMetrics],
        failures: Sequence[FailedRun],
        show_sample_output: bool = False,
    ) -> None:
        self.aggregates = aggregates
        self.failures = failures
        self.show_sample_output = show_sample_output

    def build_metrics_table(self) -> Table:
        table = Table(title="LLM Benchmarks (mean ± sd)", title_justify="left")
        table.add_column("Prompt", style="cyan", no_wrap=True)
        table.add_column("Runs", justify="right")
        table.add_column("Tokens", justify="right")
        table.add_column("TTFT (ms)", justify="right")
        table.add_column("Latency (ms)", justify="right")
        table.add_column("TPS", justify="right")

        for agg in self.aggregates:
            table.add_row(
                agg.prompt.label,
                str(agg.sample_count),
                format_stats(agg.tokens),
                format_stats(agg.ttft),
                format_stats(agg.latency),
                format_stats(agg.throughput),
            )
        return table

    def build_failures_table(self) -> Table:
        table = Table(title="Failed Prompts", title_justify="left", title_style="bold red")
        table.add_column("Prompt", style="cyan", no_wrap=True)
        table.add_column("Text", overflow="ellipsis", max_width=60, no_wrap=True)
        table.add_column("Error", style="red")
        table.add_column("Retry", justify="center")
        for failure in self.failures:
            table.add_row(
                failure.prompt.label,
                failure.prompt.text,
                failure.message,
                "[green]recovered[/]" if failure.recovered else "[red]failed[/]",
            )
        return table

    def export(self, console: Console) -> None:
        if self.aggregates:
            console.print(self.build_metrics_table())
        else:
            console.print("[yellow]No successful runs.[/]")

        if self.show_sample_output:
            for agg in self.aggregates:
                console.rule(f"Sample output: {agg.prompt.label}")
                console.print(agg.sample_output, markup=False, highlight=False)

        if self.failures:
            console.print(self.build_failures_table())
