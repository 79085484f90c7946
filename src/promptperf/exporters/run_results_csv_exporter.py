# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for the raw per-run results."""

from promptperf.common.environment import Environment
from promptperf.exporters.base_exporter import BaseCsvExporter

RESULTS_HEADER = ["prompt", "difficulty", "category", "tokens", "ttft_ms", "latency_ms", "tps"]


class RunResultsCsvExporter(BaseCsvExporter):
    """Exports one row per successful first-pass run, in execution order.

    Columns: prompt text (quoted), difficulty, category, token proxy (chunk count),
    ttft in ms (1 decimal), latency in ms (1 decimal), throughput (2 decimals).
    """

    def get_file_name(self) -> str:
        return Environment.OUTPUT.RESULTS_FILE_NAME

    def _generate_content(self) -> str:
        rows = [
            [
                self._quote(r.prompt.text),
                r.prompt.difficulty.value,
                r.prompt.category.value,
                str(r.chunk_count),
                self._format_number(r.ttft_ms, 1),
                self._format_number(r.latency_ms, 1),
                self._format_number(r.throughput, 2),
            ]
            for r in self._config.raw_results
        ]
        return self._render(RESULTS_HEADER, rows)
