# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for per-prompt aggregate statistics."""

import orjson

from promptperf.common.environment import Environment
from promptperf.exporters.base_exporter import BaseArtifactExporter


class SummaryJsonExporter(BaseArtifactExporter):
    """Exports the ordered aggregates and failure list to JSON.

    Output structure:
    {
        "metadata": {...},
        "num_successful_runs": 11,
        "num_failed_runs": 1,
        "num_recovered_runs": 0,
        "aggregates": [{"prompt": {...}, "tokens": {"mean": .., "sd": ..}, ...}],
        "failures": [{"prompt": {...}, "message": "...", "recovered": false}]
    }
    """

    def get_file_name(self) -> str:
        return Environment.OUTPUT.SUMMARY_FILE_NAME

    def _generate_content(self) -> str:
        output = {
            "metadata": self._config.metadata,
            "num_successful_runs": sum(a.sample_count for a in self._config.aggregates),
            "num_failed_runs": len(self._config.failures),
            "num_recovered_runs": sum(1 for f in self._config.failures if f.recovered),
            "aggregates": [a.model_dump(mode="json") for a in self._config.aggregates],
            "failures": [f.model_dump(mode="json") for f in self._config.failures],
        }
        return orjson.dumps(output, option=orjson.OPT_INDENT_2).decode("utf-8")
