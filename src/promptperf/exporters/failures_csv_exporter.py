# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for failed runs."""

from promptperf.common.environment import Environment
from promptperf.exporters.base_exporter import BaseCsvExporter

FAILURES_HEADER = ["prompt", "difficulty", "error"]


class FailuresCsvExporter(BaseCsvExporter):
    """Exports one row per failed first-pass run, with the retry error if the retry failed too.

    Only written when there is at least one failure.
    """

    def get_file_name(self) -> str:
        return Environment.OUTPUT.FAILURES_FILE_NAME

    def _generate_content(self) -> str:
        rows = [
            [
                self._quote(f.prompt.text),
                f.prompt.difficulty.value,
                self._quote(f.message),
            ]
            for f in self._config.failures
        ]
        return self._render(FAILURES_HEADER, rows)
