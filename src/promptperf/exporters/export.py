# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import contextlib
from dataclasses import dataclass
from pathlib import Path

import aiofiles.os

from promptperf.common.exceptions import WriteError
from promptperf.exporters.exporter_config import ExporterConfig
from promptperf.exporters.failures_csv_exporter import FailuresCsvExporter
from promptperf.exporters.run_results_csv_exporter import RunResultsCsvExporter
from promptperf.exporters.summary_json_exporter import SummaryJsonExporter


@dataclass(frozen=True, slots=True)
class ExportPaths:
    """Locations of the artifacts written for one sweep."""

    results_path: Path
    failures_path: Path | None
    summary_path: Path


async def export_results(config: ExporterConfig) -> ExportPaths:
    """Write the results CSV, the failures CSV (when there are failures) and the JSON summary.

    On a clean run a failures file left over from an earlier sweep is removed, so
    that the absence of the file reliably means no run failed.

    Raises:
        WriteError: If any artifact cannot be written
    """
    results_path = await RunResultsCsvExporter(config).export()

    failures_exporter = FailuresCsvExporter(config)
    failures_path: Path | None = None
    if config.failures:
        failures_path = await failures_exporter.export()
    else:
        stale_path = failures_exporter.get_file_path()
        try:
            with contextlib.suppress(FileNotFoundError):
                await aiofiles.os.remove(stale_path)
        except OSError as e:
            raise WriteError(
                f"Failed to remove stale failures file {stale_path}: {e}", path=stale_path
            ) from e

    summary_path = await SummaryJsonExporter(config).export()

    return ExportPaths(
        results_path=results_path,
        failures_path=failures_path,
        summary_path=summary_path,
    )
