# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters for benchmark results."""

from promptperf.exporters.base_exporter import BaseArtifactExporter, BaseCsvExporter
from promptperf.exporters.console_exporter import ConsoleSummaryExporter, format_stats
from promptperf.exporters.export import ExportPaths, export_results
from promptperf.exporters.exporter_config import ExporterConfig
from promptperf.exporters.failures_csv_exporter import FailuresCsvExporter
from promptperf.exporters.run_results_csv_exporter import RunResultsCsvExporter
from promptperf.exporters.summary_json_exporter import SummaryJsonExporter

__all__ = [
    "BaseArtifactExporter",
    "BaseCsvExporter",
    "ConsoleSummaryExporter",
    "ExportPaths",
    "ExporterConfig",
    "FailuresCsvExporter",
    "RunResultsCsvExporter",
    "SummaryJsonExporter",
    "export_results",
    "format_stats",
]
