# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the CSV and JSON artifact exporters."""

from unittest.mock import patch

import orjson
import pytest

from promptperf.common.exceptions import WriteError
from promptperf.common.models import FailedRun, PromptSpec, RunResult
from promptperf.exporters import (
    ExporterConfig,
    FailuresCsvExporter,
    RunResultsCsvExporter,
    SummaryJsonExporter,
    export_results,
)
from promptperf.orchestrator.aggregation import aggregate_buckets


@pytest.fixture
def quoted_prompt() -> PromptSpec:
    return PromptSpec(
        difficulty="medium",
        category="generative",
        text='Say "hello", then\nstop.',
    )


@pytest.fixture
def raw_results(quoted_prompt, easy_reasoning_prompt) -> list[RunResult]:
    return [
        RunResult(
            prompt=quoted_prompt,
            generated_text="hello",
            chunk_count=3,
            ttft_ms=12.34,
            latency_ms=987.66,
        ),
        RunResult(
            prompt=easy_reasoning_prompt,
            generated_text="4",
            chunk_count=1,
            ttft_ms=5.0,
            latency_ms=0.0,
        ),
    ]


class TestRunResultsCsvExporter:
    def test_content(self, tmp_path, raw_results):
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=tmp_path)

        content = RunResultsCsvExporter(config)._generate_content()

        assert content == (
            "prompt,difficulty,category,tokens,ttft_ms,latency_ms,tps\n"
            '"Say ""hello"", then\nstop.",medium,generative,3,12.3,987.7,3.04\n'
            '"What is 2 + 2?",easy,reasoning,1,5.0,0.0,0.00\n'
        )

    def test_header_only_without_results(self, tmp_path):
        config = ExporterConfig(raw_results=[], failures=[], output_dir=tmp_path)

        content = RunResultsCsvExporter(config)._generate_content()

        assert content == "prompt,difficulty,category,tokens,ttft_ms,latency_ms,tps\n"

    @pytest.mark.asyncio
    async def test_export_overwrites_existing_file(self, tmp_path, raw_results):
        target = tmp_path / "benchmark_results.csv"
        target.write_text("old content")
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=tmp_path)

        path = await RunResultsCsvExporter(config).export()

        assert path == target
        assert path.read_text(encoding="utf-8").startswith("prompt,difficulty")
        assert [p.name for p in tmp_path.iterdir()] == ["benchmark_results.csv"]

    @pytest.mark.asyncio
    async def test_export_creates_output_dir(self, tmp_path, raw_results):
        output_dir = tmp_path / "a" / "b"
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=output_dir)

        path = await RunResultsCsvExporter(config).export()

        assert path.parent == output_dir
        assert path.exists()

    @pytest.mark.asyncio
    async def test_unwritable_destination_raises_write_error(self, tmp_path, raw_results):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=blocker)

        with pytest.raises(WriteError) as exc_info:
            await RunResultsCsvExporter(config).export()

        assert exc_info.value.path == blocker / "benchmark_results.csv"

    @pytest.mark.asyncio
    async def test_failed_write_leaves_no_temp_file(self, tmp_path, raw_results):
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=tmp_path)

        with (
            patch("promptperf.exporters.base_exporter.aiofiles.os.replace", side_effect=OSError("disk full")),
            pytest.raises(WriteError, match="disk full"),
        ):
            await RunResultsCsvExporter(config).export()

        assert list(tmp_path.iterdir()) == []


class TestFailuresCsvExporter:
    def test_content(self, tmp_path, quoted_prompt, easy_reasoning_prompt):
        failures = [
            FailedRun(prompt=quoted_prompt, message='unexpected token "}"'),
            FailedRun(prompt=easy_reasoning_prompt, message="timeout, giving up"),
        ]
        config = ExporterConfig(raw_results=[], failures=failures, output_dir=tmp_path)

        content = FailuresCsvExporter(config)._generate_content()

        assert content == (
            "prompt,difficulty,error\n"
            '"Say ""hello"", then\nstop.",medium,"unexpected token ""}"""\n'
            '"What is 2 + 2?",easy,"timeout, giving up"\n'
        )

    def test_one_row_per_occurrence_including_recovered(self, tmp_path, easy_reasoning_prompt):
        failures = [
            FailedRun(prompt=easy_reasoning_prompt, message="flaky", recovered=True),
            FailedRun(prompt=easy_reasoning_prompt, message="still down"),
        ]
        config = ExporterConfig(raw_results=[], failures=failures, output_dir=tmp_path)

        content = FailuresCsvExporter(config)._generate_content()

        assert content == (
            "prompt,difficulty,error\n"
            '"What is 2 + 2?",easy,"flaky"\n'
            '"What is 2 + 2?",easy,"still down"\n'
        )


class TestSummaryJsonExporter:
    def test_content(self, tmp_path, raw_results, easy_reasoning_prompt):
        buckets = {r.prompt: [r] for r in raw_results}
        config = ExporterConfig(
            raw_results=raw_results,
            failures=[FailedRun(prompt=easy_reasoning_prompt, message="x", recovered=True)],
            output_dir=tmp_path,
            aggregates=aggregate_buckets(buckets),
            metadata={"trials": 1},
        )

        summary = orjson.loads(SummaryJsonExporter(config)._generate_content())

        assert summary["metadata"] == {"trials": 1}
        assert summary["num_successful_runs"] == 2
        assert summary["num_failed_runs"] == 1
        assert summary["num_recovered_runs"] == 1
        assert [a["prompt"]["difficulty"] for a in summary["aggregates"]] == ["easy", "medium"]
        assert summary["failures"][0]["recovered"] is True


class TestExportResults:
    @pytest.mark.asyncio
    async def test_clean_run_writes_no_failures_file(self, tmp_path, raw_results):
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=tmp_path)

        paths = await export_results(config)

        assert paths.failures_path is None
        assert paths.results_path == tmp_path / "benchmark_results.csv"
        assert paths.summary_path == tmp_path / "benchmark_summary.json"
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "benchmark_results.csv",
            "benchmark_summary.json",
        ]

    @pytest.mark.asyncio
    async def test_failures_file_written_when_failures_exist(self, tmp_path, easy_reasoning_prompt):
        failures = [FailedRun(prompt=easy_reasoning_prompt, message="boom")]
        config = ExporterConfig(raw_results=[], failures=failures, output_dir=tmp_path)

        paths = await export_results(config)

        assert paths.failures_path == tmp_path / "benchmark_failures.csv"
        assert paths.failures_path.read_text(encoding="utf-8").count("\n") == 2

    @pytest.mark.asyncio
    async def test_stale_failures_file_removed(self, tmp_path, raw_results):
        stale = tmp_path / "benchmark_failures.csv"
        stale.write_text("prompt,difficulty,error\n")
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=tmp_path)

        paths = await export_results(config)

        assert paths.failures_path is None
        assert not stale.exists()

    @pytest.mark.asyncio
    async def test_file_names_configurable(self, tmp_path, raw_results, monkeypatch):
        from promptperf.common.environment import Environment

        monkeypatch.setattr(Environment.OUTPUT, "RESULTS_FILE_NAME", "runs.csv")
        config = ExporterConfig(raw_results=raw_results, failures=[], output_dir=tmp_path)

        paths = await export_results(config)

        assert paths.results_path == tmp_path / "runs.csv"
