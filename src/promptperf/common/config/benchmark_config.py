# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator

from promptperf.common.config.base_config import BaseConfig
from promptperf.common.config.cli_parameter import CLIParameter
from promptperf.common.config.config_defaults import BenchmarkDefaults, OutputDefaults
from promptperf.common.config.groups import Groups
from promptperf.common.constants import MAX_TRIALS, MIN_TRIALS
from promptperf.common.enums import CacheMode
from promptperf.common.promptperf_logger import parse_log_level


class BenchmarkConfig(BaseConfig):
    """Settings for one benchmark sweep over the prompt bank."""

    _CLI_GROUP = Groups.BENCHMARK

    trials: Annotated[
        int,
        Field(
            ge=MIN_TRIALS,
            le=MAX_TRIALS,
            description="Number of trials. Each trial runs every prompt in the bank once, "
            f"in bank order. Must be between {MIN_TRIALS} and {MAX_TRIALS}.",
        ),
        CLIParameter(
            name=("--trials", "-n"),
            group=_CLI_GROUP,
        ),
    ] = BenchmarkDefaults.TRIALS

    cache_mode: Annotated[
        CacheMode,
        Field(
            description="'warm' clears the inference cache once and issues a discarded warm-up run "
            "before the sweep. 'cold' clears the cache before every run. Cold mode approximates "
            "a cold start; it does not guarantee one.",
        ),
        CLIParameter(
            name=("--cache-mode",),
            group=_CLI_GROUP,
        ),
    ] = BenchmarkDefaults.CACHE_MODE

    cooldown_seconds: Annotated[
        float,
        Field(
            ge=0,
            description="Pause in seconds after each run of the first pass. Runs are always "
            "sequential; the pause only lets the device settle between calls.",
        ),
        CLIParameter(
            name=("--cooldown-seconds",),
            group=_CLI_GROUP,
        ),
    ] = BenchmarkDefaults.COOLDOWN_SECONDS

    run_timeout_seconds: Annotated[
        float | None,
        Field(
            gt=0,
            description="Upper bound in seconds for a single inference call. A run that exceeds it "
            "fails and is retried like any other failure. Unset means no bound.",
        ),
        CLIParameter(
            name=("--run-timeout-seconds",),
            group=_CLI_GROUP,
        ),
    ] = BenchmarkDefaults.RUN_TIMEOUT_SECONDS

    prompt_bank_file: Annotated[
        Path | None,
        Field(
            description="JSON file with a list of {difficulty, category, text} objects to use "
            "instead of the built-in prompt bank.",
        ),
        CLIParameter(
            name=("--prompt-bank-file",),
            group=_CLI_GROUP,
        ),
    ] = BenchmarkDefaults.PROMPT_BANK_FILE

    cache_dir: Annotated[
        Path | None,
        Field(
            description="Inference cache directory whose contents are cleared according to "
            "--cache-mode. Falls back to PROMPTPERF_CACHE_DIRECTORY; when both are unset, "
            "cache clearing is a no-op.",
        ),
        CLIParameter(
            name=("--cache-dir",),
            group=_CLI_GROUP,
        ),
    ] = None

    output_dir: Annotated[
        Path,
        Field(
            description="Directory where benchmark_results.csv, benchmark_failures.csv and "
            "benchmark_summary.json are written. Existing files are overwritten.",
        ),
        CLIParameter(
            name=("--output-dir",),
            group=Groups.OUTPUT,
        ),
    ] = OutputDefaults.OUTPUT_DIR

    log_level: Annotated[
        str,
        Field(description="Log level (TRACE, DEBUG, INFO, NOTICE, WARNING, SUCCESS, ERROR)."),
        CLIParameter(
            name=("--log-level",),
            group=Groups.OUTPUT,
        ),
    ] = OutputDefaults.LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        parse_log_level(v)
        return v.upper()
