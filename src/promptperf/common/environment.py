# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for promptperf.

Every setting can be overridden with an environment variable built from the
group prefix and the field name, e.g. `PROMPTPERF_RUNNER_EVENT_LOOP_HEALTH_ENABLED=false`.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _RunnerSettings(BaseSettings):
    """Settings for the benchmark runner."""

    model_config = SettingsConfigDict(env_prefix="PROMPTPERF_RUNNER_")

    EVENT_LOOP_HEALTH_ENABLED: bool = Field(
        True,
        description="Warn when the event loop is blocked during a sweep, since a blocked loop skews latency measurements",
    )
    EVENT_LOOP_HEALTH_INTERVAL: float = Field(
        0.25, gt=0, description="Event loop health check interval in seconds"
    )
    EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS: float = Field(
        10.0,
        gt=0,
        description="Blocked time in milliseconds above which a warning is logged",
    )


class _OutputSettings(BaseSettings):
    """File names of the artifacts written after a sweep."""

    model_config = SettingsConfigDict(env_prefix="PROMPTPERF_OUTPUT_")

    RESULTS_FILE_NAME: str = Field(
        "benchmark_results.csv", description="Raw per-run results CSV"
    )
    FAILURES_FILE_NAME: str = Field(
        "benchmark_failures.csv", description="Failed runs CSV, only written when runs failed"
    )
    SUMMARY_FILE_NAME: str = Field(
        "benchmark_summary.json", description="Per-prompt aggregate statistics"
    )


class _CacheSettings(BaseSettings):
    """Settings for the on-disk inference cache."""

    model_config = SettingsConfigDict(env_prefix="PROMPTPERF_CACHE_")

    DIRECTORY: Path | None = Field(
        None,
        description="Inference cache directory whose contents are cleared between runs. Unset disables clearing",
    )


class _Environment(BaseSettings):
    RUNNER: _RunnerSettings = Field(default_factory=_RunnerSettings)
    OUTPUT: _OutputSettings = Field(default_factory=_OutputSettings)
    CACHE: _CacheSettings = Field(default_factory=_CacheSettings)


Environment = _Environment()
