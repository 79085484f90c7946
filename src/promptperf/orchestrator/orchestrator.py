# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Retry-sweep orchestrator for prompt bank benchmarks."""

import asyncio
from collections import defaultdict
from collections.abc import Callable, Sequence
from pathlib import Path

from promptperf.common.constants import DEFAULT_COOLDOWN_SECONDS
from promptperf.common.enums import CacheMode, RunnerStatus
from promptperf.common.environment import Environment
from promptperf.common.event_loop_monitor import EventLoopMonitor
from promptperf.common.exceptions import ExecutionError, WriteError
from promptperf.common.mixins import PromptPerfLoggerMixin
from promptperf.common.models import FailedRun, PromptSpec, RunResult
from promptperf.exporters import ExporterConfig, export_results
from promptperf.inference.cache import NullCacheClearer
from promptperf.inference.protocols import CacheClearerProtocol, SessionFactory
from promptperf.orchestrator.aggregation import aggregate_buckets
from promptperf.orchestrator.executor import SingleRunExecutor
from promptperf.orchestrator.state import RunnerState
from promptperf.prompts import DEFAULT_PROMPT_BANK

__all__ = [
    "BenchmarkRunner",
]

ProgressCallback = Callable[[float], None]


class BenchmarkRunner(PromptPerfLoggerMixin):
    """Runs every prompt of the bank for a number of trials, then retries failures once.

    A sweep:
    1. Warm mode only: clears the cache and issues one discarded warm-up run
    2. First pass: for each trial, for each prompt in bank order, one run
       (cold mode clears the cache before each run; every run gets a fresh session)
    3. Retry pass: every first-pass failure is re-executed exactly once
    4. Aggregates per-prompt successes and writes the export artifacts

    Runs are strictly sequential. A second `run_all` while one is in progress
    is ignored. Individual run failures never abort the sweep, and an export
    failure never discards the computed aggregates.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        output_dir: Path,
        cache_clearer: CacheClearerProtocol | None = None,
        prompt_bank: Sequence[PromptSpec] = DEFAULT_PROMPT_BANK,
        cache_mode: CacheMode = CacheMode.WARM,
        cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS,
        run_timeout_seconds: float | None = None,
        progress_callback: ProgressCallback | None = None,
        **kwargs,
    ) -> None:
        """Initialize BenchmarkRunner.

        Args:
            session_factory: Creates a fresh inference session; called once per run
            output_dir: Directory for the export artifacts
            cache_clearer: Clears the inference cache; no-op when None
            prompt_bank: Ordered, non-empty prompts to benchmark
            cache_mode: Initial cache policy (can be changed through `state.cache_mode`)
            cooldown_seconds: Pause after each first-pass run
            run_timeout_seconds: Optional bound on each inference call
            progress_callback: Called with the progress fraction after each first-pass run

        Raises:
            ValueError: If the prompt bank is empty or cooldown_seconds < 0
        """
        super().__init__(**kwargs)
        if not prompt_bank:
            raise ValueError("Prompt bank is empty. At least one prompt is required.")
        if cooldown_seconds < 0:
            raise ValueError(
                f"Invalid cooldown duration: {cooldown_seconds} seconds. "
                "Cooldown must be non-negative (0 or greater)."
            )

        self.session_factory = session_factory
        self.output_dir = Path(output_dir)
        self.cache_clearer = cache_clearer or NullCacheClearer()
        self.prompt_bank = tuple(prompt_bank)
        self.cooldown_seconds = cooldown_seconds
        self.progress_callback = progress_callback
        self.executor = SingleRunExecutor(timeout_seconds=run_timeout_seconds)
        self.state = RunnerState(cache_mode=cache_mode)

        self.raw_results: list[RunResult] = []
        self.first_pass_failures: list[FailedRun] = []
        self.retry_failures: list[FailedRun] = []

    async def run_all(self, trials: int) -> bool:
        """Execute a full sweep.

        Args:
            trials: Number of passes over the prompt bank (>= 1)

        Returns:
            True if the sweep ran, False if it was ignored because one is already running

        Raises:
            ValueError: If trials < 1 or `state.cache_mode` is not a known cache mode
        """
        # Check-and-set happens before the first await, so it cannot interleave
        if self.state.is_running:
            self.debug("A benchmark is already running; ignoring run request")
            return False
        if trials < 1:
            raise ValueError(f"Invalid number of trials: {trials}. Must be at least 1.")
        # The presentation layer may assign a plain string between sweeps
        self.state.cache_mode = CacheMode(self.state.cache_mode)

        self.state.status = RunnerStatus.RUNNING
        self.state.reset()
        self.raw_results = []
        self.first_pass_failures = []
        self.retry_failures = []

        monitor = EventLoopMonitor(name="benchmark sweep")
        monitor.set_callback(self._on_event_loop_stall)
        monitor.start()
        try:
            await self._run_sweep(trials)
        finally:
            monitor.stop()
            self.state.status = RunnerStatus.IDLE
        return True

    async def _run_sweep(self, trials: int) -> None:
        cache_mode = self.state.cache_mode
        total_runs = trials * len(self.prompt_bank)

        self.info(
            f"Starting benchmark: {trials} trial(s) x {len(self.prompt_bank)} prompt(s), "
            f"cache mode: {cache_mode}"
        )

        if cache_mode == CacheMode.WARM:
            await self._warm_up()

        buckets: dict[PromptSpec, list[RunResult]] = defaultdict(list)

        completed_runs = 0
        for trial_index in range(trials):
            for prompt in self.prompt_bank:
                if cache_mode == CacheMode.COLD:
                    self._clear_cache()
                try:
                    result = await self._execute_single_run(prompt)
                except Exception as e:
                    self.warning(
                        f"[trial {trial_index + 1}/{trials}] {prompt.label} failed: {e}"
                    )
                    self.first_pass_failures.append(
                        FailedRun(prompt=prompt, message=_describe(e))
                    )
                else:
                    buckets[prompt].append(result)
                    self.raw_results.append(result)

                completed_runs += 1
                self._set_progress(completed_runs / total_runs)

                if self.cooldown_seconds > 0:
                    await asyncio.sleep(self.cooldown_seconds)

        if self.first_pass_failures:
            self.info(f"Retrying {len(self.first_pass_failures)} failed run(s) once")

        # One entry per failed occurrence: the retry error replaces the first-pass
        # error when the retry fails too, otherwise the occurrence is marked recovered
        failures: list[FailedRun] = []
        for failure in self.first_pass_failures:
            try:
                result = await self._execute_single_run(failure.prompt)
            except Exception as e:
                self.warning(f"[retry] {failure.prompt.label} failed again: {e}")
                still_failed = FailedRun(prompt=failure.prompt, message=_describe(e))
                self.retry_failures.append(still_failed)
                failures.append(still_failed)
            else:
                buckets[failure.prompt].append(result)
                failures.append(failure.model_copy(update={"recovered": True}))

        if self.first_pass_failures:
            recovered = len(self.first_pass_failures) - len(self.retry_failures)
            self.info(
                f"Retry pass complete: {recovered}/{len(self.first_pass_failures)} recovered"
            )

        self.state.aggregates = aggregate_buckets(buckets)
        self.state.failures = failures

        await self._export(trials, cache_mode)

    async def _execute_single_run(self, prompt: PromptSpec) -> RunResult:
        """Create a fresh session and execute one run.

        Raises:
            ExecutionError: If the session cannot be created or the run fails
        """
        try:
            session = self.session_factory()
        except Exception as e:
            raise ExecutionError(
                f"Failed to create inference session: {_describe(e)}", prompt=prompt
            ) from e
        return await self.executor.execute(prompt, session)

    async def _warm_up(self) -> None:
        """Clear the cache and run the first prompt once, discarding the outcome."""
        self._clear_cache()
        warmup_prompt = self.prompt_bank[0]
        self.debug(lambda: f"Warm-up run against {warmup_prompt.label}")
        try:
            await self._execute_single_run(warmup_prompt)
        except Exception as e:
            self.debug(lambda: f"Warm-up run failed (ignored): {e!r}")

    def _clear_cache(self) -> None:
        try:
            self.cache_clearer.clear()
        except Exception as e:
            self.debug(lambda: f"Cache clear failed (ignored): {e!r}")

    def _on_event_loop_stall(self, stall_ms: float) -> None:
        self.state.event_loop_stalls += 1

    def _set_progress(self, progress: float) -> None:
        self.state.progress = min(max(progress, 0.0), 1.0)
        if self.progress_callback is not None:
            self.progress_callback(self.state.progress)

    async def _export(self, trials: int, cache_mode: CacheMode) -> None:
        exporter_config = ExporterConfig(
            raw_results=self.raw_results,
            failures=self.state.failures,
            aggregates=self.state.aggregates,
            output_dir=self.output_dir,
            metadata={
                "trials": trials,
                "num_prompts": len(self.prompt_bank),
                "cache_mode": cache_mode.value,
                "num_first_pass_failures": len(self.first_pass_failures),
                "num_retry_failures": len(self.retry_failures),
                "results_file": Environment.OUTPUT.RESULTS_FILE_NAME,
            },
        )

        try:
            paths = await export_results(exporter_config)
        except WriteError as e:
            self.state.error_message = f"CSV export failed: {e}"
            self.error(self.state.error_message)
            return

        self.state.results_path = paths.results_path
        self.state.failures_path = paths.failures_path
        self.state.summary_path = paths.summary_path
        self.info(f"Results CSV saved at {paths.results_path}")
        if paths.failures_path is not None:
            self.info(f"Failures CSV saved at {paths.failures_path}")


def _describe(error: BaseException) -> str:
    """Human-readable description of a run failure."""
    return str(error) or error.__class__.__name__
