# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
from functools import partial

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from promptperf.common.config import BenchmarkConfig, EndpointConfig
from promptperf.common.environment import Environment
from promptperf.common.exceptions import PromptBankError
from promptperf.common.logging import setup_rich_logging
from promptperf.common.promptperf_logger import PromptPerfLogger
from promptperf.exporters import ConsoleSummaryExporter
from promptperf.inference import (
    CacheClearerProtocol,
    DiskCacheClearer,
    NullCacheClearer,
    OpenAIChatSession,
)
from promptperf.orchestrator import BenchmarkRunner, RunnerState
from promptperf.prompts import DEFAULT_PROMPT_BANK, PromptBank, load_prompt_bank

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_PARTIAL = 2

_logger = PromptPerfLogger(__name__)


def _resolve_prompt_bank(benchmark_config: BenchmarkConfig) -> PromptBank:
    if benchmark_config.prompt_bank_file is None:
        return DEFAULT_PROMPT_BANK
    bank = load_prompt_bank(benchmark_config.prompt_bank_file)
    _logger.info(
        f"Loaded {len(bank)} prompts from {benchmark_config.prompt_bank_file}"
    )
    return bank


def _resolve_cache_clearer(benchmark_config: BenchmarkConfig) -> CacheClearerProtocol:
    cache_dir = benchmark_config.cache_dir or Environment.CACHE.DIRECTORY
    if cache_dir is None:
        _logger.debug("No cache directory configured; cache clearing is disabled")
        return NullCacheClearer()
    return DiskCacheClearer(cache_dir)


def exit_code_for(state: RunnerState) -> int:
    """Map the outcome of a sweep to a process exit code.

    - 1: the export failed or no run succeeded
    - 2: some prompts still failed after the retry pass
    - 0: otherwise
    """
    if state.error_message is not None or not state.aggregates:
        return EXIT_FAILED
    if any(not f.recovered for f in state.failures):
        return EXIT_PARTIAL
    return EXIT_OK


def run_benchmark(
    benchmark_config: BenchmarkConfig,
    endpoint_config: EndpointConfig,
    console: Console | None = None,
) -> int:
    """Run a full sweep against the configured endpoint and print the summary.

    Returns:
        Process exit code, see `exit_code_for`
    """
    console = console or Console()
    setup_rich_logging(benchmark_config.log_level)

    try:
        prompt_bank = _resolve_prompt_bank(benchmark_config)
    except PromptBankError as e:
        _logger.error(str(e))
        return EXIT_FAILED

    _logger.info("=" * 80)
    _logger.info("Starting benchmark")
    _logger.info(f"  Endpoint: {endpoint_config.chat_completions_url}")
    _logger.info(f"  Model: {endpoint_config.model_name}")
    _logger.info(f"  Trials: {benchmark_config.trials}")
    _logger.info(f"  Prompts: {len(prompt_bank)}")
    _logger.info(f"  Cache mode: {benchmark_config.cache_mode}")
    _logger.info("=" * 80)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task("Benchmarking", total=1.0)

        runner = BenchmarkRunner(
            session_factory=partial(OpenAIChatSession, endpoint_config),
            output_dir=benchmark_config.output_dir,
            cache_clearer=_resolve_cache_clearer(benchmark_config),
            prompt_bank=prompt_bank,
            cache_mode=benchmark_config.cache_mode,
            cooldown_seconds=benchmark_config.cooldown_seconds,
            run_timeout_seconds=benchmark_config.run_timeout_seconds,
            progress_callback=lambda fraction: progress.update(
                task_id, completed=fraction
            ),
        )

        try:
            asyncio.run(runner.run_all(benchmark_config.trials))
        except Exception:
            _logger.exception("Error running benchmark")
            raise

    state = runner.state
    ConsoleSummaryExporter(state.aggregates, state.failures).export(console)

    if state.results_path is not None:
        console.print(f"[bold green]Results:[/] {state.results_path}")
    if state.failures_path is not None:
        console.print(f"[bold red]Failures:[/] {state.failures_path}")
    if state.summary_path is not None:
        console.print(f"[bold green]Summary:[/] {state.summary_path}")
    if state.event_loop_stalls:
        _logger.warning(
            f"Event loop was blocked {state.event_loop_stalls} time(s) during the sweep; "
            "latency figures may be inflated"
        )

    return exit_code_for(state)
