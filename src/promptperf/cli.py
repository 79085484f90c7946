# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for promptperf."""

import sys
from typing import Annotated

from cyclopts import App, Parameter

from promptperf import __version__
from promptperf.common.config import BenchmarkConfig, EndpointConfig

app = App(
    name="promptperf",
    help="Benchmark streaming LLM inference over a fixed prompt bank.",
    version=__version__,
)


@app.command(name="profile")
def profile(
    benchmark_config: Annotated[BenchmarkConfig, Parameter(name="*")],
    endpoint_config: Annotated[EndpointConfig, Parameter(name="*")],
) -> None:
    """Run every prompt of the bank for a number of trials and report per-prompt statistics.

    Exit codes: 0 when no run is left unrecovered after the retry pass, 2 when some
    runs still failed after it, 1 when no run succeeded or the results could not be
    written.
    """
    from promptperf.cli_runner import run_benchmark

    exit_code = run_benchmark(benchmark_config, endpoint_config)
    if exit_code:
        sys.exit(exit_code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
