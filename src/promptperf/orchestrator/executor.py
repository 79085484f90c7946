# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Measurement of a single streamed inference call."""

import asyncio
import time

from promptperf.common.constants import NANOS_PER_MILLIS
from promptperf.common.exceptions import ExecutionError, RunTimeoutError
from promptperf.common.mixins import PromptPerfLoggerMixin
from promptperf.common.models import PromptSpec, RunResult
from promptperf.inference.protocols import InferenceSessionProtocol

__all__ = [
    "SingleRunExecutor",
]


class SingleRunExecutor(PromptPerfLoggerMixin):
    """Runs one prompt against one session and measures it.

    The stream yields cumulative text, so only the last chunk's content is kept
    as the generated text. The number of chunks is the token proxy.

    Timing:
    - start: taken before the first chunk is requested
    - ttft: first chunk arrival - start, or the full latency if no chunk arrived
    - latency: end of stream - start
    """

    def __init__(self, timeout_seconds: float | None = None, **kwargs) -> None:
        """Initialize SingleRunExecutor.

        Args:
            timeout_seconds: Optional bound on a whole call. None leaves the call
                unbounded, so a stream that never ends blocks the sweep.
        """
        super().__init__(**kwargs)
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(
                f"Invalid run timeout: {timeout_seconds} seconds. Use a positive value or None for no timeout."
            )
        self.timeout_seconds = timeout_seconds

    async def execute(
        self, prompt: PromptSpec, session: InferenceSessionProtocol
    ) -> RunResult:
        """Stream one generation and build its RunResult.

        Args:
            prompt: Prompt to send
            session: Fresh inference session for this run

        Returns:
            RunResult with chunk count, ttft and latency

        Raises:
            RunTimeoutError: If the call exceeded `timeout_seconds`
            ExecutionError: If the session raised during setup or streaming
        """
        self.trace(lambda: f"begin run [{prompt.label}]: {prompt.text[:80]!r}")

        start_ns = time.perf_counter_ns()
        try:
            if self.timeout_seconds is None:
                chunk_count, generated, first_chunk_ns = await self._consume_stream(
                    prompt, session
                )
            else:
                chunk_count, generated, first_chunk_ns = await asyncio.wait_for(
                    self._consume_stream(prompt, session),
                    timeout=self.timeout_seconds,
                )
        except asyncio.TimeoutError as e:
            # Only wait_for gets here; session errors are already ExecutionError
            self.trace(lambda: f"end run [{prompt.label}]: timed out")
            raise RunTimeoutError(
                f"Run did not complete within {self.timeout_seconds}s",
                prompt=prompt,
            ) from e
        end_ns = time.perf_counter_ns()

        latency_ms = (end_ns - start_ns) / NANOS_PER_MILLIS
        first_ns = first_chunk_ns if first_chunk_ns is not None else end_ns
        ttft_ms = (first_ns - start_ns) / NANOS_PER_MILLIS

        self.trace(
            lambda: f"end run [{prompt.label}]: {chunk_count} chunks, "
            f"ttft {ttft_ms:.1f}ms, latency {latency_ms:.1f}ms"
        )
        return RunResult(
            prompt=prompt,
            generated_text=generated,
            chunk_count=chunk_count,
            ttft_ms=ttft_ms,
            latency_ms=latency_ms,
        )

    async def _consume_stream(
        self, prompt: PromptSpec, session: InferenceSessionProtocol
    ) -> tuple[int, str, int | None]:
        chunk_count = 0
        generated = ""
        first_chunk_ns: int | None = None

        try:
            async for chunk in session.stream_generate(prompt.text):
                chunk_count += 1
                generated = chunk
                if first_chunk_ns is None:
                    first_chunk_ns = time.perf_counter_ns()
        except Exception as e:
            # Includes timeouts raised by the session itself (e.g. an HTTP client timeout)
            self.trace(lambda: f"end run [{prompt.label}]: failed with {e!r}")
            raise ExecutionError(str(e) or e.__class__.__name__, prompt=prompt) from e

        return chunk_count, generated, first_chunk_ns
