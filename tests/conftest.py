# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for promptperf tests."""

import time
from collections.abc import AsyncIterator
from dataclasses import dataclass

import pytest

from promptperf.common.enums import Difficulty, TaskCategory
from promptperf.common.environment import Environment
from promptperf.common.models import PromptSpec

NANOS_PER_MS = 1_000_000
BASE_TIME_NS = 1_000_000_000


@pytest.fixture(autouse=True)
def disable_event_loop_health(monkeypatch):
    """The health monitor sleeps on the real loop; keep it out of unit tests."""
    monkeypatch.setattr(Environment.RUNNER, "EVENT_LOOP_HEALTH_ENABLED", False)


class FakeClock:
    """Deterministic replacement for time.perf_counter_ns."""

    def __init__(self, start_ns: int = BASE_TIME_NS) -> None:
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance_ms(self, ms: float) -> None:
        self.now_ns += int(ms * NANOS_PER_MS)


@pytest.fixture
def fake_clock(monkeypatch) -> FakeClock:
    clock = FakeClock()
    monkeypatch.setattr(time, "perf_counter_ns", clock)
    return clock


@dataclass
class StreamScript:
    """How a scripted session answers one prompt.

    Attributes:
        chunks: Number of cumulative chunks to yield
        ttft_ms: Clock advance before the first chunk
        latency_ms: Total clock advance for the whole stream
        error: Raised instead of streaming, if set
        fail_after_chunks: Raise `error` after this many chunks instead of before the first
    """

    chunks: int = 1
    ttft_ms: float = 0.0
    latency_ms: float = 0.0
    error: Exception | None = None
    fail_after_chunks: int = 0


class ScriptedSession:
    """Inference session whose timing is driven by a FakeClock."""

    def __init__(self, clock: FakeClock, scripts: dict[str, "StreamScript | list[StreamScript]"], calls: list[str]) -> None:
        self.clock = clock
        self.scripts = scripts
        self.calls = calls

    def _next_script(self, prompt_text: str) -> StreamScript:
        script = self.scripts[prompt_text]
        if isinstance(script, list):
            return script.pop(0) if len(script) > 1 else script[0]
        return script

    async def stream_generate(self, prompt_text: str) -> AsyncIterator[str]:
        self.calls.append(prompt_text)
        script = self._next_script(prompt_text)

        if script.error is not None and script.fail_after_chunks == 0:
            raise script.error

        self.clock.advance_ms(script.ttft_ms)
        text = ""
        for index in range(script.chunks):
            if script.error is not None and index == script.fail_after_chunks:
                raise script.error
            text += f"t{index} "
            yield text
        self.clock.advance_ms(script.latency_ms - script.ttft_ms)


class ScriptedSessionFactory:
    """Creates a fresh ScriptedSession per call and records every prompt sent."""

    def __init__(self, clock: FakeClock, scripts: dict) -> None:
        self.clock = clock
        self.scripts = scripts
        self.calls: list[str] = []
        self.sessions_created = 0

    def __call__(self) -> ScriptedSession:
        self.sessions_created += 1
        return ScriptedSession(self.clock, self.scripts, self.calls)


@pytest.fixture
def easy_reasoning_prompt() -> PromptSpec:
    return PromptSpec(
        difficulty=Difficulty.EASY,
        category=TaskCategory.REASONING,
        text="What is 2 + 2?",
    )


@pytest.fixture
def hard_generative_prompt() -> PromptSpec:
    return PromptSpec(
        difficulty=Difficulty.HARD,
        category=TaskCategory.GENERATIVE,
        text='Write a poem called "Quotes, Commas, and Lines".',
    )


@pytest.fixture
def two_prompt_bank(easy_reasoning_prompt, hard_generative_prompt) -> tuple[PromptSpec, ...]:
    return (easy_reasoning_prompt, hard_generative_prompt)


@pytest.fixture
def session_factory(fake_clock):
    """Build a ScriptedSessionFactory for a {prompt text: StreamScript} mapping."""

    def _make(scripts: dict) -> ScriptedSessionFactory:
        return ScriptedSessionFactory(fake_clock, scripts)

    return _make
