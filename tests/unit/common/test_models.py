# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for prompt and result models."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from promptperf.common.enums import Difficulty, TaskCategory
from promptperf.common.models import FailedRun, PromptSpec, RunResult


class TestPromptSpec:
    def test_equal_fields_are_the_same_prompt(self):
        a = PromptSpec(difficulty="easy", category="reasoning", text="Hi")
        b = PromptSpec(difficulty=Difficulty.EASY, category=TaskCategory.REASONING, text="Hi")

        assert a == b
        assert hash(a) == hash(b)
        assert {a: 1}[b] == 1

    def test_different_text_is_a_different_prompt(self):
        a = PromptSpec(difficulty="easy", category="reasoning", text="Hi")
        b = PromptSpec(difficulty="easy", category="reasoning", text="Hello")

        assert a != b

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            PromptSpec(difficulty="easy", category="reasoning", text="")

    def test_frozen(self, easy_reasoning_prompt):
        with pytest.raises(ValidationError):
            easy_reasoning_prompt.text = "changed"

    def test_enum_values_are_case_insensitive(self):
        prompt = PromptSpec(difficulty="HARD", category="Generative", text="x")

        assert prompt.difficulty is Difficulty.HARD
        assert prompt.category is TaskCategory.GENERATIVE

    @pytest.mark.parametrize(
        "difficulty, category, expected_key, expected_label",
        [
            ("easy", "reasoning", (0, 0), "Easy-R"),
            ("easy", "generative", (0, 1), "Easy-G"),
            ("medium", "reasoning", (1, 0), "Medium-R"),
            ("hard", "generative", (2, 1), "Hard-G"),
        ],
    )  # fmt: skip
    def test_sort_key_and_label(self, difficulty, category, expected_key, expected_label):
        prompt = PromptSpec(difficulty=difficulty, category=category, text="x")

        assert prompt.sort_key == expected_key
        assert prompt.label == expected_label


class TestRunResult:
    def test_throughput(self, easy_reasoning_prompt):
        result = RunResult(
            prompt=easy_reasoning_prompt, chunk_count=10, ttft_ms=50.0, latency_ms=500.0
        )

        assert result.throughput == pytest.approx(20.0)

    @pytest.mark.parametrize("latency_ms", [0.0, -1.0])
    def test_throughput_zero_for_non_positive_latency(self, easy_reasoning_prompt, latency_ms):
        result = RunResult(
            prompt=easy_reasoning_prompt, chunk_count=10, ttft_ms=0.0, latency_ms=latency_ms
        )

        assert result.throughput == 0.0

    @given(
        chunk_count=st.integers(min_value=0, max_value=100_000),
        latency_ms=st.floats(min_value=-1e6, max_value=1e7, allow_nan=False),
    )
    def test_throughput_property(self, chunk_count, latency_ms):
        prompt = PromptSpec(difficulty="easy", category="reasoning", text="x")
        result = RunResult(
            prompt=prompt, chunk_count=chunk_count, ttft_ms=0.0, latency_ms=latency_ms
        )

        if latency_ms <= 0:
            assert result.throughput == 0.0
        else:
            assert result.throughput == pytest.approx(chunk_count / (latency_ms / 1000))

    def test_negative_chunk_count_rejected(self, easy_reasoning_prompt):
        with pytest.raises(ValidationError):
            RunResult(prompt=easy_reasoning_prompt, chunk_count=-1, ttft_ms=0, latency_ms=0)

    def test_throughput_included_in_dump(self, easy_reasoning_prompt):
        result = RunResult(
            prompt=easy_reasoning_prompt, chunk_count=4, ttft_ms=10.0, latency_ms=200.0
        )

        assert result.model_dump()["throughput"] == pytest.approx(20.0)


def test_failed_run_keeps_message(easy_reasoning_prompt):
    failure = FailedRun(prompt=easy_reasoning_prompt, message="boom")

    assert failure.prompt == easy_reasoning_prompt
    assert failure.message == "boom"
