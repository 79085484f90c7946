# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for single runs and their per-prompt aggregates."""

from pydantic import Field, computed_field

from promptperf.common.constants import MILLIS_PER_SECOND
from promptperf.common.models.base_models import PromptPerfBaseModel
from promptperf.common.models.prompt_models import PromptSpec


class RunResult(PromptPerfBaseModel):
    """Result of one completed inference call.

    Attributes:
        prompt: The prompt that was sent
        generated_text: Final generated text (the content of the last chunk)
        chunk_count: Number of stream chunks received. This is the token proxy:
            an approximation of the number of generated tokens, not an exact count.
        ttft_ms: Time to first chunk in milliseconds
        latency_ms: Total latency of the call in milliseconds
    """

    prompt: PromptSpec
    generated_text: str = ""
    chunk_count: int = Field(ge=0)
    ttft_ms: float
    latency_ms: float

    @computed_field
    @property
    def throughput(self) -> float:
        """Chunks per second. Zero when latency is not positive."""
        if self.latency_ms <= 0:
            return 0.0
        return self.chunk_count / (self.latency_ms / MILLIS_PER_SECOND)


class FailedRun(PromptPerfBaseModel):
    """A prompt whose run failed, with a human-readable error description.

    `recovered` is set on a first-pass failure whose retry succeeded.
    """

    prompt: PromptSpec
    message: str
    recovered: bool = False


class Stats(PromptPerfBaseModel):
    """Population mean and standard deviation of a sample set."""

    mean: float = 0.0
    sd: float = 0.0


class AggregatedMetrics(PromptPerfBaseModel):
    """Statistics across every successful run of one prompt.

    Only built for prompts with at least one success, including successes
    recovered by the retry pass.

    Attributes:
        prompt: The prompt these statistics describe
        tokens: Token proxy (chunk count) statistics
        ttft: Time to first chunk statistics (ms)
        latency: Total latency statistics (ms)
        throughput: Chunks-per-second statistics
        sample_output: Generated text of the first successful run
        sample_count: Number of successful runs the statistics cover
    """

    prompt: PromptSpec
    tokens: Stats
    ttft: Stats
    latency: Stats
    throughput: Stats
    sample_output: str
    sample_count: int = Field(ge=1)
