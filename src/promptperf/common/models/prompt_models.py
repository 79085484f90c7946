# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from promptperf.common.enums import Difficulty, TaskCategory
from promptperf.common.models.base_models import PromptPerfBaseModel


class PromptSpec(PromptPerfBaseModel):
    """A single entry of the prompt bank.

    Two prompts are the same prompt when difficulty, category and text are all equal,
    so a `PromptSpec` can key the per-prompt result buckets directly.
    """

    difficulty: Difficulty = Field(description="Difficulty of the prompt")
    category: TaskCategory = Field(description="Whether the prompt is a reasoning or generative task")
    text: str = Field(min_length=1, description="The prompt text sent to the model")

    @property
    def sort_key(self) -> tuple[int, int]:
        """Display ordering: difficulty first, then reasoning before generative."""
        return (self.difficulty.order, self.category.rank)

    @property
    def label(self) -> str:
        """Short label such as `Easy-R` or `Hard-G`."""
        return f"{self.difficulty.value.capitalize()}-{self.category.value[0].upper()}"
