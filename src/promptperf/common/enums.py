# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class CaseInsensitiveStrEnum(str, Enum):
    """String enum that matches values case-insensitively (e.g. `--cache-mode COLD`)."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class Difficulty(CaseInsensitiveStrEnum):
    """Difficulty of a prompt. Ordered easy < medium < hard."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def order(self) -> int:
        return _DIFFICULTY_ORDER[self]


_DIFFICULTY_ORDER = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 1,
    Difficulty.HARD: 2,
}


class TaskCategory(CaseInsensitiveStrEnum):
    """Kind of task a prompt asks for. Reasoning sorts before generative."""

    REASONING = "reasoning"
    GENERATIVE = "generative"

    @property
    def rank(self) -> int:
        return 0 if self is TaskCategory.REASONING else 1


class CacheMode(CaseInsensitiveStrEnum):
    """When the on-disk inference cache is cleared.

    - WARM: cleared once before the sweep, followed by a discarded warm-up run.
    - COLD: cleared before every single run (an approximation of cold start).
    """

    WARM = "warm"
    COLD = "cold"


class RunnerStatus(CaseInsensitiveStrEnum):
    IDLE = "idle"
    RUNNING = "running"
