# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from promptperf.common.models import PromptSpec


class PromptPerfError(Exception):
    """Base class for all exceptions raised by promptperf."""

    def __str__(self) -> str:
        return self.args[0] if self.args else self.__class__.__name__


class ExecutionError(PromptPerfError):
    """A single inference call failed. Recoverable: the run is retried once."""

    def __init__(self, message: str, prompt: PromptSpec | None = None) -> None:
        super().__init__(message)
        self.prompt = prompt


class RunTimeoutError(ExecutionError):
    """A single inference call did not finish within the configured run timeout."""


class InferenceRequestError(PromptPerfError):
    """The inference endpoint rejected a request or returned a malformed stream."""


class WriteError(PromptPerfError):
    """An export artifact could not be written. Non-fatal to in-memory results."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class PromptBankError(PromptPerfError):
    """A prompt bank file could not be loaded."""
