# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class InferenceSessionProtocol(Protocol):
    """A streaming generation session. A fresh session is created for every run."""

    def stream_generate(self, prompt_text: str) -> AsyncIterator[str]:
        """Stream the response to `prompt_text`.

        Each yielded chunk is the cumulative text generated so far, not a delta.
        The stream is finite and cannot be restarted. It may raise at any point.
        """
        ...


@runtime_checkable
class CacheClearerProtocol(Protocol):
    """Best-effort clearing of the on-disk inference cache."""

    def clear(self) -> None: ...


SessionFactory = Callable[[], InferenceSessionProtocol]
