# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promptperf.inference.cache import DiskCacheClearer, NullCacheClearer
from promptperf.inference.openai_session import OpenAIChatSession, parse_sse_delta
from promptperf.inference.protocols import (
    CacheClearerProtocol,
    InferenceSessionProtocol,
    SessionFactory,
)

__all__ = [
    "CacheClearerProtocol",
    "DiskCacheClearer",
    "InferenceSessionProtocol",
    "NullCacheClearer",
    "OpenAIChatSession",
    "SessionFactory",
    "parse_sse_delta",
]
