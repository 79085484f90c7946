# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promptperf.common.models.base_models import PromptPerfBaseModel
from promptperf.common.models.prompt_models import PromptSpec
from promptperf.common.models.result_models import (
    AggregatedMetrics,
    FailedRun,
    RunResult,
    Stats,
)

__all__ = [
    "AggregatedMetrics",
    "FailedRun",
    "PromptPerfBaseModel",
    "PromptSpec",
    "RunResult",
    "Stats",
]
