# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promptperf.common.mixins.promptperf_logger_mixin import PromptPerfLoggerMixin

__all__ = ["PromptPerfLoggerMixin"]
