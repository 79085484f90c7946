# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""PromptPerf - streaming inference benchmark for a fixed prompt bank."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("promptperf")
except PackageNotFoundError:
    __version__ = "unknown"
