# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """Help-screen groups for the CLI, in display order."""

    BENCHMARK = Group("Benchmark", sort_key=0)
    ENDPOINT = Group("Endpoint", sort_key=1)
    OUTPUT = Group("Output", sort_key=2)
