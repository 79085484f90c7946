# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promptperf.common.config.base_config import BaseConfig
from promptperf.common.config.benchmark_config import BenchmarkConfig
from promptperf.common.config.cli_parameter import CLIParameter
from promptperf.common.config.config_defaults import (
    BenchmarkDefaults,
    EndpointDefaults,
    OutputDefaults,
)
from promptperf.common.config.endpoint_config import EndpointConfig
from promptperf.common.config.groups import Groups

__all__ = [
    "BaseConfig",
    "BenchmarkConfig",
    "BenchmarkDefaults",
    "CLIParameter",
    "EndpointConfig",
    "EndpointDefaults",
    "Groups",
    "OutputDefaults",
]
