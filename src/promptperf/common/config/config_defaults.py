# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import Path

from promptperf.common.constants import DEFAULT_COOLDOWN_SECONDS, DEFAULT_TRIALS
from promptperf.common.enums import CacheMode


@dataclass(frozen=True)
class BenchmarkDefaults:
    TRIALS = DEFAULT_TRIALS
    CACHE_MODE = CacheMode.WARM
    COOLDOWN_SECONDS = DEFAULT_COOLDOWN_SECONDS
    RUN_TIMEOUT_SECONDS = None
    PROMPT_BANK_FILE = None


@dataclass(frozen=True)
class EndpointDefaults:
    URL = "http://localhost:8000"
    ENDPOINT_PATH = "/v1/chat/completions"
    API_KEY = None
    MAX_TOKENS = 1024
    TEMPERATURE = 0.0
    REQUEST_TIMEOUT_SECONDS = 600.0


@dataclass(frozen=True)
class OutputDefaults:
    OUTPUT_DIR = Path("artifacts")
    LOG_LEVEL = "INFO"
