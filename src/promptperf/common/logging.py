# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from rich.console import Console
from rich.logging import RichHandler

from promptperf.common.promptperf_logger import parse_log_level

ROOT_LOGGER_NAME = "promptperf"


def setup_rich_logging(log_level: str | int = "INFO", console: Console | None = None) -> None:
    """Attach a RichHandler to the package root logger.

    Safe to call more than once: the level is updated but no second handler is added.
    """
    level = parse_log_level(log_level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if any(isinstance(h, RichHandler) for h in root_logger.handlers):
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=level <= logging.DEBUG,
        log_time_format="%H:%M:%S.%f",
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False
