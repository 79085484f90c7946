# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from promptperf.common.promptperf_logger import Message, PromptPerfLogger

# One frame deeper than direct PromptPerfLogger calls
_STACKLEVEL = 4


class PromptPerfLoggerMixin:
    """Gives a class `self.trace/debug/info/...` bound to a module-named logger.

    Extra keyword arguments are accepted and dropped so the mixin can sit
    anywhere in a cooperative `super().__init__(**kwargs)` chain.
    """

    def __init__(self, logger_name: str | None = None, **kwargs: Any) -> None:
        self.logger = PromptPerfLogger(logger_name or self.__class__.__module__)
        super().__init__()

    @property
    def is_trace_enabled(self) -> bool:
        return self.logger.is_trace_enabled

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def trace(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.trace(msg, *args, **kwargs)

    def debug(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.info(msg, *args, **kwargs)

    def notice(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.notice(msg, *args, **kwargs)

    def warning(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.warning(msg, *args, **kwargs)

    def success(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.success(msg, *args, **kwargs)

    def error(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.error(msg, *args, **kwargs)

    def exception(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("stacklevel", _STACKLEVEL)
        self.logger.exception(msg, *args, **kwargs)
