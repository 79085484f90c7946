# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import contextlib
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from promptperf.common.exceptions import WriteError
from promptperf.common.mixins import PromptPerfLoggerMixin
from promptperf.exporters.exporter_config import ExporterConfig


class BaseArtifactExporter(PromptPerfLoggerMixin):
    """Base class for exporters that render one file from a finished sweep.

    Subclasses implement `get_file_name()` and `_generate_content()`. The file is
    written as UTF-8 to a temporary sibling and moved into place, so readers never
    observe a partially written artifact and an existing file is replaced whole.
    """

    def __init__(self, config: ExporterConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self._config = config

    def get_file_name(self) -> str:
        raise NotImplementedError

    def _generate_content(self) -> str:
        raise NotImplementedError

    def get_file_path(self) -> Path:
        return Path(self._config.output_dir) / self.get_file_name()

    async def export(self) -> Path:
        """Write the artifact.

        Returns:
            Path of the written file

        Raises:
            WriteError: If the directory or file cannot be written
        """
        path = self.get_file_path()
        content = self._generate_content()
        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex[:8]}.tmp")

        try:
            await aiofiles.os.makedirs(path.parent, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8", newline="") as f:
                await f.write(content)
            await aiofiles.os.replace(tmp_path, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                await aiofiles.os.remove(tmp_path)
            raise WriteError(f"Failed to write {path}: {e}", path=path) from e

        self.debug(lambda: f"Wrote {path}")
        return path


class BaseCsvExporter(BaseArtifactExporter):
    """CSV exporter with the minimal quoting used by every promptperf CSV.

    Free-text fields (prompt text, error messages) are always wrapped in double
    quotes with embedded quotes doubled. No other field is quoted.
    """

    LINE_TERMINATOR = "\n"

    @staticmethod
    def _quote(value: str) -> str:
        return '"' + value.replace('"', '""') + '"'

    @staticmethod
    def _format_number(value: float, decimals: int) -> str:
        return f"{value:.{decimals}f}"

    def _render(self, header: list[str], rows: list[list[str]]) -> str:
        lines = [",".join(header)]
        lines.extend(",".join(row) for row in rows)
        return self.LINE_TERMINATOR.join(lines) + self.LINE_TERMINATOR
