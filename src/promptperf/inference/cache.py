# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import shutil
from pathlib import Path

from promptperf.common.mixins import PromptPerfLoggerMixin


class DiskCacheClearer(PromptPerfLoggerMixin):
    """Deletes everything inside an inference cache directory.

    The directory itself is kept. Entries that cannot be removed are skipped,
    since clearing is best-effort.
    """

    def __init__(self, cache_dir: Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cache_dir = Path(cache_dir)

    def clear(self) -> None:
        if not self.cache_dir.is_dir():
            self.debug(lambda: f"Cache directory {self.cache_dir} does not exist, nothing to clear")
            return

        removed = 0
        for entry in self.cache_dir.iterdir():
            try:
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
                removed += 1
            except OSError as e:
                self.debug(lambda e=e, entry=entry: f"Could not remove cache entry {entry}: {e}")
        self.trace(lambda: f"Cleared {removed} entries from {self.cache_dir}")


class NullCacheClearer:
    """Cache clearer used when no cache directory is configured."""

    def clear(self) -> None:
        return None
