# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from cyclopts import Parameter


def CLIParameter(*args: Any, **kwargs: Any) -> Parameter:  # noqa: N802
    """Build a cyclopts Parameter with the defaults shared by every promptperf option.

    Environment variables are documented separately, and boolean flags do not get
    an automatic `--no-` variant unless one is asked for explicitly.
    """
    kwargs.setdefault("show_env_var", False)
    kwargs.setdefault("negative", ())
    return Parameter(*args, **kwargs)
