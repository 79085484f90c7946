# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """Base class for user-facing configuration models.

    Assignments are validated so that values changed after construction
    (e.g. by tests or by the CLI runner) obey the same constraints.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
