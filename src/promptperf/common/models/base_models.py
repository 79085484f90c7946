# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class PromptPerfBaseModel(BaseModel):
    """Base model for all promptperf data models.

    Models are immutable once created; derived values are exposed as
    computed fields so they appear in `model_dump()` output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=False)
