# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promptperf.prompts.bank import DEFAULT_PROMPT_BANK, PromptBank, load_prompt_bank

__all__ = ["DEFAULT_PROMPT_BANK", "PromptBank", "load_prompt_bank"]
