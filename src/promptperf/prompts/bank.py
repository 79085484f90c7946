# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""The built-in prompt bank and loading of custom banks."""

from pathlib import Path

import orjson
from pydantic import ValidationError

from promptperf.common.enums import Difficulty, TaskCategory
from promptperf.common.exceptions import PromptBankError
from promptperf.common.models import PromptSpec

PromptBank = tuple[PromptSpec, ...]

DEFAULT_PROMPT_BANK: PromptBank = (
    # Reasoning
    PromptSpec(
        difficulty=Difficulty.EASY,
        category=TaskCategory.REASONING,
        text="If a recipe needs 2 cups of sugar for one cake, how much for 5 cakes?",
    ),
    PromptSpec(
        difficulty=Difficulty.MEDIUM,
        category=TaskCategory.REASONING,
        text="Alice flips a fair coin twice; Bob flips a fair coin three times. "
        "Who has the higher probability of getting at least two heads? "
        "Calculate both probabilities.",
    ),
    PromptSpec(
        difficulty=Difficulty.HARD,
        category=TaskCategory.REASONING,
        text="Design an O(n log n) algorithm to find the longest increasing subsequence "
        "in an array of n integers. Provide pseudocode, a concise proof sketch of its "
        "complexity, and outline how you'd parallelise it across two CPU cores.",
    ),
    # Generative
    PromptSpec(
        difficulty=Difficulty.EASY,
        category=TaskCategory.GENERATIVE,
        text="Write a two-sentence tweet summarising the benefits of daily meditation.",
    ),
    PromptSpec(
        difficulty=Difficulty.MEDIUM,
        category=TaskCategory.GENERATIVE,
        text="Compose a 100-word marketing blurb for a new solar-powered backpack "
        "that charges your devices on the go.",
    ),
    PromptSpec(
        difficulty=Difficulty.HARD,
        category=TaskCategory.GENERATIVE,
        text="""Draft a rigorous grant-proposal synopsis on catalytic conversion of agricultural waste into biodegradable, high-performance polymers. Structure it into five sections:

Background & Significance
Situate this work within current ecological-materials research and pinpoint the specific gap it fills.

Hypotheses
State two or three sharply defined, testable propositions grounded in recent findings.

Experimental Design & Methods
Summarize your catalytic pathways, degradation assays, and key analytical techniques (e.g., NMR, GC-MS).

Preliminary Data & Feasibility
Present any pilot results or literature precedents validating your approach.

Impacts & Budget
Outline scalability, regulatory hurdles, societal benefits, and a succinct line-item budget.

Include three APA-style scholarly references.""",
    ),
)


def load_prompt_bank(path: str | Path) -> PromptBank:
    """Load a prompt bank from a JSON file.

    The file must contain a non-empty array of objects with `difficulty`,
    `category` and `text` keys. Order in the file is the bank order.

    Raises:
        PromptBankError: If the file is missing, is not valid JSON, or any entry is invalid
    """
    file_path = Path(path)
    try:
        payload = orjson.loads(file_path.read_bytes())
    except FileNotFoundError as e:
        raise PromptBankError(f"Prompt bank file does not exist: {file_path}") from e
    except orjson.JSONDecodeError as e:
        raise PromptBankError(f"Prompt bank file is not valid JSON: {file_path}: {e}") from e

    if not isinstance(payload, list):
        raise PromptBankError(
            f"Prompt bank must be a JSON array of prompt objects, got {type(payload).__name__} in {file_path}"
        )
    if not payload:
        raise PromptBankError(f"Prompt bank is empty: {file_path}")

    prompts = []
    for index, entry in enumerate(payload):
        try:
            prompts.append(PromptSpec.model_validate(entry))
        except ValidationError as e:
            raise PromptBankError(
                f"Invalid prompt at index {index} in {file_path}: {e}"
            ) from e
    return tuple(prompts)
