# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import orjson
import pytest

from promptperf.common.enums import Difficulty, TaskCategory
from promptperf.common.exceptions import PromptBankError
from promptperf.prompts import DEFAULT_PROMPT_BANK, load_prompt_bank


class TestDefaultPromptBank:
    def test_covers_every_difficulty_and_category(self):
        combos = {(p.difficulty, p.category) for p in DEFAULT_PROMPT_BANK}

        assert len(DEFAULT_PROMPT_BANK) == 6
        assert combos == {(d, c) for d in Difficulty for c in TaskCategory}

    def test_reasoning_prompts_come_first(self):
        categories = [p.category for p in DEFAULT_PROMPT_BANK]

        assert categories == [TaskCategory.REASONING] * 3 + [TaskCategory.GENERATIVE] * 3

    def test_is_immutable(self):
        assert isinstance(DEFAULT_PROMPT_BANK, tuple)


class TestLoadPromptBank:
    def test_loads_in_file_order(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_bytes(
            orjson.dumps(
                [
                    {"difficulty": "hard", "category": "generative", "text": "Write."},
                    {"difficulty": "easy", "category": "reasoning", "text": "Think."},
                ]
            )
        )

        bank = load_prompt_bank(path)

        assert [p.text for p in bank] == ["Write.", "Think."]
        assert bank[0].difficulty == Difficulty.HARD
        assert isinstance(bank, tuple)

    def test_missing_file(self, tmp_path):
        with pytest.raises(PromptBankError, match="does not exist"):
            load_prompt_bank(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("[{not json")

        with pytest.raises(PromptBankError, match="not valid JSON"):
            load_prompt_bank(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text('{"text": "hi"}')

        with pytest.raises(PromptBankError, match="JSON array"):
            load_prompt_bank(path)

    def test_empty_list(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("[]")

        with pytest.raises(PromptBankError, match="empty"):
            load_prompt_bank(path)

    @pytest.mark.parametrize(
        "entry",
        [
            {"difficulty": "extreme", "category": "reasoning", "text": "x"},
            {"difficulty": "easy", "category": "reasoning", "text": ""},
            {"difficulty": "easy", "category": "reasoning"},
            {"difficulty": "easy", "category": "reasoning", "text": "x", "weight": 2},
        ],
    )  # fmt: skip
    def test_invalid_entry(self, tmp_path, entry):
        path = tmp_path / "bank.json"
        path.write_bytes(orjson.dumps([entry]))

        with pytest.raises(PromptBankError, match="index 0"):
            load_prompt_bank(path)
