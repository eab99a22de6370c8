import asyncio
import json
import os

import pytest

from nano_jason.exceptions import ConfigurationError, InvalidInputError, UnknownTemplateError
from nano_jason.records import JasonFormat, NanoCoderResult, NanoPromptResult
from nano_jason.sdk import NanoJasonSDK


class TestModeShortcuts:
    def test_translate(self, sdk):
        record = sdk.translate("A wizard reading a book in a castle")
        assert isinstance(record, JasonFormat)
        assert record.characters == ["wizard"]
        assert record.items == ["book", "castle"]
        assert record.action == "reading"

    def test_optimize_prompt(self, sdk):
        assert isinstance(sdk.optimize_prompt("a cat"), NanoPromptResult)

    def test_optimize_code(self, sdk):
        assert isinstance(sdk.optimize_code("write a python function"), NanoCoderResult)

    def test_batches_skip_failures(self, sdk):
        assert len(sdk.optimize_batch(["a cat", "", "a dog"])) == 2
        assert len(sdk.optimize_code_batch([None, "go service"])) == 1

    def test_run_async(self, sdk):
        record = asyncio.run(sdk.run_async("prompt", "a cat"))
        assert record.original_prompt == "a cat"

    def test_unknown_mode(self, sdk):
        with pytest.raises(ConfigurationError):
            sdk.run("poetry", "a cat")

    def test_seeded_sdks_agree(self):
        text = "a futuristic city"
        first = NanoJasonSDK(seed=3).optimize_prompt(text)
        second = NanoJasonSDK(seed=3).optimize_prompt(text)
        assert first.nano_prompt == second.nano_prompt
        assert first.accuracy_score == second.accuracy_score


class TestTemplates:
    def test_template(self, sdk):
        assert sdk.template("general", "portrait").startswith("A detailed portrait")

    def test_templates_listing(self, sdk):
        assert set(sdk.templates("technical")) == {"webapp", "mobileapp", "microservice", "api", "dashboard"}

    def test_unknown_template(self, sdk):
        with pytest.raises(UnknownTemplateError):
            sdk.template("general", "selfie")


class TestValidate:
    def test_valid_record(self, sdk):
        assert NanoJasonSDK.validate(sdk.translate("a knight with a sword")) == (True, [])

    def test_missing_character(self, sdk):
        is_valid, errors = sdk.validate(sdk.translate("a quiet afternoon"))
        assert is_valid is False
        assert errors == ["At least one character is recommended"]

    def test_all_errors_in_order(self):
        record = JasonFormat(jason_text="  ", style="", mood="", characters=[], items=[])
        is_valid, errors = NanoJasonSDK.validate(record)
        assert not is_valid
        assert errors == [
            "Jason text is required",
            "Style is required",
            "Mood is required",
            "At least one character is recommended",
        ]

    def test_only_jason_records(self, sdk):
        with pytest.raises(InvalidInputError):
            sdk.validate(sdk.optimize_prompt("a cat"))


class TestSave:
    @pytest.mark.parametrize("mode,prefix", [
        ("general", "jason-format-"),
        ("prompt", "nano-prompt-"),
        ("technical", "nano-coder-"),
    ])
    def test_save_writes_json(self, sdk, tmp_path, mode, prefix):
        record = sdk.run(mode, "a python robot")
        path = sdk.save(record, str(tmp_path / "out"))
        assert os.path.basename(path).startswith(prefix)
        assert path.endswith(".json")
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == record.to_dict()

    def test_save_rejects_unknown_record(self, sdk, tmp_path):
        with pytest.raises(InvalidInputError):
            sdk.save({"prompt": "x"}, str(tmp_path))
