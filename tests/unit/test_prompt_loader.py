import json
from pathlib import Path

import pytest

from dealscreen.prompts.exceptions import PromptLoadError
from dealscreen.prompts.prompt_loader import load_prompt_template, load_response_example


class TestLoadPromptTemplate:
    @pytest.mark.parametrize("name", ["binary_classifier", "confidence"])
    def test_classifier_templates_have_document_placeholder(self, name: str) -> None:
        template = load_prompt_template(name)
        assert "{document_text}" in template
        assert template.format(document_text="abc")

    def test_analysis_template_formats_cleanly(self) -> None:
        template = load_prompt_template("analysis")
        prompt = template.format(response_example="{}", contract_text="CONTRACT BODY")
        assert "CONTRACT BODY" in prompt

    def test_loads_from_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.txt"
        path.write_text("Custom {document_text}", encoding="utf-8")
        assert load_prompt_template("ignored", path) == "Custom {document_text}"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PromptLoadError, match="Failed to load prompt template"):
            load_prompt_template("x", tmp_path / "nope.txt")


class TestLoadResponseExample:
    def test_bundled_example_is_valid_json(self) -> None:
        example = json.loads(load_response_example())
        assert "protectionScore" in example
        assert "keyTerms" in example

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PromptLoadError, match="Failed to load response example"):
            load_response_example(tmp_path / "nope.json")
