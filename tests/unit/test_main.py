import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from dealscreen.analysis.exceptions import ParseError
from dealscreen.analysis.models import AnalysisResult, RiskLevel
from dealscreen.classification.models import ClassificationResult, DocumentType
from dealscreen.extraction.exceptions import UnsupportedFormatError
from dealscreen.extraction.models import DocumentText
from dealscreen.gateway.exceptions import ProviderTimeoutError
from dealscreen.main import main
from dealscreen.pipeline.exceptions import DocumentValidationError
from dealscreen.pipeline.pipeline import ReviewOutcome

ACCEPTED = ClassificationResult(
    type=DocumentType.BRAND_DEAL_CONTRACT, confidence=0.95, reasoning="Passed"
)
REJECTED = ClassificationResult(
    type=DocumentType.NOT_BRAND_DEAL, confidence=0.2, reasoning="Missing signals"
)


@pytest.fixture()
def document_path(tmp_path: Path) -> Path:
    path = tmp_path / "deal.pdf"
    path.write_bytes(b"%PDF-1.4 fake")
    return path


@pytest.fixture()
def pipeline() -> Iterator[MagicMock]:
    mock = MagicMock()
    mock.extract.return_value = DocumentText(text="contract text")
    with (
        patch("dealscreen.main.build_pipeline", return_value=mock),
        patch("dealscreen.main.Log.configure"),
    ):
        yield mock


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, dict[str, Any]]:
    code = main(argv)
    return code, json.loads(capsys.readouterr().out)


class TestMain:
    def test_accepted_prints_analysis(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.review.return_value = ReviewOutcome(
            classification=ACCEPTED,
            analysis=AnalysisResult(
                protection_score=80, overall_risk=RiskLevel.LOW, negotiation_power_score=70
            ),
        )
        code, output = _run([str(document_path)], capsys)
        assert code == 0
        assert output["classification"]["type"] == "brand_deal_contract"
        assert output["analysis"]["protectionScore"] == 80
        assert output["analysis"]["negotiationPower"]["label"] == "Creator Dominant Deal"
        pipeline.close.assert_called_once()

    def test_passes_url_hint(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.review.return_value = ReviewOutcome(
            classification=ACCEPTED,
            analysis=AnalysisResult(protection_score=80, overall_risk=RiskLevel.LOW),
        )
        _run([str(document_path), "--url", "https://x.test/deal.pdf"], capsys)
        pipeline.extract.assert_called_once_with(
            b"%PDF-1.4 fake", source_url="https://x.test/deal.pdf"
        )

    def test_rejected_exits_one(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.review.side_effect = DocumentValidationError(
            "Document is not a brand deal contract", classification=REJECTED
        )
        code, output = _run([str(document_path)], capsys)
        assert code == 1
        assert output["error"] == "not_brand_deal"
        assert output["classification"]["confidence"] == 0.2

    def test_classify_only(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.classify.return_value = REJECTED
        code, output = _run([str(document_path), "--classify-only"], capsys)
        assert code == 1
        assert output["classification"]["reasoning"] == "Missing signals"
        pipeline.review.assert_not_called()

    def test_extraction_error_exits_two(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.extract.side_effect = UnsupportedFormatError("DOC files are not supported")
        code, output = _run([str(document_path)], capsys)
        assert code == 2
        assert output["error"] == "extraction_error"
        pipeline.close.assert_called_once()

    def test_missing_file_exits_two(
        self, pipeline: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code, _ = _run([str(tmp_path / "missing.pdf")], capsys)
        assert code == 2

    def test_provider_error_exits_three(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.review.side_effect = ProviderTimeoutError("timed out")
        code, output = _run([str(document_path)], capsys)
        assert code == 3
        assert output["error"] == "timeout"

    def test_parse_error_exits_three(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pipeline.review.side_effect = ParseError("Invalid JSON response")
        code, output = _run([str(document_path)], capsys)
        assert code == 3
        assert output["error"] == "parse_error"

    def test_invalid_configuration_exits_four(
        self, pipeline: MagicMock, document_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch(
            "dealscreen.main.build_pipeline",
            side_effect=ValueError("Unknown PDF engine 'pdfkit'"),
        ):
            code, output = _run([str(document_path)], capsys)
        assert code == 4
        assert output == {"error": "config_error", "message": "Unknown PDF engine 'pdfkit'"}
        pipeline.extract.assert_not_called()

    def test_invalid_settings_exit_four(
        self,
        pipeline: MagicMock,
        document_path: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "soon")
        code, output = _run([str(document_path)], capsys)
        assert code == 4
        assert output["error"] == "config_error"
        pipeline.extract.assert_not_called()
