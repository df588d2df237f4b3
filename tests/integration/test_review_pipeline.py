"""End-to-end review runs with a scripted model gateway."""

import json
from unittest.mock import MagicMock

import pytest

from dealscreen.analysis.engine import AnalysisEngine
from dealscreen.classification.models import DocumentType, HardReject, LlmRejected
from dealscreen.classification.orchestrator import build_orchestrator
from dealscreen.config.settings import Settings
from dealscreen.extraction.factory import TextExtractorFactory
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import ProviderTimeoutError
from dealscreen.gateway.retry import RetryPolicy
from dealscreen.pipeline.exceptions import DocumentValidationError
from dealscreen.pipeline.pipeline import ContractReviewPipeline

SCENARIO_TEXT = (
    "Collaboration terms for an Instagram campaign. The brand engages the "
    "influencer to publish the agreed deliverables, two reels and one story, "
    "and will release payment of the agreed fee after the content goes live."
)

ANALYSIS_REPLY = json.dumps(
    {
        "protectionScore": 58,
        "overallRisk": "medium",
        "issues": [
            {
                "severity": "high",
                "category": "Exclusivity",
                "title": "Six month exclusivity",
                "description": "Creator cannot work with competing brands",
                "recommendation": "Reduce exclusivity to 30 days",
            }
        ],
        "verified": [],
        "keyTerms": {"payment": "Net 30", "duration": "2 months"},
        "recommendations": ["Reduce exclusivity"],
    }
)


class ScriptedGateway(BaseModelGateway):
    """Replays a fixed list of replies; exceptions in the list are raised."""

    def __init__(self, *replies: object) -> None:
        self._replies = list(replies)
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return str(reply)


def _pipeline(gateway: BaseModelGateway) -> ContractReviewPipeline:
    retry_policy = RetryPolicy(sleep=MagicMock())
    return ContractReviewPipeline(
        classifier=build_orchestrator(gateway, retry_policy=retry_policy),
        analysis_engine=AnalysisEngine(gateway=gateway, retry_policy=retry_policy),
        extractor=TextExtractorFactory.create(Settings()),
    )


class TestScenarios:
    def test_legal_notice_is_hard_rejected(self, legal_notice_text: str) -> None:
        gateway = ScriptedGateway()
        pipeline = _pipeline(gateway)
        with pytest.raises(DocumentValidationError) as exc_info:
            pipeline.review_text(legal_notice_text)
        classification = exc_info.value.classification
        assert classification is not None
        assert classification.type is DocumentType.NOT_BRAND_DEAL
        assert classification.confidence == 0.0
        assert isinstance(classification.rejection, HardReject)
        assert gateway.prompts == []

    def test_model_no_rejects_strong_signals(self) -> None:
        gateway = ScriptedGateway("NO, this looks like a sponsorship template, not signed.")
        with pytest.raises(DocumentValidationError) as exc_info:
            _pipeline(gateway).review_text(SCENARIO_TEXT)
        classification = exc_info.value.classification
        assert classification is not None
        assert classification.type is DocumentType.NOT_BRAND_DEAL
        assert classification.confidence == 0.3
        assert isinstance(classification.rejection, LlmRejected)
        assert len(gateway.prompts) == 1

    def test_confidence_timeout_falls_back_and_accepts(self) -> None:
        gateway = ScriptedGateway("YES", ProviderTimeoutError("timed out"), ANALYSIS_REPLY)
        outcome = _pipeline(gateway).review_text(SCENARIO_TEXT)
        assert outcome.classification.type is DocumentType.BRAND_DEAL_CONTRACT
        assert outcome.classification.confidence == 0.95
        assert outcome.analysis.protection_score == 58
        assert outcome.analysis.issues[0].title == "Six month exclusivity"
        # 50 + 5 (net 30) - 15 (exclusivity) + 5 (months)
        assert outcome.analysis.negotiation_power_score == 45
        assert len(gateway.prompts) == 3
        assert SCENARIO_TEXT in gateway.prompts[2]

    def test_malformed_analysis_is_repaired(self) -> None:
        gateway = ScriptedGateway(
            "YES",
            "CONFIDENT",
            '```json\n{"protectionScore": 140, "overallRisk": "catastrophic", '
            '"issues": "not-an-array"}\n```',
        )
        outcome = _pipeline(gateway).review_text(SCENARIO_TEXT)
        assert outcome.analysis.protection_score == 100
        assert outcome.analysis.overall_risk.value == "medium"
        assert outcome.analysis.issues == ()


class TestFromDocumentBytes:
    def test_pdf_document_is_reviewed(self, brand_deal_pdf_bytes: bytes) -> None:
        gateway = ScriptedGateway("YES", "CONFIDENT", ANALYSIS_REPLY)
        outcome = _pipeline(gateway).review_bytes(brand_deal_pdf_bytes)
        assert outcome.classification.is_brand_deal
        assert "Instagram" in gateway.prompts[0]

    def test_legacy_doc_is_refused_before_model_calls(self) -> None:
        from dealscreen.extraction.exceptions import UnsupportedFormatError

        gateway = ScriptedGateway()
        with pytest.raises(UnsupportedFormatError):
            _pipeline(gateway).review_bytes(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1")
        assert gateway.prompts == []
