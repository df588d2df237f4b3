from dataclasses import dataclass

from dealscreen.analysis.engine import AnalysisEngine
from dealscreen.analysis.models import AnalysisResult
from dealscreen.classification.models import ClassificationResult
from dealscreen.classification.orchestrator import (
    ClassificationOrchestrator,
    build_orchestrator_from_settings,
)
from dealscreen.config.settings import Settings
from dealscreen.extraction.base import BaseTextExtractor
from dealscreen.extraction.factory import TextExtractorFactory
from dealscreen.extraction.models import DocumentText
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.factory import GatewayFactory
from dealscreen.gateway.retry import RetryPolicy
from dealscreen.logging.logger import Log
from dealscreen.pipeline.exceptions import DocumentValidationError


@dataclass(frozen=True)
class ReviewOutcome:
    """Classification and analysis of an accepted document."""

    classification: ClassificationResult
    analysis: AnalysisResult


class ContractReviewPipeline:
    """Orchestrates contract review.

    Pipeline: extract -> classify -> analyse. Analysis only runs for
    documents classified as brand-deal contracts.
    """

    def __init__(
        self,
        classifier: ClassificationOrchestrator,
        analysis_engine: AnalysisEngine,
        extractor: BaseTextExtractor | None = None,
        gateway: BaseModelGateway | None = None,
    ) -> None:
        self._classifier = classifier
        self._analysis_engine = analysis_engine
        self._extractor = extractor
        self._gateway = gateway

    def classify(self, document: DocumentText) -> ClassificationResult:
        return self._classifier.classify(document)

    def review(self, document: DocumentText) -> ReviewOutcome:
        """Classify *document* and analyse it when accepted.

        Raises:
            DocumentValidationError: if the document is not a brand-deal contract.
            ProviderError: if the analysis call fails.
            ParseError: if the analysis reply is not valid JSON.
        """
        classification = self.classify(document)
        if not classification.is_brand_deal:
            raise DocumentValidationError(
                f"Document is not a brand deal contract: {classification.reasoning}",
                classification=classification,
            )

        Log.info("Document accepted, running analysis", chars=len(document.text))
        analysis = self._analysis_engine.analyze(document)
        return ReviewOutcome(classification=classification, analysis=analysis)

    def review_text(self, text: str) -> ReviewOutcome:
        if not text:
            raise DocumentValidationError("Document text is empty")
        return self.review(DocumentText(text=text))

    def review_bytes(
        self, document_bytes: bytes, source_url: str | None = None
    ) -> ReviewOutcome:
        return self.review(self.extract(document_bytes, source_url))

    def extract(
        self, document_bytes: bytes, source_url: str | None = None
    ) -> DocumentText:
        if self._extractor is None:
            raise RuntimeError("No text extractor configured for this pipeline")
        document = self._extractor.extract(document_bytes, source_url=source_url)
        Log.info(
            f"Extracted {len(document.text)} chars",
            format=document.format_hint.value,
        )
        return document

    def close(self) -> None:
        if self._gateway is not None:
            self._gateway.close()


def build_pipeline(settings: Settings) -> ContractReviewPipeline:
    """Build a ContractReviewPipeline with all required adapters."""
    extractor = TextExtractorFactory.create(settings)
    gateway = GatewayFactory.create_from_settings(settings)
    try:
        return ContractReviewPipeline(
            classifier=build_orchestrator_from_settings(settings, gateway),
            analysis_engine=AnalysisEngine(
                gateway=gateway, retry_policy=RetryPolicy.from_settings(settings)
            ),
            extractor=extractor,
            gateway=gateway,
        )
    except Exception:
        gateway.close()
        raise
