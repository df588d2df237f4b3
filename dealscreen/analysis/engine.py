"""Model-backed contract risk analysis."""

import dataclasses
from collections.abc import Callable
from pathlib import Path

from dealscreen.analysis.models import AnalysisResult
from dealscreen.analysis.negotiation import calculate_negotiation_power_score
from dealscreen.analysis.normalizer import ResponseNormalizer
from dealscreen.extraction.models import DocumentText
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.retry import RetryPolicy
from dealscreen.logging.logger import Log
from dealscreen.prompts.prompt_loader import load_prompt_template, load_response_example


class AnalysisEngine:
    """Analyses an accepted contract into a normalized AnalysisResult.

    Provider and parse failures propagate to the caller; there is no
    rule-based fallback analysis.
    """

    def __init__(
        self,
        *,
        gateway: BaseModelGateway,
        retry_policy: RetryPolicy | None = None,
        normalizer: ResponseNormalizer | None = None,
        scorer: Callable[[AnalysisResult], int] = calculate_negotiation_power_score,
        prompt_template_path: Path | None = None,
        response_example_path: Path | None = None,
    ) -> None:
        self._gateway = gateway
        self._retry_policy = retry_policy or RetryPolicy()
        self._normalizer = normalizer or ResponseNormalizer()
        self._scorer = scorer
        self._prompt_template = load_prompt_template("analysis", prompt_template_path)
        self._response_example = load_response_example(response_example_path)

    def analyze(self, document: DocumentText) -> AnalysisResult:
        prompt = self._build_prompt(document)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._retry_policy.complete(self._gateway, prompt)
        Log.debug(f"Analysis raw response:\n{raw_response}")

        result = self._normalizer.normalize(raw_response)
        result = dataclasses.replace(
            result, negotiation_power_score=self._scorer(result)
        )

        Log.info(
            "Analysis complete",
            protection_score=result.protection_score,
            overall_risk=result.overall_risk.value,
            issues=len(result.issues),
            negotiation_power_score=result.negotiation_power_score,
        )
        return result

    def _build_prompt(self, document: DocumentText) -> str:
        return self._prompt_template.format(
            response_example=self._response_example,
            contract_text=document.text,
        )
