import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from dealscreen.analysis.exceptions import ParseError
from dealscreen.analysis.negotiation import negotiation_power_label
from dealscreen.classification.models import ClassificationResult
from dealscreen.config.settings import Settings
from dealscreen.extraction.exceptions import ExtractionError
from dealscreen.gateway.exceptions import ProviderError
from dealscreen.logging.logger import Log
from dealscreen.pipeline.exceptions import DocumentValidationError
from dealscreen.pipeline.pipeline import ReviewOutcome, build_pipeline

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_EXTRACTION_ERROR = 2
EXIT_ANALYSIS_ERROR = 3
EXIT_CONFIG_ERROR = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dealscreen",
        description="Screen a document for brand-deal contracts and analyse its risk",
    )
    parser.add_argument("file", type=Path, help="Path to a PDF or DOCX document")
    parser.add_argument(
        "--url",
        help="Original document URL, used as a format hint when magic bytes are ambiguous",
    )
    parser.add_argument(
        "--classify-only",
        action="store_true",
        help="Stop after classification and print the decision",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> build pipeline -> extract -> classify -> analyse."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ValueError as exc:
        _print_json({"error": "config_error", "message": str(exc)})
        return EXIT_CONFIG_ERROR
    Log.configure(settings.log_level)

    try:
        pipeline = build_pipeline(settings)
    except ValueError as exc:
        Log.error(f"Invalid configuration: {exc}")
        _print_json({"error": "config_error", "message": str(exc)})
        return EXIT_CONFIG_ERROR

    try:
        try:
            document = pipeline.extract(args.file.read_bytes(), source_url=args.url)
        except (ExtractionError, OSError) as exc:
            Log.error(f"Text extraction failed: {exc}")
            _print_json({"error": "extraction_error", "message": str(exc)})
            return EXIT_EXTRACTION_ERROR

        if args.classify_only:
            classification = pipeline.classify(document)
            _print_json({"classification": classification_to_dict(classification)})
            return EXIT_ACCEPTED if classification.is_brand_deal else EXIT_REJECTED

        try:
            outcome = pipeline.review(document)
        except DocumentValidationError as exc:
            payload: dict[str, Any] = {"error": "not_brand_deal", "message": str(exc)}
            if exc.classification is not None:
                payload["classification"] = classification_to_dict(exc.classification)
            _print_json(payload)
            return EXIT_REJECTED
        except ProviderError as exc:
            Log.error(f"Analysis failed: {exc}", code=exc.code)
            _print_json({"error": exc.code, "message": str(exc)})
            return EXIT_ANALYSIS_ERROR
        except ParseError as exc:
            Log.error(f"Analysis reply could not be parsed: {exc}")
            _print_json({"error": "parse_error", "message": str(exc)})
            return EXIT_ANALYSIS_ERROR

        _print_json(outcome_to_dict(outcome))
        return EXIT_ACCEPTED
    finally:
        pipeline.close()


def classification_to_dict(result: ClassificationResult) -> dict[str, Any]:
    return {
        "type": result.type.value,
        "confidence": result.confidence,
        "reasoning": result.reasoning,
    }


def outcome_to_dict(outcome: ReviewOutcome) -> dict[str, Any]:
    analysis = outcome.analysis.to_dict()
    score = outcome.analysis.negotiation_power_score
    if score is not None:
        label = negotiation_power_label(score)
        analysis["negotiationPower"] = {
            "label": label.label,
            "description": label.description,
        }
    return {
        "classification": classification_to_dict(outcome.classification),
        "analysis": analysis,
    }


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    sys.exit(main())
