from pathlib import Path

from dealscreen.classification.models import BinaryVerdict
from dealscreen.extraction.models import DocumentText
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import ProviderError
from dealscreen.gateway.retry import RetryPolicy
from dealscreen.logging.logger import Log
from dealscreen.prompts.prompt_loader import load_prompt_template

LLM_ERROR_RESPONSE = "LLM_ERROR"


class BinaryClassifierStage:
    """Asks the model a single YES/NO question: is this a brand-deal contract?

    Anything other than an unambiguous YES counts as NO, including provider
    failures.
    """

    def __init__(
        self,
        *,
        gateway: BaseModelGateway,
        retry_policy: RetryPolicy | None = None,
        max_chars: int = 6000,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._gateway = gateway
        self._retry_policy = retry_policy or RetryPolicy()
        self._max_chars = max_chars
        self._prompt_template = load_prompt_template("binary_classifier", prompt_template_path)

    def classify(self, document: DocumentText) -> BinaryVerdict:
        prompt = self._prompt_template.format(document_text=document.head(self._max_chars))
        Log.debug(f"Binary classifier prompt:\n{prompt}")
        try:
            raw = self._retry_policy.complete(self._gateway, prompt)
        except ProviderError as exc:
            Log.error(f"Binary classifier call failed, defaulting to NO: {exc}", code=exc.code)
            return BinaryVerdict(is_valid=False, raw_response=LLM_ERROR_RESPONSE, error=str(exc))

        Log.debug(f"Binary classifier raw response:\n{raw}")
        return BinaryVerdict(is_valid=interpret_yes_no(raw), raw_response=raw.strip().upper())


def interpret_yes_no(raw: str) -> bool:
    """Return True only for a reply that says YES and never says NO."""
    cleaned = raw.strip().upper()
    says_yes = "YES" in cleaned
    says_no = "NO" in cleaned
    if says_yes and not says_no:
        return True
    if says_no and not says_yes:
        return False
    Log.warning("Ambiguous classifier response, defaulting to NO", response=cleaned[:80])
    return False
