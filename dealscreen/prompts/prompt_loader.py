from pathlib import Path

from dealscreen.prompts.exceptions import PromptLoadError

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template from a file.

    Args:
        name: Bundled template name without extension, e.g. ``binary_classifier``.
        path: Explicit template path overriding the bundled one.

    Returns:
        The raw template string with ``{placeholders}``.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_TEMPLATE_DIR / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_response_example(path: Path | None = None) -> str:
    """Load the JSON response example embedded in the analysis prompt.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_TEMPLATE_DIR / "analysis_response_example.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load response example: {exc}") from exc
