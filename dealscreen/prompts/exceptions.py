class PromptLoadError(Exception):
    """Raised when a prompt template or response example cannot be read."""
