class ParseError(Exception):
    """Raised when a structured-analysis response is not recoverable JSON."""
