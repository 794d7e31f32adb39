
# Two-character escape used for newlines in single-line keys and values
NEWLINE = "\n"
ESCAPED_NEWLINE = "\\n"


def escape_newlines(text: str) -> str:
    """
    Replace literal newlines with the two-character sequence ``\\n``.

    Args:
        text: Text that may span several lines

    Returns:
        Single-line text safe to store as a section file key or value
    """
    if not text:
        return text
    return text.replace(NEWLINE, ESCAPED_NEWLINE)


def unescape_newlines(text: str) -> str:
    """Inverse of escape_newlines: turn ``\\n`` back into real newlines."""
    if not text:
        return text
    return text.replace(ESCAPED_NEWLINE, NEWLINE)
