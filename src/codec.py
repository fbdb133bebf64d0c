"""Decoding of the escape conventions used in the site's inline scripts."""

ESCAPES = (
    ("\\/", "/"),
    ("&amp;", "&"),
)


def decode_entities(text: str) -> str:
    """
    Resolves escaped slashes and ampersand entities.

    The replacements are repeated until the text no longer changes, so
    double-encoded values such as '&amp;amp;' are fully resolved and
    decoding an already decoded string returns it unchanged.

    Args:
        text: The raw text taken from a document.

    Returns:
        The decoded text.
    """
    while True:
        decoded = text
        for escaped, literal in ESCAPES:
            decoded = decoded.replace(escaped, literal)
        if decoded == text:
            return decoded
        text = decoded
