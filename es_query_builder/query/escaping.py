"""
Escaping for query_string text.

Elasticsearch reserves a set of characters in query_string syntax that must
be backslash-escaped to be matched literally. See "Reserved characters" in
the query_string query reference.
"""

# Backslash comes first so escapes added for later entries are left alone
RESERVED_SEQUENCES = (
    "\\",
    "+",
    "=",
    "&&",
    "||",
    "!",
    "(",
    ")",
    "{",
    "}",
    "[",
    "]",
    "^",
    '"',
    "~",
    "*",
    "?",
    ":",
    "/",
)


def escape(text: str) -> str:
    """
    Backslash-escape every reserved sequence in ``text``.

    Args:
        text: Raw user search text

    Returns:
        Text safe to place in a query_string "query" value

    Example:
        >>> escape("kimchy!")
        'kimchy\\\\!'
    """
    escaped = text
    for sequence in RESERVED_SEQUENCES:
        if sequence in escaped:
            escaped = escaped.replace(sequence, "\\" + sequence)
    return escaped
