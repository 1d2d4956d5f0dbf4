"""Query building helpers shared by the PostgreSQL repositories."""

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Build an ILIKE pattern matching ``text`` anywhere, wildcards taken literally.

    Use with ``escape=LIKE_ESCAPE``.
    """
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
