from __future__ import annotations

_DEFAULT_LIMIT = 40


def shorten_text(value: str, limit: int = _DEFAULT_LIMIT) -> str:
    """Cut a string down to ``limit`` characters, noting how much was dropped.

    Args:
        value: Text to shorten.
        limit: Maximum number of characters kept from ``value``.

    Returns:
        ``value`` unchanged when it fits, otherwise its head followed by
        a marker such as ``...(+123 chars)``.
    """
    if len(value) <= limit:
        return value
    return f"{value[:limit]}...(+{len(value) - limit} chars)"
