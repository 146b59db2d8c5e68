"""Helpers for splitting strings around the last occurrence of a separator."""


def substring_before_last(text: str, separator: str) -> str:
    """Return the text before the last separator.

    The whole text is returned when the separator does not occur.
    """
    head, sep, _ = text.rpartition(separator)
    return head if sep else text


def substring_after_last(text: str, separator: str) -> str:
    """Return the text after the last separator, or "" when it does not occur."""
    _, sep, tail = text.rpartition(separator)
    return tail if sep else ""
