"""Utility for converting file-system paths to forward-slash form."""

BACK_SLASH = "\\"
SLASH = "/"


def normalize_path(path: str) -> str:
    """Replace Windows separators so all comparisons use forward slashes."""
    return path.replace(BACK_SLASH, SLASH)
