"""Stream opening capability handed to the descriptor parser."""

from collections.abc import Callable
from typing import BinaryIO

StreamOpener = Callable[[str], BinaryIO]


def open_file_stream(path: str) -> BinaryIO:
    """Open a file for binary reading; raises OSError if missing or unreadable."""
    return open(path, "rb")  # noqa: SIM115
