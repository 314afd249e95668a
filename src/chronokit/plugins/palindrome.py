from __future__ import annotations

from typing import Any

from chronokit.application.plugins import install_methods
from chronokit.ports.plugins import InstantCapabilities


def _is_palindrome(text: str) -> bool:
    digits = text.replace("-", "")
    return digits == digits[::-1]


def is_palindrome_date(caps: InstantCapabilities, instant: Any, short_year: bool = False) -> bool:
    """Whether the date reads the same backwards, padded (``2021-12-02``) or not (``2012-10-2``)."""
    padded = instant.format("YY-MM-DD" if short_year else "YYYY-MM-DD")
    bare = instant.format("YY-M-D" if short_year else "YYYY-M-D")
    return _is_palindrome(padded) or _is_palindrome(bare)


def palindrome_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, is_palindrome_date=is_palindrome_date)
