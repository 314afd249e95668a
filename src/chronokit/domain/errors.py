from __future__ import annotations


class ChronosError(Exception):
    """Base class for every error raised by chronokit."""


class InvalidDateError(ChronosError, ValueError):
    pass


class FormatMismatchError(ChronosError, ValueError):
    """Raised when an input string does not match a token template."""

    def __init__(self, text: str, template: str) -> None:
        super().__init__(f"Input {text!r} does not match format {template!r}.")
        self.text = text
        self.template = template


class UnsupportedUnitError(ChronosError, ValueError):
    def __init__(self, unit: object) -> None:
        super().__init__(f"Unsupported time unit: {unit}")
        self.unit = unit


class PluginConflictError(ChronosError, RuntimeError):
    pass
