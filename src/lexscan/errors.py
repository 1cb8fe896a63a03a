"""
lexscan Error Hierarchy
=======================

This module defines the exceptions raised by lexscan. The scanner itself
never raises: every input string produces a token list. Errors only come
from the layers around it (option parsing and reading input).

Exception Hierarchy
-------------------
LexScanError (base)
├── ConfigError - invalid scanner option value
└── SourceReadError - input text could not be read

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)

Copyright (c) 2026 lexscan Developers & Contributors
"""

from pathlib import Path
from typing import Iterable, Optional, Union


# =============================================================================
# Base Exception Class
# =============================================================================

class LexScanError(Exception):
    """
    Base exception for all lexscan errors.

    Callers can catch every lexscan error with a single except clause:

        try:
            options = ScannerOptions.from_env()
        except LexScanError as e:
            print(e)

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Specific Exceptions
# =============================================================================

class ConfigError(LexScanError):
    """
    Invalid value for a scanner option.

    Raised when an option is given a value outside its allowed set,
    whether it came from code, a command-line flag or the environment.
    """

    def __init__(self, field: str, value: object, allowed: Iterable[str]):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"invalid value {value!r} for {field}",
            hint=f"expected one of: {', '.join(self.allowed)}",
        )


class SourceReadError(LexScanError):
    """
    Input text could not be read.

    Wraps OS and decoding errors from the input collaborator so callers
    see a single exception type with the offending path attached.
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")
