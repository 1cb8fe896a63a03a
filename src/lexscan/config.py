"""
Scanner Options
===============

Behaviour switches for the scanner. The defaults reproduce the reference
tokenizer exactly; every other setting is an opt-in deviation.

Options can come from:
- Default values (defined here)
- Environment variables (``ScannerOptions.from_env``)
- Command-line flags (layered over the environment by the CLI)

Environment Variables
---------------------
| Variable              | Values                        | Default      |
|-----------------------|-------------------------------|--------------|
| LEXSCAN_TYPE_CONTEXT  | any-keyword, type-keyword     | any-keyword  |
| LEXSCAN_WHITESPACE    | normalized, verbatim          | normalized   |
| LEXSCAN_ESCAPES       | 1/true/yes/on, 0/false/no/off | off          |

Copyright (c) 2026 lexscan Developers & Contributors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional
import os

from lexscan.errors import ConfigError


class TypeContextRule(Enum):
    """Which keywords arm the type context for the next identifier."""

    ANY_KEYWORD = "any-keyword"     # every keyword (reference behaviour)
    TYPE_KEYWORD = "type-keyword"   # only string/int/float/double/char/void


class WhitespaceMode(Enum):
    """How whitespace and newline tokens record their text."""

    NORMALIZED = "normalized"   # " " for whitespace, the two characters "\n" for newline
    VERBATIM = "verbatim"       # the actual source character


_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _coerce(field: str, enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigError(field, value, [m.value for m in enum_cls]) from None


def _parse_flag(field: str, value: str) -> bool:
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigError(field, value, sorted(_TRUE_WORDS | _FALSE_WORDS))


@dataclass
class ScannerOptions:
    """
    Configuration for a scan.

    Attributes:
        type_context_rule: Which keywords make the next word an identifier
        whitespace: Normalized (lossy) or verbatim whitespace token text
        escape_aware: Let a backslash inside string/char literals consume
            the following character, so an escaped quote does not end the
            literal. Contents are still captured raw, never unescaped.
    """

    type_context_rule: TypeContextRule = TypeContextRule.ANY_KEYWORD
    whitespace: WhitespaceMode = WhitespaceMode.NORMALIZED
    escape_aware: bool = False

    def __post_init__(self) -> None:
        self.type_context_rule = _coerce(
            "type_context_rule", TypeContextRule, self.type_context_rule
        )
        self.whitespace = _coerce("whitespace", WhitespaceMode, self.whitespace)
        if isinstance(self.escape_aware, str):
            self.escape_aware = _parse_flag("escape_aware", self.escape_aware)
        elif not isinstance(self.escape_aware, bool):
            raise ConfigError("escape_aware", self.escape_aware, ["True", "False"])

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests)

        Raises:
            ConfigError: If a variable holds an unrecognised value
        """
        env = os.environ if environ is None else environ
        options = cls()

        if rule := env.get("LEXSCAN_TYPE_CONTEXT"):
            options.type_context_rule = _coerce(
                "LEXSCAN_TYPE_CONTEXT", TypeContextRule, rule.strip().lower()
            )

        if mode := env.get("LEXSCAN_WHITESPACE"):
            options.whitespace = _coerce(
                "LEXSCAN_WHITESPACE", WhitespaceMode, mode.strip().lower()
            )

        if escapes := env.get("LEXSCAN_ESCAPES"):
            options.escape_aware = _parse_flag("LEXSCAN_ESCAPES", escapes)

        return options
