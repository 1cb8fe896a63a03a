"""
lexscan - Lexical Scanner for a C-like Language
===============================================

This package turns C-like source text into a flat list of classified
tokens (keywords, identifiers, operators, literals, comments and
whitespace). It is meant as the front end of a larger toolchain such as
a compiler, linter or syntax highlighter.

Main Components
---------------
- **scanner**: the tokenizer (Scanner, Token, TokenType, scan)
- **config**: behaviour switches (ScannerOptions)
- **source**: reading input from files or interactive line streams
- **printer**: rendering tokens as text or JSON
- **cli**: the ``lexscan`` command

Quick Start
-----------
    >>> from lexscan import scan
    >>> [str(t) for t in scan("return 0;")]
    ['Keyword: return', 'Whitespace:  ', 'NumericConstant: 0', 'SpecialCharacter: ;']

Or from the command line:
    $ lexscan program.c
    $ lexscan --format json --hide-whitespace program.c

Copyright (c) 2026 lexscan Developers & Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lexscan.config import ScannerOptions, TypeContextRule, WhitespaceMode
from lexscan.errors import ConfigError, LexScanError, SourceReadError
from lexscan.scanner import (
    KEYWORDS,
    TYPE_KEYWORDS,
    Scanner,
    Token,
    TokenType,
    TypeContext,
    scan,
)

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "Token",
    "TokenType",
    "TypeContext",
    "KEYWORDS",
    "TYPE_KEYWORDS",
    "scan",
    # Options
    "ScannerOptions",
    "TypeContextRule",
    "WhitespaceMode",
    # Errors
    "LexScanError",
    "ConfigError",
    "SourceReadError",
]
