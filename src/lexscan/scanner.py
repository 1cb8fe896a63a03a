"""
C-like Source Scanner
=====================

This module implements the tokenizer for a small C-like language. It
converts source text into a flat list of classified tokens in a single
left-to-right pass.

Token Categories
----------------
- Keywords: if, else, while, for, return, break, continue,
  string, int, float, double, char, void
- Identifiers: a word directly following a keyword (see Type Context)
- Operators: + - * / = < > & | ! % (always one character each)
- Numeric constants: runs of digits, '.', 'e' and 'E' (not validated)
- Character constants: 'x'
- String constants: "double quoted"
- Special characters: ( ) { } [ ] ; , :
- Comments: // to end of line, /* ... */
- Whitespace and newlines: one token per character
- Unknown: anything else

Type Context
------------
A word that is not a keyword is only an identifier when the previous
keyword armed the type context ("int x" declares x). Otherwise it is
classified as Unknown. The context is a two-state machine:

    NO_PENDING_TYPE --keyword--> PENDING_TYPE --word--> NO_PENDING_TYPE

By default every keyword arms it, so ``return value`` yields an
identifier too. ``TypeContextRule.TYPE_KEYWORD`` restricts arming to the
type-name keywords; any other keyword then disarms it.

Leniency
--------
The scanner never raises. Unterminated literals and comments end at the
end of input, unrecognised characters become Unknown tokens.

Example Usage
-------------
>>> from lexscan.scanner import scan
>>> [str(token) for token in scan("int x;")]
['Keyword: int', 'Whitespace:  ', 'Identifier: x', 'SpecialCharacter: ;']

Copyright (c) 2026 lexscan Developers & Contributors
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional
import string

from lexscan.config import ScannerOptions, TypeContextRule, WhitespaceMode


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token categories produced by the scanner.

    The value of each member is its display name, as used by the
    printer ("Keyword: int").
    """

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    OPERATOR = "Operator"
    NUMERIC_CONSTANT = "NumericConstant"
    CHARACTER_CONSTANT = "CharacterConstant"
    STRING_CONSTANT = "StringConstant"
    SPECIAL_CHARACTER = "SpecialCharacter"
    COMMENT = "Comment"
    WHITESPACE = "Whitespace"
    NEWLINE = "Newline"
    UNKNOWN = "Unknown"


class TypeContext(Enum):
    """State carried between tokens by the identifier reader."""

    NO_PENDING_TYPE = auto()
    PENDING_TYPE = auto()


# =============================================================================
# Character Tables
# =============================================================================

TYPE_KEYWORDS = frozenset({"string", "int", "float", "double", "char", "void"})

KEYWORDS = frozenset({
    "if", "else", "while", "for", "return", "break", "continue",
}) | TYPE_KEYWORDS

OPERATORS = frozenset("+-*/=<>&|!%")

SPECIAL_CHARACTERS = frozenset("(){}[];,:")

# Text of normalized whitespace tokens
NORMALIZED_NEWLINE = "\\n"
NORMALIZED_SPACE = " "


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Tokens compare equal on type and text only, so tests and consumers
    can build expected tokens without offsets.

    Attributes:
        type: The TokenType classification
        text: The captured text (normalized for whitespace, right-trimmed
            for comments, otherwise exactly the source slice)
        start: Offset of the first consumed character
        end: Offset one past the last consumed character
    """
    type: TokenType
    text: str
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.type.value}: {self.text}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.start}:{self.end})"


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes C-like source text.

    Usage:
        scanner = Scanner(source_text)
        tokens = scanner.scan()

    Each call to ``scan`` starts from the beginning of the source with a
    fresh type context, so repeated calls return identical lists.

    Attributes:
        source: The source text being tokenized
        options: Behaviour switches (see lexscan.config)
    """

    IDENT_START = frozenset(string.ascii_letters + "_")
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
    DIGITS = frozenset(string.digits)
    NUMBER_CHARS = frozenset(string.digits + ".eE")

    def __init__(self, source: str, options: Optional[ScannerOptions] = None):
        self.source = source
        self.options = options or ScannerOptions()

        self._pos = 0
        self._type_context = TypeContext.NO_PENDING_TYPE

    @property
    def cursor(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    @property
    def type_context(self) -> TypeContext:
        return self._type_context

    def scan(self) -> list[Token]:
        """
        Tokenize the whole source.

        Returns:
            Every token in source order. Never raises.
        """
        self._pos = 0
        self._type_context = TypeContext.NO_PENDING_TYPE
        return list(self._tokens())

    def _tokens(self) -> Iterator[Token]:
        while not self._at_end():
            yield self._scan_token()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at current position + offset, or "" past the end."""
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character ("" at the end)."""
        if self._at_end():
            return ""
        char = self.source[self._pos]
        self._pos += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._peek() == expected:
            self._advance()
            return True
        return False

    def _consume_while(self, chars: frozenset) -> None:
        while not self._at_end() and self.source[self._pos] in chars:
            self._pos += 1

    def _make_token(
        self,
        token_type: TokenType,
        start: int,
        text: Optional[str] = None,
    ) -> Token:
        """Create a token spanning start..cursor, by default with the raw slice."""
        if text is None:
            text = self.source[start:self._pos]
        return Token(token_type, text, start, self._pos)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_token(self) -> Token:
        """Scan one token. Always consumes at least one character."""
        start = self._pos
        char = self._peek()

        if char.isspace():
            return self._scan_whitespace(start)

        if char in self.IDENT_START:
            return self._scan_word(start)

        if char in self.DIGITS:
            return self._scan_number(start)

        # A slash is a comment opener first, an operator otherwise
        if char == "/":
            comment = self._scan_comment(start)
            if comment is not None:
                return comment

        if char in OPERATORS:
            self._advance()
            return self._make_token(TokenType.OPERATOR, start)

        if char in SPECIAL_CHARACTERS:
            self._advance()
            return self._make_token(TokenType.SPECIAL_CHARACTER, start)

        if char == "'":
            return self._scan_char(start)

        if char == '"':
            return self._scan_string(start)

        self._advance()
        return self._make_token(TokenType.UNKNOWN, start)

    # =========================================================================
    # Sub-scanners
    # =========================================================================

    def _scan_whitespace(self, start: int) -> Token:
        char = self._advance()
        verbatim = self.options.whitespace is WhitespaceMode.VERBATIM

        if char == "\n":
            text = char if verbatim else NORMALIZED_NEWLINE
            return self._make_token(TokenType.NEWLINE, start, text)

        text = char if verbatim else NORMALIZED_SPACE
        return self._make_token(TokenType.WHITESPACE, start, text)

    def _scan_word(self, start: int) -> Token:
        """
        Scan a keyword or identifier-shaped word.

        Keywords may arm the type context. A non-keyword word consumes an
        armed context and becomes an identifier, otherwise it is Unknown.
        """
        self._consume_while(self.IDENT_CHARS)
        word = self.source[start:self._pos]

        if word in KEYWORDS:
            if self._arms_type_context(word):
                self._type_context = TypeContext.PENDING_TYPE
            else:
                self._type_context = TypeContext.NO_PENDING_TYPE
            return self._make_token(TokenType.KEYWORD, start)

        if self._type_context is TypeContext.PENDING_TYPE:
            self._type_context = TypeContext.NO_PENDING_TYPE
            return self._make_token(TokenType.IDENTIFIER, start)

        return self._make_token(TokenType.UNKNOWN, start)

    def _arms_type_context(self, keyword: str) -> bool:
        if self.options.type_context_rule is TypeContextRule.ANY_KEYWORD:
            return True
        return keyword in TYPE_KEYWORDS

    def _scan_number(self, start: int) -> Token:
        self._consume_while(self.NUMBER_CHARS)
        return self._make_token(TokenType.NUMERIC_CONSTANT, start)

    def _scan_char(self, start: int) -> Token:
        """
        Scan a character literal: quote, one character, closing quote.

        An empty pair '' yields only the opening quote; the second quote
        starts the next literal. A missing closing quote ends the token
        where scanning stopped.
        """
        self._advance()  # opening '

        if not self._at_end() and self._peek() != "'":
            if self.options.escape_aware and self._peek() == "\\":
                self._advance()
            self._advance()
            self._match("'")

        return self._make_token(TokenType.CHARACTER_CONSTANT, start)

    def _scan_string(self, start: int) -> Token:
        """Scan a string literal up to the next double quote or end of input."""
        self._advance()  # opening "

        while not self._at_end() and self._peek() != '"':
            if self.options.escape_aware and self._peek() == "\\":
                self._advance()
            self._advance()

        self._match('"')
        return self._make_token(TokenType.STRING_CONSTANT, start)

    def _scan_comment(self, start: int) -> Optional[Token]:
        """
        Scan a // or /* */ comment starting at a slash.

        Returns:
            The comment token with trailing whitespace trimmed, or None
            (cursor untouched) when the slash does not open a comment.
        """
        opener = self._peek(1)

        if opener == "/":
            end = self.source.find("\n", start + 2)
            self._pos = len(self.source) if end == -1 else end
        elif opener == "*":
            close = self.source.find("*/", start + 2)
            self._pos = len(self.source) if close == -1 else close + 2
        else:
            return None

        text = self.source[start:self._pos].rstrip()
        return self._make_token(TokenType.COMMENT, start, text)


# =============================================================================
# Convenience Function
# =============================================================================

def scan(source: str, options: Optional[ScannerOptions] = None) -> list[Token]:
    """
    Tokenize source text.

    Args:
        source: Complete source text, lines separated by newlines
        options: Behaviour switches; defaults reproduce the reference tokenizer

    Returns:
        List of tokens in source order
    """
    return Scanner(source, options).scan()
