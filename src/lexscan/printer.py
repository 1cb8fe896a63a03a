"""
Token Printer
=============

Renders scanned tokens for display. Two formats are provided:

- text: one ``<TypeName>: <text>`` line per token
- json: an array of ``{"type", "text", "start", "end"}`` objects

Copyright (c) 2026 lexscan Developers & Contributors
"""

import json
from typing import Iterable

from lexscan.scanner import Token, TokenType

# Types hidden by the CLI's --hide-whitespace option
LAYOUT_TYPES = frozenset({TokenType.WHITESPACE, TokenType.NEWLINE})


def format_token(token: Token) -> str:
    """Format a token as ``<TypeName>: <text>``."""
    return f"{token.type.value}: {token.text}"


def _visible(tokens: Iterable[Token], skip: Iterable[TokenType]) -> list[Token]:
    hidden = frozenset(skip)
    return [t for t in tokens if t.type not in hidden]


def format_tokens(tokens: Iterable[Token], skip: Iterable[TokenType] = ()) -> str:
    """
    Format tokens one per line.

    Args:
        tokens: Tokens to render
        skip: Token types to leave out

    Returns:
        The rendered lines joined with newlines (no trailing newline)
    """
    return "\n".join(format_token(t) for t in _visible(tokens, skip))


def tokens_to_json(tokens: Iterable[Token], skip: Iterable[TokenType] = ()) -> str:
    """Serialize tokens as a JSON array, including their source offsets."""
    records = [
        {"type": t.type.value, "text": t.text, "start": t.start, "end": t.end}
        for t in _visible(tokens, skip)
    ]
    return json.dumps(records, indent=2)


def summarize(tokens: Iterable[Token]) -> dict[TokenType, int]:
    """Count tokens per type, in order of first appearance."""
    counts: dict[TokenType, int] = {}
    for token in tokens:
        counts[token.type] = counts.get(token.type, 0) + 1
    return counts
