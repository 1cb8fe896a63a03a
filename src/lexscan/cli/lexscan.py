"""
lexscan - Tokenizer Command-Line Interface
==========================================

This module implements the command-line interface for the scanner. It
reads C-like source from a file or from the terminal and prints one
``<TypeName>: <text>`` line per token.

Usage Examples
--------------
Tokenize a file:
    $ lexscan program.c

Interactive input (finish with a line containing only SCAN):
    $ lexscan
    int x = 5;
    SCAN

JSON output without whitespace tokens:
    $ lexscan program.c --format json --hide-whitespace

Only type keywords introduce identifiers:
    $ lexscan program.c --type-context type-keyword

Exit Codes
----------
0 - Success
1 - Input could not be read or output written
2 - Invalid arguments or configuration
3 - Internal error

Copyright (c) 2026 lexscan Developers & Contributors
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lexscan import __version__
from lexscan.cli.errors import handle_cli_exception
from lexscan.config import ScannerOptions, TypeContextRule, WhitespaceMode
from lexscan.printer import LAYOUT_TYPES, format_tokens, summarize, tokens_to_json
from lexscan.scanner import scan
from lexscan.source import DEFAULT_SENTINEL, read_source_file, read_until_sentinel

logger = logging.getLogger(__name__)

PROMPT = "Enter C code to analyze (type '{sentinel}' on a new line to finish input):"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--type-context",
    type=click.Choice([r.value for r in TypeContextRule]),
    default=None,
    help="Which keywords make the next word an identifier "
         "(default: any-keyword, or LEXSCAN_TYPE_CONTEXT)",
)
@click.option(
    "--whitespace",
    type=click.Choice([m.value for m in WhitespaceMode]),
    default=None,
    help="Record whitespace as normalized text or the actual character "
         "(default: normalized, or LEXSCAN_WHITESPACE)",
)
@click.option(
    "--escapes/--no-escapes",
    default=None,
    help="Let backslashes escape quotes inside literals (default: off, or LEXSCAN_ESCAPES)",
)
@click.option(
    "--hide-whitespace",
    is_flag=True,
    help="Leave whitespace and newline tokens out of the output",
)
@click.option(
    "--sentinel",
    default=DEFAULT_SENTINEL,
    show_default=True,
    help="Line that ends interactive input",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lexscan")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    output_format: str,
    type_context: Optional[str],
    whitespace: Optional[str],
    escapes: Optional[bool],
    hide_whitespace: bool,
    sentinel: str,
    verbose: bool,
) -> None:
    """
    Tokenize C-like source code.

    INPUT_FILE is the source file to scan. Without it, source lines are
    read from standard input until a line containing only the sentinel.

    \b
    Examples:
        lexscan hello.c                   # One token per line
        lexscan hello.c -f json           # JSON array with offsets
        lexscan hello.c --hide-whitespace # Skip layout tokens
        lexscan -o tokens.txt hello.c     # Write to a file
    """
    setup_logging(verbose)

    try:
        # Environment first, explicit flags override
        options = ScannerOptions.from_env()
        if type_context is not None:
            options.type_context_rule = TypeContextRule(type_context)
        if whitespace is not None:
            options.whitespace = WhitespaceMode(whitespace)
        if escapes is not None:
            options.escape_aware = escapes
        logger.debug("Scanner options: %s", options)

        interactive = input_file is None
        if interactive:
            click.echo(PROMPT.format(sentinel=sentinel), err=True)
            source = read_until_sentinel(sys.stdin, sentinel)
        else:
            source = read_source_file(input_file)

        tokens = scan(source, options)
        logger.debug("Scanned %d tokens from %d characters", len(tokens), len(source))

        skip = LAYOUT_TYPES if hide_whitespace else ()
        if output_format.lower() == "json":
            rendered = tokens_to_json(tokens, skip)
        else:
            rendered = format_tokens(tokens, skip)
            if interactive:
                rendered = f"\nTokens:\n{rendered}"

        if output is not None:
            output.write_text(rendered + "\n", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {len(tokens)} tokens to {output}", err=True)
        else:
            click.echo(rendered)

        if verbose:
            for token_type, count in summarize(tokens).items():
                click.echo(f"  {token_type.value}: {count}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
