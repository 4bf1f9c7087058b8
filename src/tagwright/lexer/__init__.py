"""State-machine lexer for tagwright.

Splits a markup string into TAG, TEXT and COMMENT tokens.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, tokenize
├── core.py              # Lexer class (mode dispatch + scanners)
└── modes.py             # LexerMode enum, scanning constants

Usage:
    >>> from tagwright.lexer import tokenize
    >>> [t.raw for t in tokenize("<p> Hi </p>")]
    ['<p>', 'Hi', '</p>']

"""

from tagwright.config import FormatConfig
from tagwright.lexer.core import Lexer
from tagwright.lexer.modes import LexerMode
from tagwright.tokens import Token


def tokenize(markup: str, *, config: FormatConfig | None = None) -> list[Token]:
    """Split markup into an ordered list of tokens.

    Never raises: malformed constructs become text.

    Args:
        markup: Markup source text
        config: Classification tables (uses the active context config if None)

    Returns:
        Tokens in source order
    """
    return list(Lexer(markup, config).tokenize())


__all__ = ["Lexer", "LexerMode", "tokenize"]
