"""Lexer operating modes and scanning constants.

This module defines the finite state machine modes for the lexer
and the scanning constants for comments and tag names.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - TEXT: Between tags, accumulating text
    - TAG: Inside ``<name ...>`` or ``</name>``
    - COMMENT: Inside ``<!-- ... -->``
    - RAW_TEXT: Inside the body of a raw-text element (script, style, ...)

    """

    TEXT = auto()
    TAG = auto()
    COMMENT = auto()
    RAW_TEXT = auto()


COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

# Characters allowed in a tag name after the leading letter
TAG_NAME_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_:."
)

# A tag construct is '<' or '</' followed by one of these
TAG_START_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
