"""State-machine lexer for HTML-like markup.

Scans left to right, switching between TEXT, TAG, COMMENT and RAW_TEXT
modes. Every step advances the position, so tokenization always terminates,
and every construct that cannot be closed falls back to text, so it never
raises.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from tagwright.config import FormatConfig, get_format_config
from tagwright.lexer.modes import (
    COMMENT_CLOSE,
    COMMENT_OPEN,
    TAG_NAME_CHARS,
    TAG_START_CHARS,
    LexerMode,
)
from tagwright.tokens import Token, TokenKind


class Lexer:
    """Finite-state markup lexer.

    Modes:
    1. TEXT: find the next ``<`` and decide what it opens
    2. TAG / COMMENT: find the terminator; on failure the ``<`` is text
    3. RAW_TEXT: swallow a script/style body up to its closing tag

    Usage:
            >>> lexer = Lexer("<p>Hi<br></p>")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(TAG, '<p>', 0:3)
        Token(TEXT, 'Hi', 3:5)
        Token(TAG, '<br>', 5:9)
        Token(TAG, '</p>', 9:13)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_mode",
        "_config",
        "_text_start",  # Start of the pending text run
        "_construct_start",  # Position of the '<' being scanned in TAG/COMMENT
        "_raw_text_name",  # Element whose body RAW_TEXT is scanning
    )

    def __init__(self, source: str, config: FormatConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            config: Classification tables (uses the active context config if None)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mode = LexerMode.TEXT
        self._config = config if config is not None else get_format_config()
        self._text_start = 0
        self._construct_start = 0
        self._raw_text_name = ""

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) outside raw-text bodies
        """
        while self._pos < self._source_len:
            yield from self._dispatch_mode()

        # Trailing text (also covers an unterminated raw-text body)
        token = self._text_token(self._text_start, self._source_len)
        if token is not None:
            yield token

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to the scanner for the current mode."""
        if self._mode == LexerMode.TEXT:
            self._scan_text()
        elif self._mode == LexerMode.TAG:
            yield from self._scan_tag()
        elif self._mode == LexerMode.COMMENT:
            yield from self._scan_comment()
        elif self._mode == LexerMode.RAW_TEXT:
            yield from self._scan_raw_text()

    # =========================================================================
    # Mode scanners
    # =========================================================================

    def _scan_text(self) -> None:
        """Advance to the next '<' that may open a tag or comment."""
        source = self._source
        idx = source.find("<", self._pos)
        if idx == -1:
            self._pos = self._source_len
            return

        if source.startswith(COMMENT_OPEN, idx):
            self._enter_construct(idx, LexerMode.COMMENT)
            return

        nxt = idx + 1
        if nxt < self._source_len and source[nxt] == "/":
            nxt += 1
        if nxt < self._source_len and source[nxt] in TAG_START_CHARS:
            self._enter_construct(idx, LexerMode.TAG)
            return

        # Stray '<' stays part of the text run
        self._pos = idx + 1

    def _scan_tag(self) -> Iterator[Token]:
        """Close the tag construct at the next '>'."""
        start = self._construct_start
        end = self._source.find(">", start)
        if end == -1:
            self._fall_back_to_text()
            return

        end += 1
        token = self._tag_token(start, end)
        yield from self._flush_text(start)
        yield token
        self._pos = end
        self._text_start = end
        self._mode = LexerMode.TEXT

        if token.is_opening and token.name in self._config.raw_text_elements:
            self._raw_text_name = token.name
            self._mode = LexerMode.RAW_TEXT

    def _scan_comment(self) -> Iterator[Token]:
        """Close the comment at the next '-->'."""
        start = self._construct_start
        end = self._source.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
        if end == -1:
            self._fall_back_to_text()
            return

        end += len(COMMENT_CLOSE)
        yield from self._flush_text(start)
        yield Token(kind=TokenKind.COMMENT, raw=self._source[start:end], start=start, end=end)
        self._pos = end
        self._text_start = end
        self._mode = LexerMode.TEXT

    def _scan_raw_text(self) -> Iterator[Token]:
        """Emit a raw-text body up to the matching closing tag as one text token."""
        close = self._find_raw_text_close()
        if close == -1:
            # Unterminated body: the rest of the input is its text
            self._pos = self._source_len
            return

        yield from self._flush_text(close)
        self._pos = close
        self._text_start = close
        self._mode = LexerMode.TEXT

    # =========================================================================
    # Helpers
    # =========================================================================

    def _enter_construct(self, start: int, mode: LexerMode) -> None:
        self._construct_start = start
        self._pos = start
        self._mode = mode

    def _fall_back_to_text(self) -> None:
        """Treat the '<' of an unterminated construct as text and move past it."""
        self._pos = self._construct_start + 1
        self._mode = LexerMode.TEXT

    def _find_raw_text_close(self) -> int:
        """Find ``</name`` (case-insensitive) not followed by a name character.

        Returns:
            Position of the closing ``</``, or -1 if the body is unterminated.
        """
        source = self._source
        name = self._raw_text_name
        name_len = len(name)
        idx = self._pos
        while True:
            idx = source.find("</", idx)
            if idx == -1:
                return -1
            after = idx + 2 + name_len
            if source[idx + 2 : after].lower() == name and (
                after >= self._source_len or source[after] not in TAG_NAME_CHARS
            ):
                return idx
            idx += 2

    def _flush_text(self, end: int) -> Iterator[Token]:
        """Yield the pending text run ending at ``end``, if it has content."""
        token = self._text_token(self._text_start, end)
        if token is not None:
            yield token

    def _text_token(self, start: int, end: int) -> Token | None:
        """Create a trimmed text token, or None for a whitespace-only run."""
        segment = self._source[start:end]
        content = segment.strip()
        if not content:
            return None
        offset = start + len(segment) - len(segment.lstrip())
        return Token(
            kind=TokenKind.TEXT,
            raw=content,
            start=offset,
            end=offset + len(content),
        )

    def _tag_token(self, start: int, end: int) -> Token:
        """Create a tag token for ``source[start:end]``."""
        raw = self._source[start:end]
        is_closing = raw.startswith("</")
        name_start = 2 if is_closing else 1
        name_end = name_start
        raw_len = len(raw)
        while name_end < raw_len and raw[name_end] in TAG_NAME_CHARS:
            name_end += 1
        name = raw[name_start:name_end].lower()

        return Token(
            kind=TokenKind.TAG,
            raw=raw,
            start=start,
            end=end,
            name=name,
            is_closing=is_closing,
            is_self_closing=raw.endswith("/>") or name in self._config.void_elements,
        )
