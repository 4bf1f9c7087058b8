"""Indenting printer for tagwright token streams.

Rebuilds markup from tokens, one construct per line, indenting the
children of block elements. Inline elements never change the indent
level, and text inside preserve-content elements (pre, script, style)
is emitted verbatim.

Thread Safety:
PrintState and IndentWriter are local to each print() call.
Printer holds only an immutable FormatConfig and is safe to share.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from tagwright.config import FormatConfig, get_format_config
from tagwright.tokens import Token, TokenKind


@dataclass(slots=True)
class PrintState:
    """Transient printer counters.

    Both counters are floor-clamped at zero, so surplus closing tags
    in malformed input never drive them negative.

    Attributes:
        indent_level: Depth of currently open block elements
        preserve_depth: Number of currently open preserve-content elements

    """

    indent_level: int = 0
    preserve_depth: int = 0

    def indent(self) -> None:
        self.indent_level += 1

    def dedent(self) -> None:
        if self.indent_level > 0:
            self.indent_level -= 1

    def enter_preserve(self) -> None:
        self.preserve_depth += 1

    def leave_preserve(self) -> None:
        if self.preserve_depth > 0:
            self.preserve_depth -= 1


class PrintStep(NamedTuple):
    """One emitted line and the printer counters after emitting it."""

    token: Token
    level: int  # Indent level the line was written at; -1 for verbatim text
    indent_level: int
    preserve_depth: int


class IndentWriter:
    """Line accumulator with an indent unit.

    Appends to a list, joins once at the end.

    Usage:
            >>> out = IndentWriter("  ")
            >>> out.line("<div>").line("Hi", 1).line("</div>")
            >>> out.build()
            '<div>\\n  Hi\\n</div>'

    """

    __slots__ = ("_parts", "_unit")

    def __init__(self, unit: str = "  ") -> None:
        self._parts: list[str] = []
        self._unit = unit

    def line(self, text: str, level: int = 0) -> IndentWriter:
        """Append ``text`` on its own line, indented ``level`` units."""
        if level > 0:
            self._parts.append(self._unit * level)
        self._parts.append(text)
        self._parts.append("\n")
        return self

    def verbatim(self, text: str) -> IndentWriter:
        """Append ``text`` untouched, followed by a newline."""
        self._parts.append(text)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all lines, trimming leading and trailing whitespace."""
        return "".join(self._parts).strip()

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)


class Printer:
    """Token printer producing canonically indented markup.

    A closing tag dedents before it is written, except the closing tag of
    an inline or void element (``</b>``, ``</br>``): those leave the level
    unchanged, since their opening tags never indented.

    Usage:
            >>> from tagwright.lexer import tokenize
            >>> print(Printer().print(tokenize("<div><p>Hi</p></div>")))
        <div>
          <p>
            Hi
          </p>
        </div>

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        """Initialize printer.

        Args:
            config: Indent unit and classification tables
                (uses the active context config if None)
        """
        self._config = config if config is not None else get_format_config()

    def print(self, tokens: Iterable[Token]) -> str:
        """Print tokens as indented markup.

        Args:
            tokens: Tokens in source order (e.g., from tokenize())

        Returns:
            Formatted markup, trimmed of leading/trailing whitespace
        """
        out = IndentWriter(self._config.indent)
        for step in self.steps(tokens):
            if step.level < 0:
                out.verbatim(step.token.raw)
            else:
                out.line(step.token.raw, step.level)
        return out.build()

    def steps(self, tokens: Iterable[Token]) -> Iterator[PrintStep]:
        """Walk tokens, yielding where each one is written.

        Yields:
            PrintStep per token, with the counters after the token is applied.
        """
        state = PrintState()
        for token in tokens:
            level = self._apply(token, state)
            yield PrintStep(token, level, state.indent_level, state.preserve_depth)

    def _apply(self, token: Token, state: PrintState) -> int:
        """Update ``state`` for ``token`` and return the level it prints at."""
        if token.kind is TokenKind.COMMENT:
            return state.indent_level

        if token.kind is TokenKind.TEXT:
            return -1 if state.preserve_depth > 0 else state.indent_level

        config = self._config
        name = token.name

        if token.is_closing:
            if name in config.preserve_elements:
                state.leave_preserve()
            # Closing tags mirror their opening tag: void and inline never indented
            if not token.is_self_closing and name not in config.inline_elements:
                state.dedent()
            return state.indent_level

        level = state.indent_level
        if not token.is_self_closing:
            if name not in config.inline_elements:
                state.indent()
            if name in config.preserve_elements:
                state.enter_preserve()
        return level


def render(tokens: Iterable[Token], *, config: FormatConfig | None = None) -> str:
    """Print tokens as indented markup.

    Args:
        tokens: Tokens in source order
        config: Indent unit and classification tables

    Returns:
        Formatted markup
    """
    return Printer(config).print(tokens)
