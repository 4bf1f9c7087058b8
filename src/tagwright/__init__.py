"""
tagwright: markup reformatting and in-document search for code panels

Re-indents arbitrary HTML-like markup and provides case-insensitive search
with cyclic next/previous navigation. Best-effort and lexical: no DOM, no
entity resolution, never raises on malformed input. Zero runtime dependencies.

Quick Start:
    >>> from tagwright import format, search
    >>> print(format("<div><p>Hi<br>there</p></div>"))
    <div>
      <p>
        Hi
        <br>
        there
      </p>
    </div>

    >>> search("Hello WORLD", "world")
    [Match(start=6, end=11)]

Navigation:
    >>> from tagwright import Navigator
    >>> nav = Navigator("aXaXaX")
    >>> nav.update(query="x")
    Match(start=1, end=2)
    >>> nav.previous()
    Match(start=5, end=6)

Installation:
    pip install tagwright
"""

from tagwright.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from tagwright.errors import ClipboardError, ConfigError, TagwrightError
from tagwright.formatter import Formatter, format
from tagwright.lexer import Lexer, tokenize
from tagwright.navigator import Navigator, SearchState
from tagwright.panel import CodePanel, PanelView, history_label
from tagwright.printer import Printer, PrintState, render
from tagwright.profiling import FormatAccumulator, get_format_accumulator, profiled_format
from tagwright.search import Match, offset_to_line, search
from tagwright.tokens import Token, TokenKind
from tagwright.variables import VariableCompleter, find_variables

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "format",
    "tokenize",
    "render",
    "search",
    "offset_to_line",
    # Formatting
    "Formatter",
    "Lexer",
    "Printer",
    "PrintState",
    "Token",
    "TokenKind",
    # Search
    "Match",
    "Navigator",
    "SearchState",
    # Panel
    "CodePanel",
    "PanelView",
    "history_label",
    # Template variables
    "VariableCompleter",
    "find_variables",
    # Configuration (ContextVar-based)
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
    # Profiling
    "FormatAccumulator",
    "get_format_accumulator",
    "profiled_format",
    # Errors
    "TagwrightError",
    "ConfigError",
    "ClipboardError",
]
