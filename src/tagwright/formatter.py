"""Formatter façade: tokenize + print in one call.

format() is total over all strings and idempotent:
``format(format(x)) == format(x)``.
"""

from __future__ import annotations

from time import perf_counter

from tagwright.config import FormatConfig, format_config_context, get_format_config
from tagwright.lexer import tokenize
from tagwright.printer import Printer
from tagwright.profiling import get_format_accumulator
from tagwright.utils.logger import get_logger

logger = get_logger(__name__)


def format(markup: str, *, config: FormatConfig | None = None) -> str:
    """Re-render markup with canonical indentation.

    Args:
        markup: Arbitrary HTML-like markup
        config: Indent unit and classification tables
            (uses the active context config if None)

    Returns:
        Formatted markup; whitespace-only text runs are dropped

    Example:
        >>> print(format("<ul><li>One</li><li>Two</li></ul>"))
        <ul>
          <li>
            One
          </li>
          <li>
            Two
          </li>
        </ul>
    """
    if config is None:
        return _format(markup, get_format_config())
    with format_config_context(config):
        return _format(markup, config)


def _format(markup: str, config: FormatConfig) -> str:
    acc = get_format_accumulator()
    if acc is None:
        tokens = tokenize(markup, config=config)
        result = Printer(config).print(tokens)
    else:
        started = perf_counter()
        tokens = tokenize(markup, config=config)
        lexed = perf_counter()
        result = Printer(config).print(tokens)
        printed = perf_counter()
        acc.record_format(
            source_length=len(markup),
            token_count=len(tokens),
            lex_ms=(lexed - started) * 1000,
            print_ms=(printed - lexed) * 1000,
        )

    logger.debug("formatted %d chars into %d tokens", len(markup), len(tokens))
    return result


class Formatter:
    """Reusable formatter bound to one configuration.

    Usage:
        >>> fmt = Formatter(FormatConfig(indent="    "))
        >>> fmt("<div><p>Hi</p></div>").splitlines()[1]
        '    <p>'

    Thread Safety:
        Holds only an immutable FormatConfig. Safe to share between threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config if config is not None else FormatConfig()

    @property
    def config(self) -> FormatConfig:
        return self._config

    def __call__(self, markup: str) -> str:
        return format(markup, config=self._config)

    def format_many(self, sources: list[str]) -> list[str]:
        """Format several documents with one config set/reset."""
        with format_config_context(self._config):
            return [_format(source, self._config) for source in sources]
