"""Opt-in profiling for format() calls.

While a profiled_format() block is active, every format() call reports
how long it spent lexing and printing, plus how much markup it consumed.
Time spent outside format() (host code inside the block) is not counted
in ``format_ms``; ``total_ms`` is the wall time of the whole block.

Zero overhead when disabled (get_format_accumulator() returns None and
format() skips the timers).

Example:
    from tagwright import format
    from tagwright.profiling import profiled_format

    with profiled_format() as metrics:
        format("<div><p>Hi</p></div>")

    print(metrics.summary())
    # {"total_ms": 0.31, "format_ms": 0.05, "lex_ms": 0.03, "print_ms": 0.02,
    #  "mean_format_ms": 0.05, "format_calls": 1, "source_length": 20,
    #  "largest_source": 20, "token_count": 5}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class FormatAccumulator:
    """Accumulated metrics across format() calls.

    Attributes:
        start_time: perf_counter() when the profiled block was entered.
        format_calls: Number of format() calls recorded.
        source_length: Total characters of markup formatted.
        largest_source: Length of the largest single document.
        token_count: Total tokens produced by the lexer.
        lex_ms: Time spent tokenizing, in milliseconds.
        print_ms: Time spent printing, in milliseconds.

    """

    start_time: float = field(default_factory=perf_counter)
    format_calls: int = 0
    source_length: int = 0
    largest_source: int = 0
    token_count: int = 0
    lex_ms: float = 0.0
    print_ms: float = 0.0

    def record_format(
        self,
        source_length: int,
        token_count: int,
        *,
        lex_ms: float = 0.0,
        print_ms: float = 0.0,
    ) -> None:
        """Record one format() call and the time its two phases took."""
        self.format_calls += 1
        self.source_length += source_length
        self.largest_source = max(self.largest_source, source_length)
        self.token_count += token_count
        self.lex_ms += lex_ms
        self.print_ms += print_ms

    @property
    def format_ms(self) -> float:
        """Time spent inside format() calls, in milliseconds."""
        return self.lex_ms + self.print_ms

    @property
    def mean_format_ms(self) -> float:
        if not self.format_calls:
            return 0.0
        return self.format_ms / self.format_calls

    @property
    def total_duration_ms(self) -> float:
        """Wall time since the profiled block was entered, in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of format metrics, times rounded to 0.01 ms."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "format_ms": round(self.format_ms, 2),
            "lex_ms": round(self.lex_ms, 2),
            "print_ms": round(self.print_ms, 2),
            "mean_format_ms": round(self.mean_format_ms, 2),
            "format_calls": self.format_calls,
            "source_length": self.source_length,
            "largest_source": self.largest_source,
            "token_count": self.token_count,
        }


_accumulator: ContextVar[FormatAccumulator | None] = ContextVar(
    "format_accumulator",
    default=None,
)


def get_format_accumulator() -> FormatAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_format() -> Iterator[FormatAccumulator]:
    """Collect format() metrics for the duration of the with block.

    Blocks nest: an inner block gets its own accumulator and the outer
    one is restored on exit.

    Yields:
        FormatAccumulator populated by format() calls in this context.

    """
    acc = FormatAccumulator()
    token: Token[FormatAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
