"""Case-insensitive substring search over displayed text.

Finds every occurrence of a query in a subject string and maps offsets
to line numbers for scroll positioning.

Overlapping matches:
    After a hit at ``start`` the scan resumes at ``start + 1``, not at the
    end of the hit, so repeated patterns report overlapping matches:

    >>> [(m.start, m.end) for m in search("aaa", "aa")]
    [(0, 2), (1, 3)]

"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Match:
    """A half-open ``[start, end)`` range in the search subject.

    Invariant: ``0 <= start < end <= len(subject)``.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def text(self, subject: str) -> str:
        """Return the matched slice of ``subject``."""
        return subject[self.start : self.end]


def search(subject: str, query: str) -> list[Match]:
    """Find all case-insensitive occurrences of ``query`` in ``subject``.

    Args:
        subject: Text to search (offsets refer to this exact string)
        query: Substring to find; blank queries match nothing

    Returns:
        Matches in ascending order of start, possibly overlapping

    Example:
        >>> search("Hello WORLD", "world")
        [Match(start=6, end=11)]
    """
    if not subject or not query.strip():
        return []

    # IGNORECASE folds per character: offsets stay aligned with the
    # original subject (str.lower() can change string length).
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    matches: list[Match] = []
    pos = 0
    while True:
        found = pattern.search(subject, pos)
        if found is None:
            break
        matches.append(Match(found.start(), found.end()))
        pos = found.start() + 1
    return matches


def offset_to_line(subject: str, offset: int) -> int:
    """Return the zero-based line index containing ``offset``.

    Counts line breaks in ``subject[:offset]``. Out-of-range offsets
    are clamped into ``[0, len(subject)]``.
    """
    offset = min(max(offset, 0), len(subject))
    return subject.count("\n", 0, offset)


__all__ = ["Match", "offset_to_line", "search"]
