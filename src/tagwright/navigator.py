"""Cyclic cursor over search matches.

The Navigator owns the SearchState of one panel session: the subject being
searched, the query, the match list, and which match is active. Retyping
keeps the cursor as close as possible to where the user was instead of
jumping back to the first match.

Thread Safety:
Navigator instances belong to one panel session and are not shared.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagwright.search import Match, offset_to_line, search
from tagwright.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class SearchState:
    """Query, ordered matches, and the active match index.

    ``active_index`` is meaningful only while ``matches`` is non-empty.
    """

    query: str = ""
    matches: list[Match] = field(default_factory=list)
    active_index: int = 0


class Navigator:
    """Stateful next/previous navigation over the matches of a query.

    Usage:
            >>> nav = Navigator("aXaXaX")
            >>> nav.update(query="x")
            Match(start=1, end=2)
            >>> nav.next()
            Match(start=3, end=4)
            >>> nav.status
            '2 of 3'

    """

    __slots__ = ("_subject", "_state")

    def __init__(self, subject: str = "") -> None:
        self._subject = subject
        self._state = SearchState()

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def matches(self) -> list[Match]:
        return self._state.matches

    @property
    def active_index(self) -> int:
        return self._state.active_index

    @property
    def active_match(self) -> Match | None:
        """The match under the cursor, or None when there are no matches."""
        state = self._state
        if not state.matches:
            return None
        return state.matches[state.active_index]

    @property
    def scroll_line(self) -> int | None:
        """Zero-based line of the active match, for scrolling it into view."""
        match = self.active_match
        if match is None:
            return None
        return offset_to_line(self._subject, match.start)

    @property
    def status(self) -> str:
        """Result counter text: ``"2 of 5"``, ``"No results"``, or ``""`` without a query."""
        state = self._state
        if not state.query.strip():
            return ""
        if not state.matches:
            return "No results"
        return f"{state.active_index + 1} of {len(state.matches)}"

    def update(self, *, subject: str | None = None, query: str | None = None) -> Match | None:
        """Recompute matches after the subject or query changed.

        The active index is clamped into the new match list rather than
        reset, so incremental retyping keeps the user's position.

        Args:
            subject: New text to search (unchanged if None)
            query: New query (unchanged if None)

        Returns:
            The active match after the update, or None
        """
        if subject is not None:
            self._subject = subject
        state = self._state
        if query is not None:
            state.query = query

        state.matches = search(self._subject, state.query)
        if state.matches:
            state.active_index = min(state.active_index, len(state.matches) - 1)
        else:
            state.active_index = 0

        logger.debug("query %r: %d matches", state.query, len(state.matches))
        return self.active_match

    def next(self) -> Match | None:
        """Advance to the next match, wrapping to the first.

        Returns:
            The new active match, or None (no-op) when there are no matches
        """
        state = self._state
        if not state.matches:
            return None
        state.active_index = (state.active_index + 1) % len(state.matches)
        return state.matches[state.active_index]

    def previous(self) -> Match | None:
        """Step back to the previous match, wrapping to the last.

        Returns:
            The new active match, or None (no-op) when there are no matches
        """
        state = self._state
        if not state.matches:
            return None
        count = len(state.matches)
        state.active_index = (state.active_index - 1 + count) % count
        return state.matches[state.active_index]

    def reset(self) -> None:
        """Clear the query and matches."""
        self._state = SearchState()
