"""Code panel session: formatting toggle, search sync, and copy.

The panel ties the formatter and the navigator to a rendering surface.
Rendering is abstracted behind the PanelView protocol so the core stays
free of any UI toolkit and can be unit-tested with a recording fake.

Usage:
    class TextWidgetView:
        def highlight(self, start: int, end: int) -> None: ...
        def scroll_to_line(self, line: int) -> None: ...
        def show_no_results(self, visible: bool) -> None: ...

    panel = CodePanel(TextWidgetView())
    panel.load(email_html)
    panel.toggle_format()
    panel.search("unsubscribe")
    panel.next()
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from tagwright.config import FormatConfig
from tagwright.errors import ClipboardError
from tagwright.formatter import format as format_markup
from tagwright.navigator import Navigator
from tagwright.search import Match
from tagwright.utils.logger import get_logger

logger = get_logger(__name__)

PLACEHOLDER = "Generated HTML code will appear here"


class PanelView(Protocol):
    """Rendering surface driven by a CodePanel.

    Contract:
        - highlight() receives offsets into CodePanel.text
        - scroll_to_line() receives a zero-based line index
        - None of these methods are expected to raise
    """

    def highlight(self, start: int, end: int) -> None:
        """Select/highlight ``text[start:end]``."""
        ...

    def scroll_to_line(self, line: int) -> None:
        """Scroll so that zero-based ``line`` is visible."""
        ...

    def show_no_results(self, visible: bool) -> None:
        """Show or hide the "no results" indicator."""
        ...


class CodePanel:
    """One code-viewing panel session.

    Holds the raw markup, whether it is displayed formatted, and the
    search navigator over the displayed text. Every navigation pushes the
    active match to the view: highlight first, then scroll.

    """

    __slots__ = (
        "_view",
        "_config",
        "_markup",
        "_formatted",  # Display formatted text instead of raw markup
        "_formatted_cache",  # format() result for _markup, built lazily
        "_navigator",
        "_searching",  # A search is open and follows content changes
    )

    def __init__(self, view: PanelView | None = None, *, config: FormatConfig | None = None) -> None:
        self._view = view
        self._config = config
        self._markup = ""
        self._formatted = False
        self._formatted_cache: str | None = None
        self._navigator = Navigator()
        self._searching = False

    # =========================================================================
    # Content
    # =========================================================================

    @property
    def markup(self) -> str:
        return self._markup

    @property
    def formatted(self) -> bool:
        return self._formatted

    @property
    def text(self) -> str:
        """The displayed text: formatted markup when formatting is on."""
        if not self._formatted:
            return self._markup
        if self._formatted_cache is None:
            self._formatted_cache = format_markup(self._markup, config=self._config)
        return self._formatted_cache

    @property
    def placeholder(self) -> str:
        """Message shown instead of code when there is no markup."""
        return "" if self._markup else PLACEHOLDER

    def load(self, markup: str) -> None:
        """Replace the panel content, re-running any active search."""
        self._markup = markup
        self._formatted_cache = None
        self._refresh_search()

    def toggle_format(self) -> bool:
        """Switch between raw and formatted display. Returns the new state."""
        self._formatted = not self._formatted
        self._refresh_search()
        return self._formatted

    def line_numbers(self) -> list[int]:
        """One-based line numbers for the displayed text (empty without content)."""
        text = self.text
        if not text:
            return []
        return list(range(1, text.count("\n") + 2))

    # =========================================================================
    # Search
    # =========================================================================

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    @property
    def status(self) -> str:
        return self._navigator.status

    def search(self, query: str) -> Match | None:
        """Search the displayed text and show the active match.

        A blank query closes the search.
        """
        if not query.strip():
            self.close_search()
            return None
        self._searching = True
        match = self._navigator.update(subject=self.text, query=query)
        self._sync(match)
        return match

    def next(self) -> Match | None:
        match = self._navigator.next()
        if match is not None:
            self._sync(match)
        return match

    def previous(self) -> Match | None:
        match = self._navigator.previous()
        if match is not None:
            self._sync(match)
        return match

    def close_search(self) -> None:
        """Discard the search state and hide the no-results indicator."""
        self._navigator.reset()
        self._searching = False
        if self._view is not None:
            self._view.show_no_results(False)

    def _refresh_search(self) -> None:
        if not self._searching:
            return
        self._sync(self._navigator.update(subject=self.text))

    def _sync(self, match: Match | None) -> None:
        """Push the active match (or its absence) to the view."""
        view = self._view
        if view is None:
            return
        if match is None:
            view.show_no_results(True)
            return
        view.show_no_results(False)
        view.highlight(match.start, match.end)
        line = self._navigator.scroll_line
        if line is not None:
            view.scroll_to_line(line)

    # =========================================================================
    # Clipboard
    # =========================================================================

    def copy_text(self) -> str:
        """Text to place on the clipboard (the displayed text)."""
        return self.text

    def copy_to(self, writer: Callable[[str], object]) -> bool:
        """Hand the displayed text to a host clipboard writer.

        Args:
            writer: Host callable that stores text on the clipboard

        Returns:
            False if there was nothing to copy, True otherwise

        Raises:
            ClipboardError: If the writer fails
        """
        text = self.copy_text()
        if not text:
            return False
        try:
            writer(text)
        except Exception as e:
            logger.debug("clipboard write failed", exc_info=e)
            raise ClipboardError(f"Clipboard write failed: {e}") from e
        return True


def history_label(index: int | None, total: int | None) -> str:
    """Label for the generation-history counter, e.g. ``"History: 2/5"``.

    Returns an empty string when there is no history; ``index`` defaults
    to the latest entry.
    """
    if total is None or total <= 0:
        return ""
    return f"History: {index if index is not None else total}/{total}"


__all__ = ["PLACEHOLDER", "CodePanel", "PanelView", "history_label"]
