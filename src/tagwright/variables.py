"""Template variable detection and autocomplete.

Email templates reference per-recipient values as ``{{variableName}}``.
This module finds those references and drives the completion popup that
opens while the user is typing one.

Example:
    >>> detect_variable_prefix("Hi {{first", 10)
    'first'
    >>> insert_variable("Hi {{first", 10, "firstName")
    ('Hi {{firstName}}', 16)
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from tagwright.search import Match

COMMON_VARIABLES: tuple[str, ...] = (
    "firstName",
    "lastName",
    "email",
    "name",
    "unsubscribeLink",
    "verificationLink",
    "resetPasswordLink",
    "companyName",
    "websiteUrl",
    "supportEmail",
)

_VARIABLE_RE = re.compile(r"\{\{(\w+)\}\}", re.ASCII)
_OPEN_VARIABLE_RE = re.compile(r"\{\{(\w*)$", re.ASCII)


def find_variables(text: str) -> list[Match]:
    """Return the span of every complete ``{{name}}`` reference in ``text``."""
    return [Match(m.start(), m.end()) for m in _VARIABLE_RE.finditer(text)]


def detect_variable_prefix(text: str, cursor: int) -> str | None:
    """Return the partial name typed after an unclosed ``{{`` at the cursor.

    Returns:
        The typed prefix (possibly empty), or None if the cursor is not
        inside an opening ``{{``.
    """
    found = _OPEN_VARIABLE_RE.search(text[:cursor])
    return found.group(1) if found else None


def filter_variables(prefix: str, variables: Sequence[str] = COMMON_VARIABLES) -> list[str]:
    """Variables starting with ``prefix`` (case-insensitive), in original order."""
    needle = prefix.lower()
    return [v for v in variables if v.lower().startswith(needle)]


def insert_variable(text: str, cursor: int, variable: str) -> tuple[str, int]:
    """Complete the ``{{prefix`` before the cursor to ``{{variable}}``.

    Returns:
        ``(new_text, new_cursor)`` with the cursor after the closing braces.
        Input is returned unchanged when no ``{{`` is open at the cursor.
    """
    found = _OPEN_VARIABLE_RE.search(text[:cursor])
    if found is None:
        return text, cursor
    start = found.start()
    new_text = f"{text[:start]}{{{{{variable}}}}}{text[cursor:]}"
    return new_text, start + len(variable) + 4


class VariableCompleter:
    """Selection state of the variable autocomplete popup.

    Arrow keys move the selection with wraparound; accept() inserts the
    selected variable.

    """

    __slots__ = ("_variables", "_options", "_selected", "_visible")

    def __init__(self, variables: Sequence[str] = COMMON_VARIABLES) -> None:
        self._variables = tuple(variables)
        self._options: list[str] = []
        self._selected = 0
        self._visible = False

    @property
    def visible(self) -> bool:
        """True while the popup has options to show."""
        return self._visible and bool(self._options)

    @property
    def options(self) -> list[str]:
        return list(self._options)

    @property
    def selected(self) -> str | None:
        if not self.visible:
            return None
        return self._options[self._selected]

    def update(self, text: str, cursor: int) -> bool:
        """Refresh options after an edit. Returns True if the popup is visible."""
        prefix = detect_variable_prefix(text, cursor)
        if prefix is None:
            self.dismiss()
            return False
        self._options = filter_variables(prefix, self._variables)
        self._selected = 0
        self._visible = True
        return self.visible

    def move_down(self) -> None:
        if self.visible:
            self._selected = (self._selected + 1) % len(self._options)

    def move_up(self) -> None:
        if self.visible:
            self._selected = (self._selected - 1) % len(self._options)

    def accept(self, text: str, cursor: int) -> tuple[str, int]:
        """Insert the selected variable and close the popup."""
        variable = self.selected
        self.dismiss()
        if variable is None:
            return text, cursor
        return insert_variable(text, cursor, variable)

    def dismiss(self) -> None:
        self._visible = False
        self._options = []
        self._selected = 0


__all__ = [
    "COMMON_VARIABLES",
    "VariableCompleter",
    "detect_variable_prefix",
    "filter_variables",
    "find_variables",
    "insert_variable",
]
