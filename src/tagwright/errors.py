"""Exception classes for tagwright.

Formatting and searching are total over all string inputs and never raise.
These exceptions cover configuration mistakes and failures reported by
host collaborators at the panel boundary.
"""

from __future__ import annotations


class TagwrightError(Exception):
    """Base exception for all tagwright errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(TagwrightError):
    """Invalid formatting configuration.

    Raised when a FormatConfig is built with values that would make
    formatting unstable (e.g., an indent unit containing visible characters).
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending FormatConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid config field '{field}': {message}")


class ClipboardError(TagwrightError):
    """A host clipboard writer failed.

    Raised by CodePanel.copy_to(); the writer's exception is chained
    as ``__cause__``.
    """

    pass
