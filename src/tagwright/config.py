"""ContextVar-based format configuration for tagwright.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The element classification tables live here as injected configuration,
so the lexer and printer carry no hidden shared mutable state.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Per call
    from tagwright import format
    formatted = format(markup, config=FormatConfig(indent="\\t"))

    # Or for a block of calls
    with format_config_context(FormatConfig(indent="    ")):
        formatted = format(markup)

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from tagwright.elements import (
    INLINE_ELEMENTS,
    PRESERVE_CONTENT_ELEMENTS,
    RAW_TEXT_ELEMENTS,
    VOID_ELEMENTS,
)
from tagwright.errors import ConfigError

_ELEMENT_FIELDS = (
    "void_elements",
    "inline_elements",
    "preserve_elements",
    "raw_text_elements",
)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).
    Element sets are normalized to lower-cased frozensets on creation.

    Attributes:
        indent: Indent unit repeated once per nesting level (spaces/tabs only)
        void_elements: Elements that never open an indent level
        inline_elements: Elements that never change the indent level
        preserve_elements: Elements whose text payload is emitted verbatim
        raw_text_elements: Elements whose body is not scanned for tags

    """

    indent: str = "  "
    void_elements: frozenset[str] = VOID_ELEMENTS
    inline_elements: frozenset[str] = INLINE_ELEMENTS
    preserve_elements: frozenset[str] = PRESERVE_CONTENT_ELEMENTS
    raw_text_elements: frozenset[str] = RAW_TEXT_ELEMENTS

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str) or self.indent.strip(" \t"):
            raise ConfigError("indent", f"expected spaces or tabs, got {self.indent!r}")
        for name in _ELEMENT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                raise ConfigError(name, "expected a collection of element names, got a string")
            try:
                normalized = _normalize(value)
            except TypeError as e:
                raise ConfigError(name, f"expected a collection of element names, got {value!r}") from e
            # Frozen: normalize through object.__setattr__
            object.__setattr__(self, name, normalized)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Useful when config comes from external sources (JSON settings,
        panel preferences). Only includes keys that are valid FormatConfig
        fields; unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Raises:
            ConfigError: If a value is invalid.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "indent": "    ",
            ...     "inline_elements": ["span", "em"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.inline_elements)
            ['em', 'span']

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def _normalize(names: Iterable[str]) -> frozenset[str]:
    """Lower-case element names into a frozenset.

    Raises:
        TypeError: If ``names`` is not iterable or holds a non-string
    """
    normalized = set()
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"element name must be a string, got {name!r}")
        normalized.add(name.lower())
    return frozenset(normalized)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

# Thread-local configuration via ContextVar
_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (thread-local)."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: FormatConfig to use within the context.

    Yields:
        None

    Example:
        >>> with format_config_context(FormatConfig(indent="\\t")):
        ...     out = format("<div><p>x</p></div>")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
]
