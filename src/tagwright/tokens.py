"""Token and TokenKind definitions for the tagwright lexer.

The lexer produces a flat list of Token objects that the printer consumes.
Each Token has a kind, its raw text, and the offsets of that text in the
source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Lexical unit kinds produced by the lexer."""

    TAG = auto()  # <div>, </div>, <br/>
    TEXT = auto()  # Trimmed text between tags
    COMMENT = auto()  # <!-- ... -->


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        raw: Exact source text for tags and comments; trimmed content for text
        start: Absolute start offset of ``raw`` in the source
        end: Absolute end offset of ``raw`` in the source
        name: Lower-cased element name (tags only)
        is_closing: True if the tag begins with ``</``
        is_self_closing: True if the tag ends with ``/>`` or names a void element

    Invariant:
        ``source[token.start:token.end] == token.raw`` for every token.

    """

    kind: TokenKind
    raw: str
    start: int = 0
    end: int = 0
    name: str = ""
    is_closing: bool = False
    is_self_closing: bool = False

    @property
    def is_tag(self) -> bool:
        return self.kind is TokenKind.TAG

    @property
    def is_opening(self) -> bool:
        """True for an opening tag that can hold children."""
        return self.kind is TokenKind.TAG and not self.is_closing and not self.is_self_closing

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.raw
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.start}:{self.end})"
