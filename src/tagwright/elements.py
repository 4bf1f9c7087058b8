"""Element classification tables.

Static, read-only sets used by the lexer and printer to decide how an
element is scanned and indented. Override them per call through
``FormatConfig`` rather than mutating these.
"""

# Elements that never have children or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements that run inside a line of text and never change indentation
INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "big",
        "cite",
        "code",
        "data",
        "dfn",
        "em",
        "font",
        "i",
        "kbd",
        "label",
        "mark",
        "q",
        "s",
        "samp",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "time",
        "tt",
        "u",
        "var",
    }
)

# Elements whose text payload is emitted verbatim
PRESERVE_CONTENT_ELEMENTS = frozenset({"pre", "script", "style", "textarea"})

# Elements whose body is not scanned for tags at all
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "textarea"})
