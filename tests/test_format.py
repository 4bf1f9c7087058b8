"""Tests for format(): end-to-end behavior and properties."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tagwright import FormatConfig, Formatter, format, get_format_config

MARKUP = st.lists(
    st.sampled_from(
        [
            "<",
            ">",
            "/",
            "!--",
            "-->",
            " ",
            "\n",
            "\t",
            "x",
            "p",
            "b",
            "div",
            "br",
            "pre",
            "script",
            "style",
            "span",
            "=",
            "'",
        ]
    ),
    max_size=120,
).map("".join)


def _non_whitespace(s: str) -> list[str]:
    return sorted(c for c in s if not c.isspace())


class TestEndToEnd:
    """Realistic documents."""

    def test_paragraph_with_line_break(self) -> None:
        assert format("<div><p>Hi<br>there</p></div>") == (
            "<div>\n"
            "  <p>\n"
            "    Hi\n"
            "    <br>\n"
            "    there\n"
            "  </p>\n"
            "</div>"
        )

    def test_email_template(self) -> None:
        source = (
            "<html><head><title>Welcome</title>"
            "<style>\n.btn { color: red; }\n</style></head>"
            "<body><!-- header --><table><tr><td>Hi {{firstName}},</td></tr></table>"
            "<p>Click <a href='{{verificationLink}}'>here</a>.</p></body></html>"
        )
        assert format(source) == (
            "<html>\n"
            "  <head>\n"
            "    <title>\n"
            "      Welcome\n"
            "    </title>\n"
            "    <style>\n"
            ".btn { color: red; }\n"
            "    </style>\n"
            "  </head>\n"
            "  <body>\n"
            "    <!-- header -->\n"
            "    <table>\n"
            "      <tr>\n"
            "        <td>\n"
            "          Hi {{firstName}},\n"
            "        </td>\n"
            "      </tr>\n"
            "    </table>\n"
            "    <p>\n"
            "      Click\n"
            "      <a href='{{verificationLink}}'>\n"
            "      here\n"
            "      </a>\n"
            "      .\n"
            "    </p>\n"
            "  </body>\n"
            "</html>"
        )

    def test_already_indented_input_is_normalized(self) -> None:
        messy = "<ul>\n<li>One</li>\n        <li>Two</li>\n</ul>\n\n"
        assert format(messy) == "<ul>\n  <li>\n    One\n  </li>\n  <li>\n    Two\n  </li>\n</ul>"

    def test_doctype_kept(self) -> None:
        assert format("<!DOCTYPE html><html></html>") == "<!DOCTYPE html>\n<html>\n</html>"

    @pytest.mark.parametrize("source", ["", "   ", "\n\n"])
    def test_blank_input(self, source: str) -> None:
        assert format(source) == ""

    def test_plain_text(self) -> None:
        assert format("  hello  ") == "hello"


class TestConfig:
    """Per-call and context configuration."""

    def test_per_call_config(self) -> None:
        out = format("<div><p>x</p></div>", config=FormatConfig(indent="    "))
        assert out.splitlines()[1] == "    <p>"

    def test_per_call_config_does_not_leak(self) -> None:
        format("<p>x</p>", config=FormatConfig(indent="\t"))
        assert get_format_config().indent == "  "

    def test_inline_set_override(self) -> None:
        config = FormatConfig(inline_elements=frozenset({"p"}))
        assert format("<div><p>x</p></div>", config=config) == "<div>\n  <p>\n  x\n  </p>\n</div>"


class TestFormatter:
    def test_callable(self) -> None:
        fmt = Formatter(FormatConfig(indent=" "))
        assert fmt("<div><p>x</p></div>") == "<div>\n <p>\n  x\n </p>\n</div>"

    def test_default_config(self) -> None:
        assert Formatter().config == FormatConfig()

    def test_format_many(self) -> None:
        fmt = Formatter()
        assert fmt.format_many(["<p>a</p>", "", "<br>"]) == ["<p>\n  a\n</p>", "", "<br>"]


class TestProperties:
    """Properties that hold for every input."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        format(source)

    @given(MARKUP)
    @settings(max_examples=500)
    def test_idempotent(self, source: str) -> None:
        once = format(source)
        assert format(once) == once

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_idempotent_arbitrary_text(self, source: str) -> None:
        once = format(source)
        assert format(once) == once

    @given(MARKUP)
    @settings(max_examples=300)
    def test_content_preserved(self, source: str) -> None:
        """Formatting only adds or removes whitespace."""
        assert _non_whitespace(format(source)) == _non_whitespace(source)

    @given(
        st.text(
            alphabet=st.characters(exclude_characters="<>", exclude_categories=("Cs",)),
            max_size=80,
        ).filter(lambda s: s.strip())
    )
    @settings(max_examples=200)
    def test_pre_text_passthrough(self, body: str) -> None:
        """Text inside pre is emitted byte-identical, on lines of its own."""
        out = format(f"<div><pre>{body}</pre></div>")
        assert f"<pre>\n{body.strip()}\n  </pre>" in out
