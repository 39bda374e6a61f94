"""Property-based tests for parse/compile round trips.

Properties:
- Compiling generated content and parsing it back yields the same content
- Compiled canonical text is a fixed point of compile(parse(...))
- Fragment spans always tile the source
- Arbitrary input either parses or raises StringSyntaxError, nothing else
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from strcmdlex.diagnostics import StringSyntaxError
from strcmdlex.syntax import compile, parse  # noqa: A004
from strcmdlex.syntax.ast import Fragment, FragmentContent, ParsedString, Span
from strcmdlex.syntax.serializer import compile_content
from tests.helpers.fragment_checks import assert_spans_contiguous, contents
from tests.strategies import choice_lists, command_contents, content_sequences


def _render(items: list[FragmentContent]) -> str:
    return "".join(compile_content(item) for item in items)


class TestRoundTrip:
    """compile then parse preserves content."""

    @given(content_sequences())
    def test_content_survives_round_trip(self, items: list[FragmentContent]) -> None:
        """Parsing compiled content gives the same content back."""
        source = _render(items)
        parsed = parse(source)
        assert contents(parsed) == items
        event(f"fragments={len(items)}")

    @given(content_sequences())
    def test_canonical_text_is_fixed_point(self, items: list[FragmentContent]) -> None:
        """compile(parse(s)) == s for canonically formatted s."""
        source = _render(items)
        assert compile(parse(source)) == source

    @given(command_contents)
    def test_generated_commands_validate(self, content: FragmentContent) -> None:
        """Generated commands pass compile-time validation."""
        parsed = ParsedString(fragments=(Fragment(content, Span(0, 0)),))
        assert compile(parsed, validate=True) == compile_content(content)

    @given(choice_lists())
    def test_choice_count_preserved(self, content: FragmentContent) -> None:
        """Every choice, empty ones included, survives as its own token."""
        reparsed = parse(compile_content(content)).choice_lists()
        assert len(reparsed) == 1
        assert reparsed[0] == content


class TestIdempotence:
    """Canonicalization is stable."""

    @given(st.text(alphabet="{}PGN \t\"ab:.", max_size=30))
    @example('{G = n}{P\t1  a ""}')
    def test_compile_is_idempotent(self, source: str) -> None:
        """Re-parsing compiled output yields equal content and the same text."""
        try:
            parsed = parse(source)
        except StringSyntaxError:
            event("rejected")
            return
        compiled = compile(parsed)
        reparsed = parse(compiled)
        assert contents(reparsed) == contents(parsed)
        assert compile(reparsed) == compiled


class TestSpans:
    """Span bookkeeping on successful parses."""

    @given(content_sequences())
    def test_spans_contiguous(self, items: list[FragmentContent]) -> None:
        source = _render(items)
        assert_spans_contiguous(parse(source), source)

    @given(st.text(alphabet=st.characters(blacklist_characters="{"), max_size=40))
    def test_brace_free_text_is_one_fragment(self, source: str) -> None:
        """Text without opening braces is a single fragment, or none when empty."""
        parsed = parse(source)
        assert len(parsed) == (1 if source else 0)
        assert_spans_contiguous(parsed, source)


@pytest.mark.fuzz
class TestArbitraryInput:
    """Malformed input only ever raises the typed syntax error."""

    @given(st.text(max_size=200))
    @settings(max_examples=2000)
    def test_only_syntax_errors(self, source: str) -> None:
        try:
            parsed = parse(source)
        except StringSyntaxError as error:
            assert 0 <= error.pos_begin < len(source)
            if error.pos_end is not None:
                assert error.pos_begin < error.pos_end <= len(source)
            return
        assert_spans_contiguous(parsed, source)
