import pytest

from passerine.common.source import Source
from passerine.common.span import (
    FormattedSpan,
    Span,
    Spanned,
    join_spanned,
    join_spans,
)


def test_combination():
    source = Source.from_string("heck, that's awesome")
    a = Span(source, 0, 5)
    b = Span(source, 11, 2)
    assert a.combine(b) == Span(source, 0, 13)


def test_span_and_contents():
    source = Source.from_string("hello, this is some text!")
    spans = [Span(source, 0, 8), Span(source, 7, 5), Span(source, 12, 4)]
    result = Span(source, 0, 16)
    assert join_spans(spans).contents() == result.contents()


def test_empty():
    source = Source.from_string("")
    span = Span.point(source, 0)
    assert str(span) == "In ./source:1:1\n  |\n1 | \n  | ^\n"


def test_combine_is_symmetric():
    source = Source.from_string("heck, that's awesome")
    a = Span(source, 2, 3)
    b = Span(source, 9, 6)
    assert a.combine(b) == b.combine(a)


def test_combine_separate_sources():
    a = Span(Source.from_string("one"), 0, 1)
    b = Span(Source.from_string("two"), 0, 1)
    with pytest.raises(ValueError):
        a.combine(b)


def test_join_empty():
    assert join_spans([]) is None
    assert join_spanned([]) is None


def test_contents_out_of_range():
    span = Span(Source.from_string("abc"), 1, 10)
    with pytest.raises(IndexError):
        span.contents()


def test_single_line_format():
    source = Source.from_string("x = blatant { error }")
    span = Span(source, 4, 17)
    assert str(span) == (
        "In ./source:1:5\n"
        "  |\n"
        "1 | x = blatant { error }\n"
        "  |     ^^^^^^^^^^^^^^^^^\n"
    )


def test_multiline_format():
    source = Source.from_string("a\nbc\nd")
    formatted = Span(source, 0, 4).format()
    assert formatted.is_multiline()
    assert formatted.lines == ["a", "bc"]
    assert formatted.carrots() is None
    assert str(formatted) == "In ./source:1:1\n  |\n0 > a\n1 > bc\n"


def test_line_and_col():
    source = Source.from_string("ab\ncde\nf")
    span = Span(source, 0, 0)
    assert span.line(0) == 0
    assert span.line(4) == 1
    assert span.col(4) == 1
    assert span.line(7) == 2
    assert span.col(7) == 0


def test_formatted_span_helpers():
    formatted = FormattedSpan(
        path="./source", start=9, lines=["abc"], start_col=1, end_col=3
    )
    assert not formatted.is_multiline()
    assert formatted.gutter_padding() == 2
    assert formatted.carrots() == 2
    assert formatted.end() == 9


def test_spanned_map_keeps_span():
    source = Source.from_string("12")
    span = Span(source, 0, 2)
    spanned = Spanned("12", span).map(int)
    assert spanned.item == 12
    assert spanned.span == span


def test_spanned_repr():
    source = Source.from_string("x\n  y")
    spanned = Spanned(42, Span(source, 4, 1))
    assert repr(spanned) == "42 @ 2:3"


def test_join_spanned():
    source = Source.from_string("hello world")
    items = [Spanned("hello", Span(source, 0, 5)), Spanned("world", Span(source, 6, 5))]
    assert join_spanned(items) == Span(source, 0, 11)


def test_span_repr():
    span = Span(Source.from_string("hello"), 1, 3)
    assert repr(span) == "Span(contents='ell', start=1, end=4)"