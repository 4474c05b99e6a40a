"""Spans over source text, used for error reporting."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from passerine.common.source import Source

T = TypeVar("T")
B = TypeVar("B")


@dataclass(frozen=True, repr=False)
class Span:
    """A section of a ``Source``, given by an offset and a length."""

    source: Source
    offset: int
    length: int

    @classmethod
    def point(cls, source: Source, offset: int) -> Span:
        """A zero-length span at ``offset``."""
        return cls(source, offset, 0)

    @property
    def end(self) -> int:
        """Index just past the end of the span."""
        return self.offset + self.length

    def combine(self, other: Span) -> Span:
        """The smallest span covering both ``self`` and ``other``."""
        if self.source != other.source:
            raise ValueError("Can't combine two Spans with separate sources")
        offset = min(self.offset, other.offset)
        end = max(self.end, other.end)
        return Span(self.source, offset, end - offset)

    def contents(self) -> str:
        """The text the span covers."""
        if self.offset < 0 or self.end > len(self.source.contents):
            raise IndexError(
                f"span {self.offset}..{self.end} is outside its source"
            )
        return self.source.contents[self.offset:self.end]

    def lines(self) -> list[str]:
        """The full source lines the span touches."""
        all_lines = self.source.contents.split("\n")
        start_line = self.line(self.offset)
        end_line = self.line(self.end)
        return all_lines[start_line:end_line + 1]

    @property
    def path(self) -> str:
        return self.source.path

    def line(self, index: int) -> int:
        """Zero-based line number of ``index``."""
        return self.source.contents[:index].count("\n")

    def col(self, index: int) -> int:
        """Zero-based column of ``index`` within its line."""
        return len(self.source.contents[:index].rsplit("\n", 1)[-1])

    def format(self) -> FormattedSpan:
        return FormattedSpan(
            path=self.path,
            start=self.line(self.offset),
            lines=self.lines(),
            start_col=self.col(self.offset),
            end_col=self.col(self.end),
        )

    def __repr__(self) -> str:
        return (
            f"Span(contents={self.contents()!r}, "
            f"start={self.offset}, end={self.end})"
        )

    def __str__(self) -> str:
        return str(self.format())


def join_spans(spans: Iterable[Span]) -> Span | None:
    """Combine spans into one covering all of them; ``None`` if empty."""
    remaining = list(spans)
    if not remaining:
        return None
    combined = remaining.pop()
    while remaining:
        combined = combined.combine(remaining.pop())
    return combined


@dataclass(frozen=True)
class FormattedSpan:
    """Where a span sits relative to the lines of its source."""

    path: str
    start: int
    lines: list[str]
    start_col: int
    end_col: int

    def is_multiline(self) -> bool:
        return len(self.lines) != 1

    def end(self) -> int:
        return (self.start - 1) + len(self.lines)

    def gutter_padding(self) -> int:
        return len(str(self.start + 1))

    def carrots(self) -> int | None:
        """Number of carets under a single-line span, else ``None``."""
        if len(self.lines) == 1:
            return self.end_col - self.start_col
        return None

    def __str__(self) -> str:
        pad = self.gutter_padding()
        out = [
            f"In {self.path}:{self.start + 1}:{self.start_col + 1}\n",
            f"{' ' * pad} |\n",
        ]
        if not self.is_multiline():
            carets = max(self.carrots() or 0, 1)
            out.append(f"{self.start + 1} | {self.lines[0]}\n")
            out.append(f"{' ' * pad} | {' ' * self.start_col}{'^' * carets}\n")
        else:
            for index, line in enumerate(self.lines):
                line_no = str(self.start + index)
                padding = " " * (pad - len(line_no))
                out.append(f"{line_no}{padding} > {line}\n")
        return "".join(out)


@dataclass(frozen=True)
class Spanned(Generic[T]):
    """An item tagged with the span it was parsed from."""

    item: T
    span: Span

    def map(self, func: Callable[[T], B]) -> Spanned[B]:
        """Apply ``func`` to the item, keeping the span."""
        return Spanned(func(self.item), self.span)

    def __repr__(self) -> str:
        span = self.span
        return (
            f"{self.item!r} @ {span.line(span.offset) + 1}:"
            f"{span.col(span.offset) + 1}"
        )


def join_spanned(items: Iterable[Spanned[T]]) -> Span | None:
    """Join the spans of several spanned items."""
    return join_spans(item.span for item in items)