"""Document model — a scanned text unit and its fenced code spans."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

FENCE = "```"


@dataclass(frozen=True)
class ExcludedSpan:
    """An inclusive, 0-indexed line range such as a fenced code block."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line > self.end_line:
            raise ValueError(
                f"Span start {self.start_line} is after end {self.end_line}"
            )

    def contains(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


@dataclass(frozen=True)
class Document:
    """A skill descriptor loaded for scanning."""

    path: str
    name: str
    content: str
    excluded_spans: tuple[ExcludedSpan, ...] = ()

    @classmethod
    def from_text(cls, content: str, path: str = "<memory>") -> Document:
        """Build a document from an in-memory string."""
        return cls(
            path=path,
            name=Path(path).stem,
            content=content,
            excluded_spans=tuple(extract_excluded_spans(content)),
        )


def extract_excluded_spans(text: str) -> list[ExcludedSpan]:
    """Return the line spans of fenced code blocks.

    A line whose stripped text starts with the fence opens a block and the
    next such line closes it. An opening fence without a closing one does
    not produce a span.
    """
    spans: list[ExcludedSpan] = []
    start: int | None = None

    for index, line in enumerate(text.split("\n")):
        if not line.strip().startswith(FENCE):
            continue
        if start is None:
            start = index
        else:
            spans.append(ExcludedSpan(start, index))
            start = None

    return spans


def is_within(line: int, spans: Iterable[ExcludedSpan]) -> bool:
    """Check if a line falls inside any of the spans."""
    return any(span.contains(line) for span in spans)


def parse_document(path: str | Path) -> Document:
    """Read a file into a Document. Raises OSError if it cannot be read."""
    path = Path(path)
    content = path.read_text(encoding="utf-8", errors="ignore")
    return Document(
        path=str(path),
        name=path.stem,
        content=content,
        excluded_spans=tuple(extract_excluded_spans(content)),
    )
