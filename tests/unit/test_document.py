"""Tests for the document model and fenced span extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillcheck.scanner.document import (
    Document,
    ExcludedSpan,
    extract_excluded_spans,
    is_within,
    parse_document,
)


class TestExtractExcludedSpans:
    def test_single_block(self):
        text = "intro\n```bash\necho hi\n```\noutro"
        assert extract_excluded_spans(text) == [ExcludedSpan(1, 3)]

    def test_multiple_blocks(self):
        text = "```\na\n```\ntext\n  ```python\nb\n  ```"
        assert extract_excluded_spans(text) == [
            ExcludedSpan(0, 2),
            ExcludedSpan(4, 6),
        ]

    def test_unterminated_fence_yields_no_span(self):
        text = "```\na\n```\n```\nstill open"
        assert extract_excluded_spans(text) == [ExcludedSpan(0, 2)]

    def test_no_fences(self):
        assert extract_excluded_spans("plain\ntext") == []

    def test_inline_backticks_are_not_fences(self):
        assert extract_excluded_spans("use `ls` here\nand ``this``") == []


class TestIsWithin:
    def test_inclusive_bounds(self):
        spans = [ExcludedSpan(2, 4)]
        assert is_within(2, spans)
        assert is_within(3, spans)
        assert is_within(4, spans)
        assert not is_within(1, spans)
        assert not is_within(5, spans)

    def test_no_spans(self):
        assert not is_within(0, [])

    def test_invalid_span(self):
        with pytest.raises(ValueError):
            ExcludedSpan(5, 2)


class TestParseDocument:
    def test_parses_skill_file(self, fixtures_dir: Path):
        path = fixtures_dir / "example-skill.md"
        doc = parse_document(path)
        assert doc.path == str(path)
        assert doc.name == "example-skill"
        assert "Example Skill" in doc.content
        assert "validate all user input" in doc.content

    def test_extracts_code_blocks(self, fixtures_dir: Path):
        doc = parse_document(fixtures_dir / "example-skill.md")
        assert len(doc.excluded_spans) == 1
        span = doc.excluded_spans[0]
        assert span.end_line > span.start_line
        assert is_within(span.start_line + 1, doc.excluded_spans)
        assert not is_within(0, doc.excluded_spans)
        inner = doc.content.split("\n")[span.start_line + 1]
        assert 'echo "Hello, World!"' in inner

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(OSError):
            parse_document(tmp_path / "missing.md")

    def test_from_text(self):
        doc = Document.from_text("```\nx\n```", path="skills/demo.md")
        assert doc.name == "demo"
        assert doc.excluded_spans == (ExcludedSpan(0, 2),)
