"""Tests for process_srt and apply_operations."""

import pytest

from srt_tools.config import SrtToolsConfig
from srt_tools.operations import apply_operations, process_srt
from srt_tools.parser import parse_srt


SAMPLE = "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n2\n00:00:03,000 --> 00:00:04,000\nWorld\n"

WITH_COMMENT = "Subtitles by nobody\nVersion 2\n\n" + SAMPLE


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("SRT_TOOLS_REMOVE_EXTRA_TEXT", raising=False)


class TestApplyOperations:

    def test_offset_and_renumber(self):
        doc = parse_srt(SAMPLE)
        config = SrtToolsConfig(apply_offset=True, offset_ms=-5000, apply_renumber=True, renumber_start=5)
        apply_operations(doc, config)
        assert [e.start.milliseconds for e in doc] == [0, 2000]
        assert [e.index for e in doc] == [5, 6]

    def test_disabled_operations_ignored(self):
        doc = parse_srt(SAMPLE)
        config = SrtToolsConfig(apply_offset=False, offset_ms=1000, apply_renumber=False, renumber_start=9)
        apply_operations(doc, config)
        assert doc.to_srt() == SAMPLE

    def test_non_positive_renumber_start_skipped(self):
        doc = parse_srt(SAMPLE)
        doc[0].index = 7
        apply_operations(doc, SrtToolsConfig(apply_renumber=True, renumber_start=0))
        assert doc[0].index == 7


class TestProcessSrt:

    def test_offset(self):
        result = process_srt(SAMPLE, SrtToolsConfig(apply_offset=True, offset_ms=1000))
        assert result.valid
        assert result.entry_count == 2
        assert "00:00:02,000 --> 00:00:03,000" in result.text
        assert "00:00:04,000 --> 00:00:05,000" in result.text

    def test_keeps_comment_by_default(self):
        result = process_srt(WITH_COMMENT, SrtToolsConfig(apply_renumber=True, renumber_start=1))
        assert result.text == WITH_COMMENT

    def test_strip_extraneous(self):
        result = process_srt(WITH_COMMENT, SrtToolsConfig(strip_extraneous=True))
        assert result.text == SAMPLE

    def test_strip_from_environment(self, monkeypatch):
        monkeypatch.setenv("SRT_TOOLS_REMOVE_EXTRA_TEXT", "1")
        result = process_srt(WITH_COMMENT, SrtToolsConfig())
        assert result.text == SAMPLE

    def test_invalid_input_returned_unchanged(self):
        content = "This is not a subtitle file\n"
        result = process_srt(content, SrtToolsConfig(apply_offset=True, offset_ms=100))
        assert not result.valid
        assert result.entry_count == 0
        assert result.text == content

    def test_crlf_input(self):
        result = process_srt(SAMPLE.replace("\n", "\r\n"), SrtToolsConfig(apply_renumber=True))
        assert result.text == SAMPLE
