"""Tests for the text utilities."""

from __future__ import annotations

import pytest

from book_pictures.errors import InputNotFoundError, InvalidPatternError, OutputWriteError
from book_pictures.text_tools import (
    read_text,
    remove_matching_lines,
    replace_enters,
    search,
    search_case_insensitive,
    split_lines,
    strip_whitespaces,
    text_length,
    write_text,
)


class TestTextLength:
    def test_counts_characters_not_bytes(self, tmp_path):
        path = tmp_path / "text.txt"
        path.write_bytes("zażółć\n".encode('utf-8'))
        assert text_length(str(path)) == 7

    def test_invalid_bytes_count_as_replacement(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_bytes(b"a\xffb")
        assert text_length(str(path)) == 3
        assert read_text(str(path)) == "a�b"

    def test_keeps_carriage_returns(self, tmp_path):
        path = tmp_path / "dos.txt"
        path.write_bytes(b"a\r\nb")
        assert text_length(str(path)) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputNotFoundError):
            text_length(str(tmp_path / "missing.txt"))


class TestTransformations:
    def test_strip_whitespaces(self):
        assert strip_whitespaces(" a b\tc\n d\r\n") == "abcd"

    def test_replace_enters(self):
        assert replace_enters("a\r\nb\nc\rd") == "a  b c d"

    def test_remove_matching_lines(self):
        lines = ["Chapter 1", "It was", "Chapter 2", "dark"]
        assert remove_matching_lines(lines, r"^Chapter \d") == ["It was", "dark"]

    def test_pattern_matches_anywhere(self):
        assert remove_matching_lines(["abc", "xyz"], "b") == ["xyz"]

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            remove_matching_lines(["abc"], "(unclosed")


class TestSplitLines:
    def test_trailing_newline(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_crlf(self):
        assert split_lines("a\r\nb") == ["a", "b"]

    def test_blank_lines_kept(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_empty(self):
        assert split_lines("") == []


class TestSearch:
    def test_case_sensitive(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."
        assert search("duct", contents) == ["safe, fast, productive."]

    def test_case_insensitive(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."
        assert search_case_insensitive("rUsT", contents) == ["Rust:", "Trust me."]

    def test_no_match(self):
        assert search("monomorphization", "Rust:\nsafe") == []


class TestWriteText:
    def test_round_trip_without_newline_translation(self, tmp_path):
        path = tmp_path / "out.txt"
        write_text(str(path), "a\r\nb")
        assert path.read_bytes() == b"a\r\nb"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(OutputWriteError):
            write_text(str(tmp_path / "missing" / "out.txt"), "x")
