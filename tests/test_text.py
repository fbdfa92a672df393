"""Tests for the string utilities."""

import pytest

from cxxtool.exceptions import InjectRangeError, SubstitutionError
from cxxtool.text import (
    CXX_SOURCE_EXTENSIONS,
    apply_indentation,
    format_table,
    inject,
    is_cxx_header_file,
    is_cxx_source_file,
    match_extension,
    parse_cxx_comment,
    remove_indentation,
    remove_lines,
    substitute_variables,
)


class TestExtensions:
    def test_match_extension_is_case_insensitive(self):
        assert match_extension("Foo.CPP", CXX_SOURCE_EXTENSIONS) == ".cpp"

    def test_match_extension_single(self):
        assert match_extension("foo.inc", ".inc") == ".inc"
        assert match_extension("foo.txt", ".inc") is None

    @pytest.mark.parametrize("name", ["a.c", "a.cc", "a.cpp", "a.cxx", "a.m", "a.mm"])
    def test_source_files(self, name):
        assert is_cxx_source_file(name)
        assert not is_cxx_header_file(name)

    @pytest.mark.parametrize("name", ["a.h", "a.hh", "a.hpp", "a.hxx", "a.inc"])
    def test_header_files(self, name):
        assert is_cxx_header_file(name)
        assert not is_cxx_source_file(name)

    def test_other_files(self):
        assert not is_cxx_source_file("README.md")
        assert not is_cxx_header_file("Makefile")


class TestIndentation:
    def test_removes_common_indentation(self):
        assert remove_indentation("    a\n      b\n    c") == "a\n  b\nc"

    def test_clears_whitespace_only_lines(self):
        assert remove_indentation("  a\n   \t \n  b") == "a\n\nb"

    def test_narrows_to_shortest_prefix(self):
        assert remove_indentation("    a\n  b\n      c") == "  a\nb\n    c"

    def test_no_common_prefix(self):
        assert remove_indentation("a\n  b") == "a\n  b"

    def test_normalizes_crlf(self):
        assert remove_indentation("  a\r\n  b\r\n") == "a\nb\n"

    def test_apply_skips_empty_lines(self):
        assert apply_indentation("a\n\nb", "  ") == "  a\n\n  b"

    def test_apply_without_prefix(self):
        assert apply_indentation("a\nb\n", "") == "a\nb\n"

    def test_apply_then_remove(self):
        text = "#if X\n# define Y\n#endif\n"
        assert remove_indentation(apply_indentation(text, "    ")) == text

    def test_remove_lines(self):
        assert remove_lines("\n\n  a\nb\n\n\n") == "  a\nb\n"

    def test_remove_lines_keeps_plain_text(self):
        assert remove_lines("a") == "a"


class TestInject:
    def test_replaces_range(self):
        assert inject("hello world", 6, 11, "there") == "hello there"

    def test_inserts_at_end(self):
        assert inject("abc", 3, 3, "d") == "abcd"

    def test_start_out_of_range(self):
        with pytest.raises(InjectRangeError):
            inject("abc", 4, 4, "x")

    def test_end_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            inject("abc", 0, 9, "x")


class TestSubstituteVariables:
    def test_substitutes(self):
        assert substitute_variables("@a@-@b@", {"a": "1", "b": "2"}) == "1-2"

    def test_stringifies_values(self):
        assert substitute_variables("v@major@", {"major": 3}) == "v3"

    def test_missing_variable(self):
        with pytest.raises(SubstitutionError, match="@missing@"):
            substitute_variables("@missing@", {})

    def test_none_variable(self):
        with pytest.raises(SubstitutionError):
            substitute_variables("@prefix@_X", {"prefix": None})

    def test_lone_sentinel_is_kept(self):
        assert substitute_variables("a@b", {}) == "a@b"


class TestFormatTable:
    def test_joins(self):
        assert format_table(["a", "b", "c"]) == "a, b, c"

    def test_wraps(self):
        assert format_table(["aaaa", "bbbb", "cccc"], width=10) == "aaaa, bbbb,\ncccc"

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            format_table(["a"], width=0)


class TestParseCxxComment:
    def test_comment_with_indentation(self):
        assert parse_cxx_comment("  // hi\nnext", 0) == "  // hi\n"

    def test_comment_at_offset(self):
        text = "int x;\n// y\n"
        assert parse_cxx_comment(text, 7) == "// y\n"

    def test_comment_at_end_of_text(self):
        assert parse_cxx_comment("// x") == "// x"

    def test_not_a_comment(self):
        assert parse_cxx_comment("int x; // y") is None
        assert parse_cxx_comment("/* x */") is None
        assert parse_cxx_comment("") is None
