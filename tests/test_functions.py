"""Tests for embedded generator functions."""

import pytest

from cxxtool.exceptions import GeneratorError
from cxxtool.generate.functions import compile_generator, parse_generators


def fence(gid, *lines, indent=""):
    body = "".join(f"{indent}//{line}\n" for line in lines)
    return f"{indent}// [%{gid}% {{\n{body}{indent}// }}%]\n"


class TestParseGenerators:
    def test_no_generators(self):
        assert parse_generators("int main() { return 0; }\n") == {}

    def test_simple_generator(self):
        generators = parse_generators(fence("ANSWER", "   return 40 + 2"))
        assert list(generators) == ["ANSWER"]
        assert generators["ANSWER"]() == "42"

    def test_sequence_result_is_joined(self):
        generators = parse_generators(fence("LIST", '   return ["a", "b", 3]'))
        assert generators["LIST"]() == "a, b, 3"

    def test_multiline_body(self):
        text = fence(
            "SQUARES",
            "   values = []",
            "   for i in range(4):",
            "     values.append(i * i)",
            "   return values",
        )
        assert parse_generators(text)["SQUARES"]() == "0, 1, 4, 9"

    def test_helpers_are_available(self):
        text = fence("INDENTED", '   return text.apply_indentation("x\\ny", "  ")')
        assert parse_generators(text)["INDENTED"]() == "  x\n  y"

    def test_indented_fence(self):
        text = "namespace a {\n" + fence("ONE", " return 1", indent="    ") + "}\n"
        assert parse_generators(text)["ONE"]() == "1"

    def test_several_generators(self):
        text = fence("A", " return 'a'") + "\nint x;\n" + fence("B", " return 'b'")
        generators = parse_generators(text)
        assert sorted(generators) == ["A", "B"]
        assert generators["B"]() == "b"

    def test_crlf_fence(self):
        text = "// [%ONE% {\r\n//   return 'one'\r\n// }%]\r\n"
        generators = parse_generators(text)
        assert generators["ONE"]() == "one"

    def test_unterminated_fence(self):
        with pytest.raises(GeneratorError, match="'X'"):
            parse_generators("// [%X% {\n//   return 1\n")

    def test_unterminated_fence_at_end_of_text(self):
        with pytest.raises(GeneratorError, match="'X'"):
            parse_generators("// [%X% {")

    def test_fence_broken_by_code(self):
        text = "// [%X% {\n//   return 1\nint x;\n// }%]\n"
        with pytest.raises(GeneratorError, match="end mark"):
            parse_generators(text)

    def test_duplicate_generator(self):
        text = fence("DUP", " return 1") + fence("DUP", " return 2")
        with pytest.raises(GeneratorError, match="already defined"):
            parse_generators(text)


class TestCompileGenerator:
    def test_syntax_error_reports_name_and_body(self):
        with pytest.raises(GeneratorError) as exc_info:
            compile_generator("BROKEN", " return (\n")
        message = str(exc_info.value)
        assert "BROKEN" in message
        assert "return (" in message
        assert exc_info.value.context["generator"] == "BROKEN"

    def test_runtime_error_names_generator(self):
        fn = compile_generator("FAILS", " return 1 // 0\n")
        with pytest.raises(GeneratorError, match="FAILS"):
            fn()

    def test_builtins_are_restricted(self):
        fn = compile_generator("OPENS", ' return open("/etc/passwd").read()\n')
        with pytest.raises(GeneratorError):
            fn()

    def test_imports_are_unavailable(self):
        fn = compile_generator("IMPORTS", " import os\n return os.getcwd()\n")
        with pytest.raises(GeneratorError):
            fn()

    def test_none_result_is_stringified(self):
        assert compile_generator("NONE", " pass\n")() == "None"
