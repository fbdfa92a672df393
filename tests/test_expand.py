"""Tests for marker expansion."""

import pytest

from cxxtool.exceptions import MarkerError, SubstitutionError, UnknownReferenceError
from cxxtool.generate.expand import expand_templates
from cxxtool.registry import Template, build_registry

VERSION_BLOCK = (
    "// [@VERSION{@]\n"
    "#define FOO_VERSION_MAJOR 1\n"
    "#define FOO_VERSION_MINOR 2\n"
    "#define FOO_VERSION_PATCH 3\n"
    "#define FOO_VERSION_STRING \"1.2.3\"\n"
    "// [@VERSION}@]\n"
)

ONE_FENCE = "// [%ONE% {\n//   return 'one'\n// }%]\n"


@pytest.fixture
def gen_ctx(make_context):
    return make_context(generate=True)


@pytest.fixture
def purge_ctx(make_context):
    return make_context(generate=True, purge=True)


class TestExpandTemplate:
    def test_expands_marker(self, gen_ctx):
        assert expand_templates(gen_ctx, "// [@VERSION@]\n", {}) == VERSION_BLOCK

    def test_keeps_surrounding_text(self, gen_ctx):
        text = "#ifndef X\n// [@VERSION@]\n#endif\n"
        assert expand_templates(gen_ctx, text, {}) == "#ifndef X\n" + VERSION_BLOCK + "#endif\n"

    def test_indents_like_the_marker(self, gen_ctx):
        result = expand_templates(gen_ctx, "  // [@VERSION@]\n", {})
        lines = result.splitlines()
        assert lines[0] == "  // [@VERSION{@]"
        assert lines[1] == "  #define FOO_VERSION_MAJOR 1"
        assert lines[-1] == "  // [@VERSION}@]"
        assert all(line.startswith("  ") for line in lines)

    def test_uses_configured_prefix(self, make_context, raw_config):
        raw_config["prefix"] = "BAR"
        ctx = make_context(generate=True)
        result = expand_templates(ctx, "// [@VERSION@]\n", {})
        assert "#define BAR_VERSION_MAJOR 1\n" in result

    def test_crlf_marker(self, gen_ctx):
        assert expand_templates(gen_ctx, "// [@VERSION@]\r\n", {}) == VERSION_BLOCK

    def test_marker_without_line_break_is_ignored(self, gen_ctx):
        text = "// [@VERSION@]"
        assert expand_templates(gen_ctx, text, {}) is text

    def test_no_markers_returns_same_object(self, gen_ctx):
        text = "int main() { return 0; }\n"
        assert expand_templates(gen_ctx, text, {}) is text


class TestRefresh:
    def test_refreshes_stale_block(self, gen_ctx):
        text = "a\n// [@VERSION{@]\nstale\n// [@VERSION}@]\nb\n"
        assert expand_templates(gen_ctx, text, {}) == "a\n" + VERSION_BLOCK + "b\n"

    def test_second_expansion_is_a_no_op(self, gen_ctx):
        text = "x\n  // [@VERSION@]\ny\n// [@OS@]\n"
        once = expand_templates(gen_ctx, text, {})
        twice = expand_templates(gen_ctx, once, {})
        assert twice == once
        assert twice is once

    def test_missing_close_marker(self, gen_ctx):
        with pytest.raises(MarkerError, match="VERSION"):
            expand_templates(gen_ctx, "// [@VERSION{@]\n#define X\n", {})

    def test_mismatched_close_marker(self, gen_ctx):
        text = "// [@VERSION{@]\n// [@OS}@]\n"
        with pytest.raises(MarkerError, match="VERSION"):
            expand_templates(gen_ctx, text, {})

    def test_close_marker_without_open(self, gen_ctx):
        with pytest.raises(MarkerError, match="VERSION"):
            expand_templates(gen_ctx, "// [@VERSION}@]\n", {})

    def test_stale_block_without_template(self, gen_ctx):
        text = "// [@GONE{@]\nold\n// [@GONE}@]\n"
        with pytest.raises(UnknownReferenceError, match="GONE"):
            expand_templates(gen_ctx, text, {})


class TestGenerators:
    def test_expands_embedded_generator(self, gen_ctx):
        text = ONE_FENCE + "// [@ONE@]\n"
        assert expand_templates(gen_ctx, text, {}) == (
            ONE_FENCE + "// [@ONE{@]\none\n// [@ONE}@]\n"
        )

    def test_crlf_generator(self, gen_ctx):
        fence = ONE_FENCE.replace("\n", "\r\n")
        text = fence + "// [@ONE@]\r\n"
        once = expand_templates(gen_ctx, text, {})
        assert once == fence + "// [@ONE{@]\none\n// [@ONE}@]\n"
        assert expand_templates(gen_ctx, once, {}) is once

    def test_several_markers_in_one_document(self, gen_ctx):
        text = (
            ONE_FENCE
            + "// [@ONE@]\n"
            + "int a;\n"
            + "    // [@ONE@]\n"
            + "int b;\n"
            + "// [@VERSION@]\n"
            + "int c;\n"
        )
        assert expand_templates(gen_ctx, text, {}) == (
            ONE_FENCE
            + "// [@ONE{@]\none\n// [@ONE}@]\n"
            + "int a;\n"
            + "    // [@ONE{@]\n    one\n    // [@ONE}@]\n"
            + "int b;\n"
            + VERSION_BLOCK
            + "int c;\n"
        )

    def test_shrinking_replacement_keeps_later_markers(self, gen_ctx):
        text = (
            "// [%SHORT% {\n//   return 's'\n// }%]\n"
            "// [@SHORT{@]\n" + "long stale content\n" * 20 + "// [@SHORT}@]\n"
            "// [@SHORT@]\n"
        )
        result = expand_templates(gen_ctx, text, {})
        assert result.count("// [@SHORT{@]\ns\n// [@SHORT}@]\n") == 2
        assert "stale" not in result

    def test_template_wins_over_generator(self, gen_ctx):
        text = "// [%VERSION% {\n//   return 'generated'\n// }%]\n// [@VERSION@]\n"
        result = expand_templates(gen_ctx, text, {})
        assert "FOO_VERSION_MAJOR" in result
        assert "generated\n" not in result

    def test_empty_result_leaves_empty_block(self, gen_ctx):
        text = "// [%NOTHING% {\n//   return ''\n// }%]\n// [@NOTHING@]\n"
        result = expand_templates(gen_ctx, text, {})
        assert result.endswith("// [@NOTHING{@]\n// [@NOTHING}@]\n")


class TestErrors:
    def test_unknown_reference(self, gen_ctx):
        with pytest.raises(UnknownReferenceError, match="@NOPE@"):
            expand_templates(gen_ctx, "// [@NOPE@]\n", {})

    def test_missing_variable_aborts(self, make_context):
        registry = build_registry(extra_templates=[Template("NEEDS", "#define @undefined@ 1\n")])
        ctx = make_context(registry=registry, generate=True)
        with pytest.raises(SubstitutionError, match="@undefined@"):
            expand_templates(ctx, "// [@NEEDS@]\n", {})


class TestPurge:
    def test_purge_empties_block(self, purge_ctx):
        text = "a\n" + VERSION_BLOCK + "b\n"
        assert expand_templates(purge_ctx, text, {}) == "a\n// [@VERSION{@]\n// [@VERSION}@]\nb\n"

    def test_purge_wraps_plain_marker(self, purge_ctx):
        result = expand_templates(purge_ctx, "  // [@VERSION@]\n", {})
        assert result == "  // [@VERSION{@]\n  // [@VERSION}@]\n"

    def test_purge_does_not_resolve(self, purge_ctx):
        text = "// [@GONE{@]\nold\n// [@GONE}@]\n"
        assert expand_templates(purge_ctx, text, {}) == "// [@GONE{@]\n// [@GONE}@]\n"
