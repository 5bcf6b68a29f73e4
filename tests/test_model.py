"""Tests for Kconfig line rules: definitions, help texts, depends on."""

from commitvar.analysis.counter import FileDiffCounter
from commitvar.kinds.model import MODEL_RULES, is_part_of_help, is_variability_change, normalize

HEADER = "diff --git a/drivers/Kconfig b/drivers/Kconfig"
HUNK = "@@ -1,3 +1,4 @@"


def _classify(lines, position):
    clean = normalize(lines, lines[position], position)
    return is_variability_change(lines, clean, position)


class TestNormalize:
    def test_strips_marker_and_comment(self):
        lines = [HUNK, "+\tselect FOO # needed by bar"]
        assert normalize(lines, lines[1], 1) == "\tselect FOO "

    def test_comment_only_line_is_empty(self):
        lines = [HUNK, "+# just a comment"]
        assert normalize(lines, lines[1], 1) == ""

    def test_unmarked_line_unchanged(self):
        assert normalize([], "config FOO", 0) == "config FOO"


class TestDefinitions:
    def test_config_line(self):
        lines = [HEADER, HUNK, "+config BAR"]
        assert _classify(lines, 2) is True

    def test_attribute_below_config(self):
        lines = [HEADER, HUNK, " config FOO", "+\tselect BAZ"]
        assert _classify(lines, 3) is True

    def test_source_with_quotes(self):
        lines = [HEADER, HUNK, '+source "arch/Kconfig"']
        assert _classify(lines, 2) is True

    def test_source_with_path(self):
        lines = [HEADER, HUNK, "+source drivers/net/Kconfig"]
        assert _classify(lines, 2) is True

    def test_unrelated_text(self):
        lines = [HEADER, HUNK, "+mainmenu_option next_comment"]
        assert _classify(lines, 2) is False


class TestHelpText:
    def test_keyword_inside_help_is_not_variability(self):
        lines = [
            HEADER,
            HUNK,
            " config FOO",
            ' \tbool "Foo"',
            " \thelp",
            "+\t  default y for most systems",
        ]
        assert _classify(lines, 5) is False

    def test_help_across_blank_line(self):
        lines = [
            HEADER,
            HUNK,
            " config FOO",
            " \thelp",
            " \t  First paragraph.",
            " ",
            "+\t  Second paragraph.",
        ]
        assert _classify(lines, 6) is False

    def test_old_style_help_marker(self):
        lines = [HEADER, HUNK, " config FOO", " \t---help---", "+\t  select something"]
        assert is_part_of_help(lines, "\t  select something", 4) is True

    def test_unindented_line_never_help(self):
        lines = [HEADER, HUNK, " \thelp", "+endmenu"]
        assert is_part_of_help(lines, "endmenu", 3) is False
        assert _classify(lines, 3) is True

    def test_help_keyword_line_itself(self):
        lines = [HEADER, HUNK, " config FOO", ' \tbool "Foo"', "+\thelp"]
        assert _classify(lines, 4) is False

    def test_help_at_first_line_is_safe(self):
        assert is_part_of_help(["+\t  text"], "\t  text", 0) is False


class TestDependsOn:
    def test_after_comment_is_not_variability(self):
        lines = [HEADER, HUNK, ' comment "Some text"', "+depends on FOO"]
        assert _classify(lines, 3) is False

    def test_after_config_is_variability(self):
        lines = [HEADER, HUNK, " config FOO", "+depends on BAR"]
        assert _classify(lines, 3) is True

    def test_chain_of_depends(self):
        lines = [HEADER, HUNK, " config FOO", "+\tdepends on A", "+\tdepends on B"]
        assert _classify(lines, 3) is True
        assert _classify(lines, 4) is True

    def test_chain_after_comment(self):
        lines = [HEADER, HUNK, ' comment "Drivers"', " depends on A", "+depends on B"]
        assert _classify(lines, 4) is False

    def test_nothing_found_defaults_to_false(self):
        lines = [HEADER, HUNK, "+depends on FOO"]
        assert _classify(lines, 2) is False

    def test_config_inside_help_is_skipped(self):
        lines = [
            HEADER,
            HUNK,
            ' comment "Legacy"',
            " \thelp",
            " \t  config OLD is gone",
            "+depends on NEW",
        ]
        assert _classify(lines, 5) is False

    def test_long_chain_is_not_recursive(self):
        lines = [HEADER, HUNK, " config FOO"]
        lines += [f"+\tdepends on DEP{i}" for i in range(5000)]
        assert _classify(lines, len(lines) - 1) is True


class TestCounting:
    def test_counts_are_disjoint(self):
        lines = [
            HEADER,
            HUNK,
            " config FOO",
            ' \tbool "Foo"',
            "-\tdefault n",
            "+\tdefault y",
            "+\thelp",
            "+\t  Enables foo.",
            "+",
            "+# comment",
        ]
        counts = FileDiffCounter(MODEL_RULES).count(lines, 1)
        assert counts.added_var == 1
        assert counts.deleted_var == 1
        assert counts.added == 2
        assert counts.deleted == 0
