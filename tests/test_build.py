"""Tests for Makefile/Kbuild line rules."""

from commitvar.analysis.counter import FileDiffCounter
from commitvar.kinds.build import (
    BUILD_RULES,
    backtrack_condition,
    is_part_of_comment,
    is_variability_change,
    normalize,
)

HUNK = "@@ -1,5 +1,5 @@"


def _classify(lines, position):
    clean = normalize(lines, lines[position], position)
    return is_variability_change(lines, clean, position)


class TestNormalize:
    def test_strips_comment(self):
        lines = [HUNK, "+obj-y += foo.o # the foo driver"]
        assert normalize(lines, lines[1], 1) == "obj-y += foo.o "

    def test_continued_comment_is_empty(self):
        lines = [HUNK, "+# comment line \\", "+\tobj-$(CONFIG_X) += x.o"]
        assert is_part_of_comment(lines, 2) is True
        assert normalize(lines, lines[2], 2) == ""

    def test_empty_line_breaks_continuation(self):
        lines = [HUNK, "# comment \\", "", "+obj-y += a.o"]
        assert is_part_of_comment(lines, 3) is False


class TestVariabilityReference:
    def test_config_reference(self):
        lines = [HUNK, "+obj-$(CONFIG_FOO) += foo.o"]
        assert _classify(lines, 1) is True

    def test_plain_line(self):
        lines = [HUNK, "+ccflags-y += -DDEBUG"]
        assert _classify(lines, 1) is False

    def test_continued_filenames_are_general(self):
        lines = [
            HUNK,
            "+dtb-$(CONFIG_MACH_KIRKWOOD) += \\",
            "+\tkirkwood-b3.dtb \\",
            "+\tkirkwood-blackarmor-nas220.dtb",
        ]
        counts = FileDiffCounter(BUILD_RULES).count(lines, 0)
        assert counts.added_var == 1
        assert counts.added == 2

    def test_appended_filename_in_context(self):
        lines = [
            HUNK,
            " dtb-$(CONFIG_MACH_KIRKWOOD) += \\",
            " \tkirkwood-b3.dtb \\",
            "+\tkirkwood-blackarmor-nas220.dtb",
        ]
        assert _classify(lines, 3) is False


class TestConditionals:
    def test_else_and_endif_of_config_conditional(self):
        lines = [
            "@@ -10,7 +10,3 @@",
            " ifeq ($(CONFIG_PAYLOAD_ELF),y)",
            " \tPAYLOAD := elf",
            "-else",
            "-\tPAYLOAD := none",
            "-endif",
        ]
        counts = FileDiffCounter(BUILD_RULES).count(lines, 0)
        assert counts.deleted_var == 2
        assert counts.deleted == 1

    def test_endif_of_unrelated_conditional(self):
        lines = [HUNK, " ifeq ($(ARCH),x86)", " X := 1", "-endif"]
        assert _classify(lines, 3) is False

    def test_skips_closed_nested_block(self):
        lines = [
            HUNK,
            " ifeq ($(CONFIG_A),y)",
            " ifdef FOO",
            " X := 1",
            " endif",
            "-endif",
        ]
        assert backtrack_condition(lines, 5) is True

    def test_owner_is_inner_block(self):
        lines = [
            HUNK,
            " ifeq ($(CONFIG_A),y)",
            " ifdef FOO",
            " X := 1",
            "-else",
        ]
        assert backtrack_condition(lines, 4) is False

    def test_condition_on_continuation_line(self):
        lines = [
            HUNK,
            " ifeq ($(ARCH), \\",
            " \t$(CONFIG_X))",
            " Y := 1",
            "-endif",
        ]
        assert _classify(lines, 4) is True

    def test_no_owner_found(self):
        lines = [HUNK, " X := 1", "+endif"]
        assert _classify(lines, 2) is False
