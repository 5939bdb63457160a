"""Tests for nested itemize/enumerate handling."""

import logging

import pytest

from helpers import fragments, render
from mdtotex.config import ConverterConfig
from mdtotex.errors import IndentationOverflowError, NestingOverflowError, NestingUnderflowError
from mdtotex.parsing.converter import Converter
from mdtotex.parsing.modes import TEXT, IndentStack, ModeKind, unordered_list


class TestIndentStack:
    def test_push_and_pop(self) -> None:
        stack = IndentStack.start(0, 4).push(2, "itemize")
        assert stack.levels == (0, 2)
        assert stack.top == 2
        assert stack.pop().levels == (0,)

    def test_push_past_capacity(self) -> None:
        stack = IndentStack((0, 2), 2)
        with pytest.raises(NestingOverflowError):
            stack.push(4, "itemize")

    def test_empty_stack_is_a_bug(self) -> None:
        with pytest.raises(RuntimeError):
            IndentStack((), 4).top


class TestFlatLists:
    def test_itemize(self) -> None:
        assert render(["* one", "* two", ""]) == (
            "\\begin{itemize}\n\\item one\n\\item two\n\\end{itemize}\n"
        )

    def test_enumerate(self) -> None:
        assert render(["1. one", "2. *two*", ""]) == (
            "\\begin{enumerate}\n\\item one\n\\item \\textbf{two}\n\\end{enumerate}\n"
        )

    def test_continuation_line(self) -> None:
        result = fragments(["- a", "   continued *x*"])
        assert result[1] == "continued \\textbf{x}\n"

    def test_indented_list_sets_base_level(self, converter) -> None:
        mode, _ = converter.process_line("   - a", TEXT)
        assert mode.kind is ModeKind.UNORDERED_LIST
        assert mode.stack.levels == (3,)


class TestNesting:
    def test_open_and_close_levels(self) -> None:
        result = render(["- a", "- b", "  - c", "  - d", "- e", ""])
        assert result == (
            "\\begin{itemize}\n\\item a\n\\item b\n"
            "\\begin{itemize}\n\\item c\n\\item d\n"
            "\\end{itemize}\n\\item e\n"
            "\\end{itemize}\n"
        )
        assert result.count("\\begin{itemize}") == result.count("\\end{itemize}") == 2

    def test_dedent_closes_several_levels(self) -> None:
        result = fragments(["1. a", "  1. b", "    1. c", "1. d", ""])
        assert result[3] == "\\end{enumerate}\n\\end{enumerate}\n\\item d\n"
        assert result[4] == "\\end{enumerate}\n"

    def test_dedent_to_intermediate_level_opens_sibling(self, converter) -> None:
        mode = unordered_list(IndentStack((0, 4), 4))
        mode, fragment = converter.process_line("  - c", mode)
        assert fragment == "\\end{itemize}\n\\begin{itemize}\n\\item c\n"
        assert mode.stack.levels == (0, 2)

    def test_blank_line_closes_all_levels(self, converter) -> None:
        mode = unordered_list(IndentStack((0, 2, 4), 4))
        mode, fragment = converter.process_line("", mode)
        assert mode == TEXT
        assert fragment == "\\end{itemize}\n\\end{itemize}\n\\end{itemize}\n"


class TestListErrors:
    def test_underflow_is_dropped(self, caplog) -> None:
        with caplog.at_level(logging.ERROR):
            result = fragments(["  - a", "- b", "  - c", ""])
        assert result == ["\\begin{itemize}\n\\item a\n", "\\item c\n", "\\end{itemize}\n"]
        assert "smaller than the initial indent" in caplog.text

    def test_underflow_raises(self, converter) -> None:
        mode = unordered_list(IndentStack((4,), 4))
        with pytest.raises(NestingUnderflowError):
            converter.process_line("  - x", mode)

    def test_nesting_overflow(self, caplog) -> None:
        converter = Converter(ConverterConfig(max_nesting=2))
        with caplog.at_level(logging.ERROR):
            result = fragments(["- a", "  - b", "    - c", "  - d", ""], converter)
        assert result == [
            "\\begin{itemize}\n\\item a\n",
            "\\begin{itemize}\n\\item b\n",
            "\\item d\n",
            "\\end{itemize}\n\\end{itemize}\n",
        ]
        assert "Exceeded the limit of 2 nested itemize" in caplog.text

    def test_overflow_error_carries_line(self, converter) -> None:
        mode = unordered_list(IndentStack((0, 2, 4, 6), 4))
        with pytest.raises(NestingOverflowError) as excinfo:
            converter.process_line("        - deep", mode)
        assert excinfo.value.line == "        - deep"
        assert excinfo.value.environment == "itemize"

    def test_default_cap_is_four(self) -> None:
        lines = ["1. a", " 1. b", "  1. c", "   1. d", "    1. e"]
        converter = Converter()
        mode = TEXT
        for line in lines[:-1]:
            mode, _ = converter.process_line(line, mode)
        assert mode.stack.depth == 4
        with pytest.raises(NestingOverflowError):
            converter.process_line(lines[-1], mode)

    def test_indentation_overflow(self) -> None:
        converter = Converter(ConverterConfig(max_indent=3))
        with pytest.raises(IndentationOverflowError):
            converter.process_line("    - x", TEXT)
