import re
from functools import lru_cache
from typing import Any, Pattern

RegexPattern = Pattern[str]


class PatternTable:
    """
    Every regular expression the converter uses, compiled once.

    Instances refuse attribute assignment after construction, so a table can be
    shared freely between converters. A bad pattern raises ``re.error`` here,
    at construction time, never while a line is being processed.
    """

    def __init__(self) -> None:
        # --- Structural (whole-line) patterns ---
        self.top_heading: RegexPattern = re.compile(r"^# ")
        self.link_to_local: RegexPattern = re.compile(r"^\[(?P<label>.+)\]\(\./(?P<path>.+)\.md\)$")
        self.chapter_heading: RegexPattern = self._heading("##")
        self.section_heading: RegexPattern = self._heading("###")
        self.subsection_heading: RegexPattern = self._heading("####")
        self.subsubsection_heading: RegexPattern = self._heading("#####")
        self.table_column: RegexPattern = re.compile(r"(<!--(?P<desc>.+?)-->)?(?P<label>.*)")
        self.table_separator: RegexPattern = re.compile(r"^\| ?---")
        self.start_enumerate: RegexPattern = re.compile(r"^[0-9]+\. (?P<item>.+)$")
        self.start_itemize: RegexPattern = re.compile(r"^[*+-] (?P<item>.+)$")
        self.footnote_body: RegexPattern = re.compile(r"^\[\^(?P<mark>.+?)\](?P<body>.+?)$")
        self.line_comment: RegexPattern = re.compile(r"^<!--(?:(?!-->).)*-->$")
        self.numbered_equation: RegexPattern = re.compile(r"^\$\$<!--(?P<label>.+?)-->$")
        self.code_float: RegexPattern = re.compile(
            r"^```(?P<lang>[^<]*?)<!--(?P<label>.+?)--><!--(?P<caption>.+?)-->$"
        )
        self.code_here: RegexPattern = re.compile(r"^```(?P<lang>.*)$")

        # --- Inline patterns, all non-greedy ---
        self.comment: RegexPattern = re.compile(r"<!--.*?-->")
        self.superscript: RegexPattern = re.compile(r"\^(?P<super>.+?)\^")
        self.bold: RegexPattern = re.compile(r"\*(?P<bold>.+?)\*")
        self.mono: RegexPattern = re.compile(r"`(?P<mono>.+?)`")
        self.single_quote: RegexPattern = re.compile(r"'(?P<quote>.+?)'")
        self.double_quote: RegexPattern = re.compile(r'"(?P<quote>.+?)"')
        self.emph: RegexPattern = re.compile(r"_(?P<emph>.+?)_")
        self.link: RegexPattern = re.compile(r"\[(?P<text>[^\[\]]+?)\]\((?P<link>.+?)\)")
        self.footnote_ref: RegexPattern = re.compile(r"\[\^(?P<mark>[^\[\]]+?)\]")

    @staticmethod
    def _heading(marker: str) -> RegexPattern:
        return re.compile("^" + marker + r" (\[\]\{#(?P<label>[^}]+)\})?(?P<head>.*)$")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__:
            raise AttributeError(f"PatternTable.{name} is read-only")
        super().__setattr__(name, value)


@lru_cache(maxsize=None)
def default_patterns() -> PatternTable:
    """
    Returns the process-wide pattern table, compiling it on first use.
    """
    return PatternTable()
