from typing import Match, Optional

from mdtotex.parsing.blocks import EQUATION_FENCE, BlockHandlers
from mdtotex.parsing.inline import InlineTransformer
from mdtotex.parsing.lists import ListHandler
from mdtotex.parsing.modes import (
    CODE,
    FIGURE,
    FOOTNOTE_BODY,
    LITERAL,
    NUMBERED_EQUATION,
    QUOTE,
    TEXT,
    UNNUMBERED_EQUATION,
    LineResult,
    Mode,
)
from mdtotex.parsing.patterns import PatternTable, RegexPattern


class TextHandler:
    """
    Handles lines outside of any block. Decides which block, if any, a line
    opens; everything else is a paragraph line.
    """

    def __init__(self,
                 patterns: PatternTable,
                 inline: InlineTransformer,
                 blocks: BlockHandlers,
                 ordered: ListHandler,
                 unordered: ListHandler) -> None:
        self.patterns: PatternTable = patterns
        self.inline: InlineTransformer = inline
        self.blocks: BlockHandlers = blocks
        self.ordered: ListHandler = ordered
        self.unordered: ListHandler = unordered
        # Deepest first
        self.headings = [
            (patterns.subsubsection_heading, "subsubsection"),
            (patterns.subsection_heading, "subsection"),
            (patterns.section_heading, "section"),
            (patterns.chapter_heading, "chapter"),
        ]

    def _heading(self, trimmed: str) -> Optional[str]:
        pattern: RegexPattern
        for pattern, command in self.headings:
            match: Optional[Match[str]] = pattern.match(trimmed)
            if match:
                text: str = f"\\{command}{{{match.group('head')}}}"
                if match.group("label") is not None:
                    text += f"\\label{{{match.group('label')}}}"
                return text + "\n"
        return None

    def _code(self, trimmed: str) -> Optional[str]:
        match: Optional[Match[str]] = self.patterns.code_float.match(trimmed)
        if match:
            lang: str = match.group("lang").strip()
            label: str = match.group("label").strip()
            caption: str = match.group("caption").strip()
            return (
                "\\begin{lstlisting}"
                f"[\n\tstyle={lang},\n\tlanguage={lang},\n\tlabel={label},\n\tcaption={{{caption}}},\n\tfloat]\n"
            )
        match = self.patterns.code_here.match(trimmed)
        if match:
            lang = match.group("lang").strip()
            if lang:
                return f"\\begin{{lstlisting}}[style={lang},language={lang}]\n"
            return "\\begin{lstlisting}\n"
        return None

    def __call__(self, line: str, mode: Mode) -> LineResult:
        trimmed: str = line.strip()
        if not trimmed:
            # A new paragraph
            return TEXT, "\n"

        # There should only be one top-level heading per document; it is dropped
        if self.patterns.top_heading.match(trimmed):
            return TEXT, ""

        match: Optional[Match[str]] = self.patterns.link_to_local.match(trimmed)
        if match:
            return TEXT, f"\\input{{{match.group('path')}}}\n"

        heading: Optional[str] = self._heading(trimmed)
        if heading is not None:
            return TEXT, heading

        if trimmed == "|figure":
            return FIGURE, "\\begin{figure}\n"
        if trimmed == "|literal":
            return LITERAL, ""
        # Must follow the figure and literal checks, which also start with a pipe
        if trimmed.startswith("|"):
            return self.blocks.open_table(line)

        listing: Optional[str] = self._code(trimmed)
        if listing is not None:
            return CODE, listing

        if trimmed.startswith("> "):
            return QUOTE, "\\begin{displayquote}\n" + self.inline(trimmed[2:]) + "\n"

        match = self.patterns.start_itemize.match(trimmed)
        if match:
            return self.unordered.open(line, match.group("item"))

        match = self.patterns.start_enumerate.match(trimmed)
        if match:
            return self.ordered.open(line, match.group("item"))

        match = self.patterns.footnote_body.match(trimmed)
        if match:
            body: str = self.inline(match.group("body"))
            return FOOTNOTE_BODY, f"\\footnotetext[{match.group('mark')}]{{\n{body}\n"

        if trimmed == EQUATION_FENCE:
            return UNNUMBERED_EQUATION, "\\begin{equation*}\n"

        match = self.patterns.numbered_equation.match(trimmed)
        if match:
            return NUMBERED_EQUATION, f"\\begin{{equation}}\\label{{{match.group('label')}}}\n"

        # Becomes an empty line, which LaTeX reads as a paragraph break
        if self.patterns.line_comment.match(trimmed):
            return TEXT, "\n"

        return TEXT, self.inline(line) + "\n"
