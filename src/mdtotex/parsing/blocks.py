from typing import List, Match, Optional

from mdtotex.errors import MalformedTableHeaderError, MalformedTableRowError
from mdtotex.parsing.inline import InlineTransformer
from mdtotex.parsing.modes import (
    CODE,
    FIGURE,
    FIGURE_CAPTION,
    FOOTNOTE_BODY,
    LITERAL,
    NUMBERED_EQUATION,
    QUOTE,
    TABLE_CAPTION,
    TABLE_HEADER,
    TEXT,
    UNNUMBERED_EQUATION,
    LineResult,
    Mode,
    table_body as body_mode,
)
from mdtotex.parsing.patterns import PatternTable

CODE_FENCE = "```"
EQUATION_FENCE = "$$"
RULE_EVERY_ROW = "line every row"
RULE_HEADER_ONLY = "line header only"


def split_row(trimmed: str) -> List[str]:
    """
    Splits ``| a | b |`` into ``["a", "b"]``.
    """
    return [cell.strip() for cell in trimmed[1:-1].split("|")]


class BlockHandlers:
    """
    Line handlers for every multi-line block other than lists.

    Code, figure bodies, literal blocks and equations are copied through
    untouched; quotes, captions, table cells and footnote bodies go through
    the inline transformer.
    """

    def __init__(self, patterns: PatternTable, inline: InlineTransformer) -> None:
        self.patterns: PatternTable = patterns
        self.inline: InlineTransformer = inline

    def caption_line(self, line: str) -> str:
        # A line that is already a \label{} reference is left alone
        if line.strip().startswith("\\label{"):
            return line + "\n"
        return self.inline(line) + "\n"

    # --- Quote ---

    def quote(self, line: str, mode: Mode) -> LineResult:
        trimmed: str = line.strip()
        if not trimmed:
            return TEXT, "\\end{displayquote}\n\n"
        if trimmed.startswith("> "):
            trimmed = trimmed[2:]
        elif trimmed.startswith(">"):
            trimmed = trimmed[1:]
        return QUOTE, self.inline(trimmed) + "\n"

    # --- Verbatim blocks ---

    def code(self, line: str, mode: Mode) -> LineResult:
        if line.strip() == CODE_FENCE:
            return TEXT, "\\end{lstlisting}\n"
        return CODE, line + "\n"

    def literal(self, line: str, mode: Mode) -> LineResult:
        if not line.strip():
            return TEXT, ""
        return LITERAL, line + "\n"

    def numbered_equation(self, line: str, mode: Mode) -> LineResult:
        if line.strip() == EQUATION_FENCE:
            return TEXT, "\\end{equation}\n"
        return NUMBERED_EQUATION, line + "\n"

    def unnumbered_equation(self, line: str, mode: Mode) -> LineResult:
        if line.strip() == EQUATION_FENCE:
            return TEXT, "\\end{equation*}\n"
        return UNNUMBERED_EQUATION, line + "\n"

    # --- Figures ---

    def figure(self, line: str, mode: Mode) -> LineResult:
        if not line.strip():
            return FIGURE_CAPTION, "\n\\caption{"
        return FIGURE, line + "\n"

    def figure_caption(self, line: str, mode: Mode) -> LineResult:
        if not line.strip():
            return TEXT, "}\n\\end{figure}\n\n"
        return FIGURE_CAPTION, self.caption_line(line)

    # --- Footnotes ---

    def footnote_body(self, line: str, mode: Mode) -> LineResult:
        if not line.strip():
            return TEXT, "}\n\n"
        return FOOTNOTE_BODY, self.inline(line) + "\n"

    # --- Tables ---

    def open_table(self, line: str) -> LineResult:
        """
        Renders a header line such as ``| <!--c--> A | <!--l--> B |``.

        A column without a ``<!--descriptor-->`` is centered.
        """
        trimmed: str = line.strip()
        if not trimmed.endswith("|") or len(trimmed) < 2:
            raise MalformedTableRowError(line)

        specs: List[str] = []
        labels: List[str] = []
        for cell in split_row(trimmed):
            match: Optional[Match[str]] = self.patterns.table_column.fullmatch(cell)
            if match is None or "<!--" in match.group("label"):
                raise MalformedTableHeaderError(line)
            desc: Optional[str] = match.group("desc")
            specs.append(desc.strip() if desc is not None else "c")
            labels.append(f"\\textbf{{{match.group('label').strip()}}}")

        table: str = "\\begin{table}\n\\begin{tabular}{"
        table += " ".join(specs)
        table += "}\n\\toprule\n"
        table += " & ".join(labels)
        table += " \\\\\n"
        return TABLE_HEADER, table

    def table_header(self, line: str, mode: Mode) -> LineResult:
        trimmed: str = line.strip()
        if self.patterns.table_separator.match(trimmed):
            return TABLE_HEADER, ""
        rule_every_row: bool = RULE_EVERY_ROW in trimmed
        header_rule: str = "\\midrule\n" if RULE_HEADER_ONLY in trimmed else ""
        if not trimmed or trimmed.startswith("|"):
            # This line already belongs to the body
            next_mode, row = self.table_row(line, rule_every_row)
            return next_mode, header_rule + row
        return body_mode(rule_every_row), header_rule

    def table_body(self, line: str, mode: Mode) -> LineResult:
        return self.table_row(line, mode.rule_every_row)

    def table_row(self, line: str, rule_every_row: bool) -> LineResult:
        trimmed: str = line.strip()
        if not trimmed:
            return TABLE_CAPTION, "\\bottomrule\n\\end{tabular}\n\\caption{"
        if not (trimmed.startswith("|") and trimmed.endswith("|")) or len(trimmed) < 2:
            raise MalformedTableRowError(line)

        row: str = "\\midrule\n" if rule_every_row else ""
        row += " & ".join(self.inline(cell).strip() for cell in split_row(trimmed))
        row += " \\\\\n"
        return body_mode(rule_every_row), row

    def table_caption(self, line: str, mode: Mode) -> LineResult:
        if not line.strip():
            return TEXT, "}\n\\end{table}\n\n"
        return TABLE_CAPTION, self.caption_line(line)
