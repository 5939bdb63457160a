from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from mdtotex.errors import NestingOverflowError


class ModeKind(Enum):
    TEXT = "text"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    QUOTE = "quote"
    CODE = "code"
    FIGURE = "figure"
    FIGURE_CAPTION = "figure_caption"
    TABLE_HEADER = "table_header"
    TABLE_BODY = "table_body"
    TABLE_CAPTION = "table_caption"
    LITERAL = "literal"
    FOOTNOTE_BODY = "footnote_body"
    NUMBERED_EQUATION = "numbered_equation"
    UNNUMBERED_EQUATION = "unnumbered_equation"


@dataclass(frozen=True)
class IndentStack:
    """
    Leading-whitespace counts of the open list levels, innermost last.
    Pushing past ``capacity`` raises instead of growing.
    """
    levels: Tuple[int, ...]
    capacity: int

    @classmethod
    def start(cls, indent: int, capacity: int) -> "IndentStack":
        return cls((indent,), capacity)

    @property
    def top(self) -> int:
        if not self.levels:
            raise RuntimeError("Indentation stack is empty inside a list mode.")
        return self.levels[-1]

    @property
    def depth(self) -> int:
        return len(self.levels)

    def push(self, indent: int, environment: str, line: Optional[str] = None) -> "IndentStack":
        if len(self.levels) >= self.capacity:
            raise NestingOverflowError(environment, self.capacity, line)
        return IndentStack(self.levels + (indent,), self.capacity)

    def pop(self) -> "IndentStack":
        return IndentStack(self.levels[:-1], self.capacity)


@dataclass(frozen=True)
class Mode:
    """
    The converter's entire state between two lines.

    ``indents`` is set only for the two list kinds and ``rule_every_row`` is
    meaningful only for ``TABLE_BODY``.
    """
    kind: ModeKind
    indents: Optional[IndentStack] = None
    rule_every_row: bool = False

    @property
    def stack(self) -> IndentStack:
        if self.indents is None:
            raise RuntimeError(f"Mode {self.kind.value} carries no indentation stack.")
        return self.indents


TEXT = Mode(ModeKind.TEXT)
QUOTE = Mode(ModeKind.QUOTE)
CODE = Mode(ModeKind.CODE)
FIGURE = Mode(ModeKind.FIGURE)
FIGURE_CAPTION = Mode(ModeKind.FIGURE_CAPTION)
TABLE_HEADER = Mode(ModeKind.TABLE_HEADER)
TABLE_CAPTION = Mode(ModeKind.TABLE_CAPTION)
LITERAL = Mode(ModeKind.LITERAL)
FOOTNOTE_BODY = Mode(ModeKind.FOOTNOTE_BODY)
NUMBERED_EQUATION = Mode(ModeKind.NUMBERED_EQUATION)
UNNUMBERED_EQUATION = Mode(ModeKind.UNNUMBERED_EQUATION)


def table_body(rule_every_row: bool) -> Mode:
    return Mode(ModeKind.TABLE_BODY, rule_every_row=rule_every_row)


def ordered_list(indents: IndentStack) -> Mode:
    return Mode(ModeKind.ORDERED_LIST, indents=indents)


def unordered_list(indents: IndentStack) -> Mode:
    return Mode(ModeKind.UNORDERED_LIST, indents=indents)


LineResult = Tuple[Mode, str]
Handler = Callable[[str, Mode], LineResult]
