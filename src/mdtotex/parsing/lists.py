from typing import Callable, Match, Optional

from mdtotex.config import ConverterConfig
from mdtotex.errors import IndentationOverflowError, NestingUnderflowError
from mdtotex.parsing.inline import InlineTransformer
from mdtotex.parsing.modes import TEXT, IndentStack, LineResult, Mode
from mdtotex.parsing.patterns import RegexPattern


def measure_indent(line: str, limit: int) -> int:
    """
    Counts the leading whitespace characters of ``line``.
    """
    indent: int = len(line) - len(line.lstrip())
    if indent > limit:
        raise IndentationOverflowError(indent, limit, line)
    return indent


class ListHandler:
    """
    Handles lines while an ``enumerate`` or ``itemize`` environment is open.

    Both list kinds share the same nesting rules and differ only in the item
    marker and the environment name.
    """

    def __init__(self,
                 environment: str,
                 marker: RegexPattern,
                 make_mode: Callable[[IndentStack], Mode],
                 inline: InlineTransformer,
                 config: ConverterConfig) -> None:
        self.environment: str = environment
        self.marker: RegexPattern = marker
        self.make_mode: Callable[[IndentStack], Mode] = make_mode
        self.inline: InlineTransformer = inline
        self.config: ConverterConfig = config

    @property
    def begin(self) -> str:
        return f"\\begin{{{self.environment}}}\n"

    @property
    def end(self) -> str:
        return f"\\end{{{self.environment}}}"

    def item(self, text: str) -> str:
        return f"\\item {self.inline(text)}\n"

    def open(self, line: str, item_text: str) -> LineResult:
        """
        Starts a new top-level list whose base level is the indent of ``line``.
        """
        indent: int = measure_indent(line, self.config.max_indent)
        stack: IndentStack = IndentStack.start(indent, self.config.max_nesting)
        return self.make_mode(stack), self.begin + self.item(item_text)

    def __call__(self, line: str, mode: Mode) -> LineResult:
        return self.process(line, mode.stack)

    def process(self, line: str, stack: IndentStack) -> LineResult:
        trimmed: str = line.strip()
        if not trimmed:
            # Close every open level
            return TEXT, "\n".join(self.end for _ in stack.levels) + "\n"

        match: Optional[Match[str]] = self.marker.match(trimmed)
        if match is None:
            # Continuation of the current item
            return self.make_mode(stack), self.inline(trimmed) + "\n"

        indent: int = measure_indent(line, self.config.max_indent)
        if indent == stack.top:
            return self.make_mode(stack), self.item(match.group("item"))

        if indent > stack.top:
            deeper: IndentStack = stack.push(indent, self.environment, line)
            return self.make_mode(deeper), self.begin + self.item(match.group("item"))

        # Dedent: close the innermost level and try again one level out.
        # With levels [2, 4] and an indent of 3 this closes 4 and opens 3.
        if stack.depth <= 1:
            raise NestingUnderflowError(line)
        next_mode, fragment = self.process(line, stack.pop())
        return next_mode, self.end + "\n" + fragment
