"""
Line-by-line Markdown to LaTeX conversion.

``convert`` returns a lazy iterator: nothing is read or converted until the
caller asks for the next fragment, and stopping early is the only form of
cancellation. A line that fails to convert is logged and dropped, and the
converter carries on in the mode it was in before that line. Blocks still open
when the input runs out are left open.
"""
from typing import Dict, Iterable, Iterator, Optional, Union

from mdtotex.config import ConverterConfig
from mdtotex.errors import ConversionError, LineDecodeError
from mdtotex.logger import get_logger
from mdtotex.parsing.blocks import BlockHandlers
from mdtotex.parsing.inline import InlineTransformer
from mdtotex.parsing.lists import ListHandler
from mdtotex.parsing.modes import TEXT, Handler, LineResult, Mode, ModeKind, ordered_list, unordered_list
from mdtotex.parsing.patterns import PatternTable, default_patterns
from mdtotex.parsing.text import TextHandler

logger = get_logger(__name__)

RawLine = Union[str, bytes]
Fragment = str


def decode_line(raw: RawLine) -> str:
    """
    Turns one raw input line into text without its line terminator.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LineDecodeError(str(exc)) from exc
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


class Converter:
    """
    Holds the per-mode line handlers for one configuration.

    A Converter has no per-document state, so the same instance can serve any
    number of ``convert`` calls.
    """

    def __init__(self,
                 config: Optional[ConverterConfig] = None,
                 patterns: Optional[PatternTable] = None) -> None:
        self.config: ConverterConfig = config or ConverterConfig()
        self.patterns: PatternTable = patterns or default_patterns()
        self.inline: InlineTransformer = InlineTransformer(self.patterns)

        self.blocks: BlockHandlers = BlockHandlers(self.patterns, self.inline)
        self.ordered: ListHandler = ListHandler(
            "enumerate", self.patterns.start_enumerate, ordered_list, self.inline, self.config
        )
        self.unordered: ListHandler = ListHandler(
            "itemize", self.patterns.start_itemize, unordered_list, self.inline, self.config
        )
        self.text: TextHandler = TextHandler(
            self.patterns, self.inline, self.blocks, self.ordered, self.unordered
        )

        self.handlers: Dict[ModeKind, Handler] = {
            ModeKind.TEXT: self.text,
            ModeKind.ORDERED_LIST: self.ordered,
            ModeKind.UNORDERED_LIST: self.unordered,
            ModeKind.QUOTE: self.blocks.quote,
            ModeKind.CODE: self.blocks.code,
            ModeKind.FIGURE: self.blocks.figure,
            ModeKind.FIGURE_CAPTION: self.blocks.figure_caption,
            ModeKind.TABLE_HEADER: self.blocks.table_header,
            ModeKind.TABLE_BODY: self.blocks.table_body,
            ModeKind.TABLE_CAPTION: self.blocks.table_caption,
            ModeKind.LITERAL: self.blocks.literal,
            ModeKind.FOOTNOTE_BODY: self.blocks.footnote_body,
            ModeKind.NUMBERED_EQUATION: self.blocks.numbered_equation,
            ModeKind.UNNUMBERED_EQUATION: self.blocks.unnumbered_equation,
        }
        missing = set(ModeKind) - set(self.handlers)
        if missing:
            raise RuntimeError(f"No handler for modes: {sorted(kind.value for kind in missing)}")

    def process_line(self, line: str, mode: Mode) -> LineResult:
        """
        Converts a single line in ``mode``. Raises ConversionError on bad input.
        """
        return self.handlers[mode.kind](line, mode)

    def convert(self, lines: Iterable[RawLine]) -> Iterator[Fragment]:
        mode: Mode = TEXT
        source: Iterator[RawLine] = iter(lines)
        lineno: int = 0
        while True:
            lineno += 1
            line: Optional[str] = None
            try:
                line = decode_line(next(source))
                mode, fragment = self.process_line(line, mode)
            except StopIteration:
                return
            except (ConversionError, OSError) as exc:
                logger.error("Line %d: %s", lineno, exc)
                if self.config.passthrough_errors and line is not None:
                    yield line + "\n"
                continue
            yield fragment


def convert(lines: Iterable[RawLine], config: Optional[ConverterConfig] = None) -> Iterator[Fragment]:
    """
    Converts ``lines`` lazily, yielding one LaTeX fragment per converted line.
    """
    return Converter(config).convert(lines)
