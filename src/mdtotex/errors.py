from typing import Optional


class ConversionError(Exception):
    """
    Base class for every recoverable per-line failure.
    The converter logs these and moves on to the next line.
    """

    def __init__(self, message: str, line: Optional[str] = None) -> None:
        self.message: str = message
        self.line: Optional[str] = line
        if line is not None:
            super().__init__(f"{message}\n{line}")
        else:
            super().__init__(message)


class IndentationOverflowError(ConversionError):
    def __init__(self, indent: int, limit: int, line: Optional[str] = None) -> None:
        self.indent: int = indent
        self.limit: int = limit
        super().__init__(
            f"Leading indent cannot be more than {limit}, however I got {indent}.", line
        )


class NestingOverflowError(ConversionError):
    def __init__(self, environment: str, capacity: int, line: Optional[str] = None) -> None:
        self.environment: str = environment
        self.capacity: int = capacity
        super().__init__(
            f"Exceeded the limit of {capacity} nested {environment} environments.", line
        )


class NestingUnderflowError(ConversionError):
    def __init__(self, line: Optional[str] = None) -> None:
        super().__init__("Indent level cannot be smaller than the initial indent", line)


class MalformedTableRowError(ConversionError):
    def __init__(self, line: Optional[str] = None) -> None:
        super().__init__(
            "Unexpected line ending for table. The line starts with '|' but does not end with '|'.",
            line,
        )


class MalformedTableHeaderError(ConversionError):
    def __init__(self, line: Optional[str] = None) -> None:
        super().__init__("Unable to process table headings", line)


class LineDecodeError(ConversionError):
    """Raised when an input line is not valid UTF-8."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unable to decode input line: {reason}")
