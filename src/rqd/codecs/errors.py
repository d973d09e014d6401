"""Error types for the codec capability listing parser."""

from __future__ import annotations


class CodecListingError(Exception):
    """Base class for capability listing errors."""

    def __init__(self, message: str, source: str = "", position: int = 0) -> None:
        self.source = source
        self.position = position
        super().__init__(message)

    def format_error(self) -> str:
        """Format error with caret pointing at the problem position."""
        msg = str(self)
        if not self.source:
            return msg
        caret = " " * self.position + "^"
        return f"{msg}\n  {self.source}\n  {caret}"


class StructuralError(CodecListingError):
    """Raised when the listing has no header/data separator."""


class LineParseError(CodecListingError):
    """Raised when a data line does not match the listing grammar.

    Attributes:
        line: The offending line text (trimmed).
        position: Character offset into ``line`` where matching failed.
        expected: Description of the token expected at ``position``.
        line_number: 1-based index of the line within the data block, set
            by the batch parser. None when a single line was parsed.
    """

    def __init__(
        self,
        message: str,
        line: str,
        position: int,
        expected: str,
        line_number: int | None = None,
    ) -> None:
        self.line = line
        self.expected = expected
        self.line_number = line_number
        super().__init__(message, source=line, position=position)

    def __str__(self) -> str:
        base = super().__str__()
        if self.line_number is None:
            return base
        return f"line {self.line_number}: {base}"


class EmptyFieldError(LineParseError):
    """Raised when a token field matched zero characters."""


class UnknownCodecError(ValueError):
    """Raised when a selection names a codec absent from the listing."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Unknown codec(s): {', '.join(names)}")
