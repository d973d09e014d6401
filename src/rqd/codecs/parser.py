"""Parser for the ``ffmpeg -codecs`` capability listing.

The listing is a legend block, a dash separator, then one codec per line:

    line      = flags WS extension WS name clause* EOL
    flags     = ('D'|'.') ('E'|'.') kind ('I'|'.') ('L'|'.') ('S'|'.')
    kind      = 'V' | 'A' | 'S' | 'D' | 'T'
    extension = IDENT
    name      = any character up to a coder-list marker or end of line
    clause    = '(encoders:' WS IDENT (WS IDENT)* WS? ')'
              | '(decoders:' WS IDENT (WS IDENT)* WS? ')'
    IDENT     = [A-Za-z0-9_.-]+

Each clause may appear at most once, in either order. Parsing is a single
left-to-right pass with one-token lookahead; the first mismatch raises a
LineParseError carrying the line and character offset.
"""

from __future__ import annotations

import logging

from rqd.codecs.errors import (
    EmptyFieldError,
    LineParseError,
    StructuralError,
)
from rqd.codecs.models import KIND_LETTERS, Codec, CodecKind

logger = logging.getLogger(__name__)

# ffmpeg prints " -------" between the legend and the codec table
SEPARATOR_MARKER = "-------"

ENCODERS_MARKER = "(encoders:"
DECODERS_MARKER = "(decoders:"
_CODER_MARKERS = (ENCODERS_MARKER, DECODERS_MARKER)

_WHITESPACE = frozenset(" \t")
_IDENTIFIER_PUNCTUATION = frozenset("_-.")


def _is_identifier_char(ch: str) -> bool:
    """Identifier characters: ASCII alphanumerics plus ``_``, ``-`` and ``.``."""
    return (ch.isascii() and ch.isalnum()) or ch in _IDENTIFIER_PUNCTUATION


def split_listing(text: str) -> list[str]:
    """Split a raw capability listing into trimmed, non-empty data lines.

    Args:
        text: Full stdout of ``ffmpeg -codecs``.

    Returns:
        Data lines in listing order.

    Raises:
        StructuralError: If the text has no separator marker.
    """
    _, separator, data = text.partition(SEPARATOR_MARKER)
    if not separator:
        raise StructuralError(
            f"Missing data section: no '{SEPARATOR_MARKER}' separator "
            "found in codec listing"
        )

    # A longer dash run still counts as one separator
    data = data.lstrip("-").strip()

    lines: list[str] = []
    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line:
            lines.append(line)
    return lines


def parse_codec_line(line: str) -> Codec:
    """Parse a single data line into a Codec.

    Args:
        line: One trimmed line of the codec table.

    Returns:
        The parsed Codec.

    Raises:
        LineParseError: If the line does not match the listing grammar.
        EmptyFieldError: If a required token is empty.
    """
    return _LineParser(line).parse()


def parse_codec_listing(text: str) -> list[Codec]:
    """Parse a full capability listing.

    Fails fast: the first malformed line aborts the parse and no partial
    result is returned.

    Args:
        text: Full stdout of ``ffmpeg -codecs``.

    Returns:
        Codecs in listing order.

    Raises:
        StructuralError: If the listing has no separator.
        LineParseError: For the first line that fails to parse, with
            ``line_number`` set.
    """
    lines = split_listing(text)
    codecs: list[Codec] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            codecs.append(parse_codec_line(line))
        except LineParseError as e:
            e.line_number = line_number
            logger.debug("Codec listing rejected at line %d: %s", line_number, e)
            raise
    logger.debug("Parsed %d codecs from listing", len(codecs))
    return codecs


class _LineParser:
    """Cursor-based scanner over one data line."""

    def __init__(self, line: str) -> None:
        self._line = line
        self._pos = 0

    def parse(self) -> Codec:
        decodable = self._flag("D", "decodable")
        encodable = self._flag("E", "encodable")
        kind = self._kind()
        intra_frame_only = self._flag("I", "intra-frame-only")
        lossy_capable = self._flag("L", "lossy")
        lossless_capable = self._flag("S", "lossless")
        self._whitespace()
        extension = self._identifier("codec identifier")
        self._whitespace()
        name = self._name()

        coders: dict[str, tuple[str, ...]] = {}
        while not self._at_end():
            self._whitespace(required=False)
            if self._at_end():
                break
            marker = self._upcoming_marker()
            if marker is None or marker in coders:
                raise self._error("end of line")
            coders[marker] = self._coder_list(marker)

        return Codec(
            decodable=decodable,
            encodable=encodable,
            kind=kind,
            intra_frame_only=intra_frame_only,
            lossy_capable=lossy_capable,
            lossless_capable=lossless_capable,
            extension=extension,
            name=name,
            encoders=coders.get(ENCODERS_MARKER, ()),
            decoders=coders.get(DECODERS_MARKER, ()),
        )

    # --- Cursor helpers ---

    def _at_end(self) -> bool:
        return self._pos >= len(self._line)

    def _peek(self) -> str:
        """Return the current character, or "" at end of line."""
        if self._at_end():
            return ""
        return self._line[self._pos]

    def _upcoming_marker(self) -> str | None:
        for marker in _CODER_MARKERS:
            if self._line.startswith(marker, self._pos):
                return marker
        return None

    def _error(
        self,
        expected: str,
        position: int | None = None,
        error_cls: type[LineParseError] = LineParseError,
    ) -> LineParseError:
        """Create an error for ``expected`` at ``position`` (default: cursor)."""
        pos = self._pos if position is None else position
        if pos < len(self._line):
            found = repr(self._line[pos])
        else:
            found = "end of line"
        return error_cls(
            f"Expected {expected} at offset {pos}, found {found}",
            line=self._line,
            position=pos,
            expected=expected,
        )

    # --- Grammar productions ---

    def _flag(self, letter: str, label: str) -> bool:
        """flag = letter | '.'"""
        ch = self._peek()
        if ch == letter:
            self._pos += 1
            return True
        if ch == ".":
            self._pos += 1
            return False
        raise self._error(f"'{letter}' or '.' ({label} flag)")

    def _kind(self) -> CodecKind:
        """kind = 'V' | 'A' | 'S' | 'D' | 'T'"""
        kind = KIND_LETTERS.get(self._peek())
        if kind is None:
            raise self._error("codec kind (one of V, A, S, D, T)")
        self._pos += 1
        return kind

    def _whitespace(self, required: bool = True) -> None:
        start = self._pos
        while self._peek() in _WHITESPACE:
            self._pos += 1
        if required and self._pos == start:
            raise self._error("whitespace")

    def _identifier(self, label: str) -> str:
        """IDENT = [A-Za-z0-9_.-]+"""
        start = self._pos
        while not self._at_end() and _is_identifier_char(self._line[self._pos]):
            self._pos += 1
        if self._pos == start:
            raise self._error(label, error_cls=EmptyFieldError)
        return self._line[start : self._pos]

    def _name(self) -> str:
        """name = any character up to a coder-list marker or end of line"""
        start = self._pos
        while not self._at_end() and self._upcoming_marker() is None:
            self._pos += 1
        name = self._line[start : self._pos].rstrip()
        if not name:
            raise self._error("codec name", position=start, error_cls=EmptyFieldError)
        return name

    def _coder_list(self, marker: str) -> tuple[str, ...]:
        """clause = marker WS IDENT (WS IDENT)* WS? ')'"""
        label = marker[1:-2]  # "encoders:" -> "encoder"
        self._pos += len(marker)
        self._whitespace()

        names = [self._identifier(f"{label} name")]
        while True:
            before = self._pos
            self._whitespace(required=False)
            if self._peek() == ")":
                self._pos += 1
                return tuple(names)
            if self._pos == before:
                raise self._error(f"whitespace or ')' in {label} list")
            names.append(self._identifier(f"{label} name or ')'"))
