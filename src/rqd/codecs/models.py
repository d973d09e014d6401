"""Data models for parsed ffmpeg codec listings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CodecKind(Enum):
    """Media category a codec entry belongs to."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    DATA = "data"
    ATTACHMENT = "attachment"


# Kind letter in the third column of `ffmpeg -codecs`
KIND_LETTERS: dict[str, CodecKind] = {
    "V": CodecKind.VIDEO,
    "A": CodecKind.AUDIO,
    "S": CodecKind.SUBTITLE,
    "D": CodecKind.DATA,
    "T": CodecKind.ATTACHMENT,
}
_KIND_TO_LETTER: dict[CodecKind, str] = {
    kind: letter for letter, kind in KIND_LETTERS.items()
}


@dataclass(frozen=True)
class Codec:
    """One entry of the ffmpeg codec capability listing.

    ``encoders``/``decoders`` are empty when the line carried no explicit
    coder list. That means "not listed", not "none exist": ffmpeg only
    prints the list when the implementation names differ from the codec
    identifier.
    """

    decodable: bool
    encodable: bool
    kind: CodecKind
    intra_frame_only: bool
    lossy_capable: bool
    lossless_capable: bool
    extension: str
    name: str
    encoders: tuple[str, ...] = ()
    decoders: tuple[str, ...] = ()

    @property
    def flags(self) -> str:
        """The six-character flag column as ffmpeg prints it (e.g. "DEV.LS")."""
        kind_letter = _KIND_TO_LETTER[self.kind]
        return "".join(
            (
                "D" if self.decodable else ".",
                "E" if self.encodable else ".",
                kind_letter,
                "I" if self.intra_frame_only else ".",
                "L" if self.lossy_capable else ".",
                "S" if self.lossless_capable else ".",
            )
        )

    @property
    def has_explicit_encoders(self) -> bool:
        """True if the listing line carried an ``(encoders: ...)`` clause."""
        return bool(self.encoders)

    @property
    def has_explicit_decoders(self) -> bool:
        """True if the listing line carried a ``(decoders: ...)`` clause."""
        return bool(self.decoders)

    def encoder_candidates(self) -> tuple[str, ...]:
        """Encoder names to try for this codec.

        Returns:
            The explicit encoder list, or the codec identifier itself when
            no list was given (ffmpeg accepts it as the encoder name).
        """
        if self.encoders:
            return self.encoders
        return (self.extension,)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {
            "decodable": self.decodable,
            "encodable": self.encodable,
            "kind": self.kind.value,
            "intra_frame_only": self.intra_frame_only,
            "lossy_capable": self.lossy_capable,
            "lossless_capable": self.lossless_capable,
            "extension": self.extension,
            "name": self.name,
            "encoders": list(self.encoders),
            "decoders": list(self.decoders),
        }
