"""Codec selection presets for benchmarking.

Filters a parsed codec listing down to the codecs a benchmark run should
encode with: hardware-accelerated encoders, a recommended modern set, or
an explicit list of codec names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum

from rqd.codecs.errors import UnknownCodecError
from rqd.codecs.models import Codec, CodecKind

logger = logging.getLogger(__name__)

# Encoder name suffixes that identify hardware implementations
HARDWARE_SUFFIXES: tuple[str, ...] = ("nvenc", "qsv", "vaapi", "amf", "videotoolbox")

# H.264 / H.265 / H.266 / AV1
RECOMMENDED_EXTENSIONS: tuple[str, ...] = ("h264", "hevc", "av1", "vvc")


class SelectionPreset(Enum):
    """How codecs are chosen for a benchmark run."""

    HARDWARE = "hardware"
    RECOMMENDED = "recommended"
    CUSTOM = "custom"

    @property
    def description(self) -> str:
        return _PRESET_DESCRIPTIONS[self]


_PRESET_DESCRIPTIONS: dict[SelectionPreset, str] = {
    SelectionPreset.HARDWARE: "All Hardware Encoding Available Codecs",
    SelectionPreset.RECOMMENDED: "H.264 / H.265 / H.266 / AV1",
    SelectionPreset.CUSTOM: "Custom",
}


def is_hardware_coder(
    name: str, suffixes: Sequence[str] = HARDWARE_SUFFIXES
) -> bool:
    """Check whether an encoder/decoder name is a hardware implementation.

    Args:
        name: Coder name (e.g., "h264_nvenc").
        suffixes: Hardware name suffixes to match.

    Returns:
        True if the name ends with one of the suffixes.
    """
    return name.endswith(tuple(suffixes))


def select_video_encodable(codecs: Iterable[Codec]) -> list[Codec]:
    """Return encodable video codecs, preserving listing order."""
    return [
        codec
        for codec in codecs
        if codec.kind is CodecKind.VIDEO and codec.encodable
    ]


def select_hardware(
    codecs: Iterable[Codec], suffixes: Sequence[str] = HARDWARE_SUFFIXES
) -> list[Codec]:
    """Return encodable video codecs with at least one hardware encoder."""
    return [
        codec
        for codec in select_video_encodable(codecs)
        if any(is_hardware_coder(encoder, suffixes) for encoder in codec.encoders)
    ]


def select_recommended(
    codecs: Iterable[Codec], extensions: Sequence[str] = RECOMMENDED_EXTENSIONS
) -> list[Codec]:
    """Return codecs whose identifier is in the recommended set."""
    wanted = set(extensions)
    return [codec for codec in codecs if codec.extension in wanted]


def select_by_names(codecs: Iterable[Codec], names: Iterable[str]) -> list[Codec]:
    """Return codecs matching the given names.

    A name matches a codec's human-readable name or its identifier.

    Args:
        codecs: Parsed codecs.
        names: Names chosen by the user.

    Returns:
        Matching codecs in listing order.

    Raises:
        UnknownCodecError: If any name matches no codec.
    """
    codecs = list(codecs)
    wanted = list(dict.fromkeys(names))
    known = {codec.name for codec in codecs} | {codec.extension for codec in codecs}
    unknown = [name for name in wanted if name not in known]
    if unknown:
        raise UnknownCodecError(unknown)

    chosen = set(wanted)
    return [
        codec
        for codec in codecs
        if codec.name in chosen or codec.extension in chosen
    ]


def select_codecs(
    codecs: Iterable[Codec],
    preset: SelectionPreset,
    names: Iterable[str] = (),
    hardware_suffixes: Sequence[str] = HARDWARE_SUFFIXES,
    recommended: Sequence[str] = RECOMMENDED_EXTENSIONS,
) -> list[Codec]:
    """Apply a selection preset to a parsed listing.

    Args:
        codecs: Parsed codecs.
        preset: Selection preset.
        names: Codec names for the CUSTOM preset.
        hardware_suffixes: Suffixes for the HARDWARE preset.
        recommended: Identifiers for the RECOMMENDED preset.

    Returns:
        Selected codecs in listing order.
    """
    if preset is SelectionPreset.HARDWARE:
        selected = select_hardware(codecs, hardware_suffixes)
    elif preset is SelectionPreset.RECOMMENDED:
        selected = select_recommended(codecs, recommended)
    else:
        selected = select_by_names(codecs, names)

    logger.info(
        "Selected %d codec(s) with preset %s: %s",
        len(selected),
        preset.value,
        ", ".join(codec.extension for codec in selected) or "none",
    )
    return selected
