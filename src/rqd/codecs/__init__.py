"""ffmpeg codec capability listing: parser, models and selection.

Parses the output of ``ffmpeg -codecs`` into typed Codec records and
filters them into benchmark selections.
"""

from rqd.codecs.errors import (
    CodecListingError,
    EmptyFieldError,
    LineParseError,
    StructuralError,
    UnknownCodecError,
)
from rqd.codecs.models import KIND_LETTERS, Codec, CodecKind
from rqd.codecs.parser import (
    SEPARATOR_MARKER,
    parse_codec_line,
    parse_codec_listing,
    split_listing,
)
from rqd.codecs.selection import (
    HARDWARE_SUFFIXES,
    RECOMMENDED_EXTENSIONS,
    SelectionPreset,
    is_hardware_coder,
    select_by_names,
    select_codecs,
    select_hardware,
    select_recommended,
    select_video_encodable,
)

__all__ = [
    # Models
    "Codec",
    "CodecKind",
    "KIND_LETTERS",
    # Errors
    "CodecListingError",
    "EmptyFieldError",
    "LineParseError",
    "StructuralError",
    "UnknownCodecError",
    # Parser
    "SEPARATOR_MARKER",
    "parse_codec_line",
    "parse_codec_listing",
    "split_listing",
    # Selection
    "HARDWARE_SUFFIXES",
    "RECOMMENDED_EXTENSIONS",
    "SelectionPreset",
    "is_hardware_coder",
    "select_by_names",
    "select_codecs",
    "select_hardware",
    "select_recommended",
    "select_video_encodable",
]
