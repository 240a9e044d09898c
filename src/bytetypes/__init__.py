"""
bytetypes — type-safe byte quantities.

Values tagged with a decimal unit (B, K, M, ..., Y) and optionally a traffic
direction. Same-unit arithmetic, explicit conversion, normalization for
display, parsing and formatting.
"""

from bytetypes.core.domain import (
    ByteParseError,
    Bytes,
    ByteTypesError,
    Direction,
    DirectionMismatchError,
    InvalidByteValueError,
    NetBytes,
    Size,
    SizeBoundaryError,
    SizeMismatchError,
    SomeNet,
    SomeNetDir,
    SomeNetSize,
    SomeSize,
    ZeroDivisorError,
)
from bytetypes.core.math import convert, is_normalized, normalize_value
from bytetypes.text import (
    FormatConfig,
    ParseResult,
    format_directed,
    format_sized,
    parse_bytes,
    parse_direction,
    parse_net_bytes,
    parse_size,
    parse_some_net,
    parse_some_net_dir,
    parse_some_net_size,
    parse_some_size,
)

__version__ = "0.1.0"

__all__ = [
    # Tags
    "Size",
    "Direction",
    # Quantities
    "Bytes",
    "SomeSize",
    "NetBytes",
    "SomeNetSize",
    "SomeNetDir",
    "SomeNet",
    # Math
    "convert",
    "normalize_value",
    "is_normalized",
    # Text
    "ParseResult",
    "parse_size",
    "parse_direction",
    "parse_bytes",
    "parse_some_size",
    "parse_net_bytes",
    "parse_some_net_size",
    "parse_some_net_dir",
    "parse_some_net",
    "FormatConfig",
    "format_sized",
    "format_directed",
    # Errors
    "ByteTypesError",
    "SizeMismatchError",
    "DirectionMismatchError",
    "SizeBoundaryError",
    "ZeroDivisorError",
    "InvalidByteValueError",
    "ByteParseError",
]
