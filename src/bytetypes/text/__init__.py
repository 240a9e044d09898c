"""
Text representation: parsing and formatting of byte values.
"""

from bytetypes.text.formatting import (
    CaseStyle,
    DirectionStyle,
    FormatConfig,
    SizeStyle,
    format_direction_label,
    format_directed,
    format_number,
    format_size_label,
    format_sized,
)
from bytetypes.text.parsing import (
    ParseFailure,
    ParseResult,
    parse_bytes,
    parse_direction,
    parse_net_bytes,
    parse_size,
    parse_some_net,
    parse_some_net_dir,
    parse_some_net_size,
    parse_some_size,
)

__all__ = [
    # Parsing
    "ParseFailure",
    "ParseResult",
    "parse_size",
    "parse_direction",
    "parse_bytes",
    "parse_some_size",
    "parse_net_bytes",
    "parse_some_net_size",
    "parse_some_net_dir",
    "parse_some_net",
    # Formatting
    "FormatConfig",
    "SizeStyle",
    "CaseStyle",
    "DirectionStyle",
    "format_number",
    "format_size_label",
    "format_direction_label",
    "format_sized",
    "format_directed",
]
