"""
Contract Validation Module

JSON Schema контракты для обмена byte-значениями.
"""

from .payloads import decode_value, encode_value, from_payload, to_payload
from .validators import (
    ByteQuantityValidator,
    ContractValidator,
    SchemaLoader,
    validate_byte_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ByteQuantityValidator",
    # Functions
    "validate_byte_quantity",
    "to_payload",
    "from_payload",
    "encode_value",
    "decode_value",
]
