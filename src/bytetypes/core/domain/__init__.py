"""
Domain models and value objects.

Contains the unit lattice (Size), traffic Direction, the tagged quantities
(Bytes, NetBytes) and their unit-erased wrappers.
"""

from bytetypes.core.domain.direction import Direction
from bytetypes.core.domain.errors import (
    ByteParseError,
    ByteTypesError,
    DirectionMismatchError,
    InvalidByteValueError,
    SizeBoundaryError,
    SizeMismatchError,
    ZeroDivisorError,
)
from bytetypes.core.domain.network import NetBytes, SomeNet, SomeNetDir, SomeNetSize
from bytetypes.core.domain.quantity import Bytes, SomeSize
from bytetypes.core.domain.size import LARGEST_SIZE, SMALLEST_SIZE, Size

__all__ = [
    # Tags
    "Size",
    "SMALLEST_SIZE",
    "LARGEST_SIZE",
    "Direction",
    # Quantities
    "Bytes",
    "SomeSize",
    "NetBytes",
    "SomeNetSize",
    "SomeNetDir",
    "SomeNet",
    # Errors
    "ByteTypesError",
    "SizeMismatchError",
    "DirectionMismatchError",
    "SizeBoundaryError",
    "ZeroDivisorError",
    "InvalidByteValueError",
    "ByteParseError",
]
