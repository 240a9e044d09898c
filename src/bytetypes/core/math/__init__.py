"""
Conversion math: unit factors, normalization window, numeric safeguards.
"""

from bytetypes.core.math.conversion import (
    SIZE_STEP_FACTOR,
    Conversion,
    conversion_exponent,
    conversion_factor,
    convert,
    step_down,
    step_up,
)
from bytetypes.core.math.normalization import (
    NORMALIZED_LOWER_BOUND,
    NORMALIZED_UPPER_BOUND,
    is_normalized,
    normalize_value,
)
from bytetypes.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    Number,
    SupportsByteArithmetic,
    are_compatible,
    is_close,
    is_real_number,
    is_scalar,
    is_valid_number,
    validate_byte_value,
    validate_divisor,
)

__all__ = [
    # Conversion
    "SIZE_STEP_FACTOR",
    "Conversion",
    "conversion_exponent",
    "conversion_factor",
    "convert",
    "step_up",
    "step_down",
    # Normalization
    "NORMALIZED_LOWER_BOUND",
    "NORMALIZED_UPPER_BOUND",
    "is_normalized",
    "normalize_value",
    # Numerical safeguards
    "EPS_FLOAT_COMPARE_REL",
    "EPS_FLOAT_COMPARE_ABS",
    "Number",
    "SupportsByteArithmetic",
    "is_real_number",
    "is_valid_number",
    "is_scalar",
    "are_compatible",
    "validate_byte_value",
    "validate_divisor",
    "is_close",
]
