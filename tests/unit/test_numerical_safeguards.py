"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Допустимые типы значений (int, float, Fraction, Decimal; не bool/complex/str)
2. NaN/Inf отклоняются
3. Деление на ноль — явная ошибка
4. Epsilon-сравнения (в том числе смешанные Decimal/float)
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from bytetypes.core.domain.errors import InvalidByteValueError, ZeroDivisorError
from bytetypes.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    are_compatible,
    is_close,
    is_real_number,
    is_scalar,
    is_valid_number,
    validate_byte_value,
    validate_divisor,
)

# =============================================================================
# ТЕСТЫ ТИПОВ ЗНАЧЕНИЙ
# =============================================================================


class TestIsRealNumber:
    """Тесты для is_real_number"""

    @pytest.mark.parametrize("value", [0, -5, 1.5, Fraction(1, 3), Decimal("2.5")])
    def test_real_numbers_accepted(self, value) -> None:
        assert is_real_number(value)

    @pytest.mark.parametrize("value", [True, False, 1 + 2j, "10", None, [1]])
    def test_non_real_rejected(self, value) -> None:
        """bool формально int, но не количество байт"""
        assert not is_real_number(value)

    def test_scalar_same_as_real(self) -> None:
        assert is_scalar(3)
        assert not is_scalar(True)


class TestIsValidNumber:
    """Тесты для is_valid_number"""

    def test_finite_values(self) -> None:
        assert is_valid_number(1.0)
        assert is_valid_number(Decimal("1e100"))
        assert is_valid_number(Fraction(1, 7))

    def test_huge_int_is_valid(self) -> None:
        """int вне диапазона float остаётся валидным"""
        assert is_valid_number(10**400)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, Decimal("NaN"), Decimal("Infinity")])
    def test_non_finite_rejected(self, value) -> None:
        assert not is_valid_number(value)


class TestValidateByteValue:
    """Тесты для validate_byte_value"""

    def test_returns_value_unchanged(self) -> None:
        value = Fraction(5, 3)
        assert validate_byte_value(value) is value

    def test_nan_rejected(self) -> None:
        with pytest.raises(InvalidByteValueError, match="finite"):
            validate_byte_value(math.nan)

    def test_non_number_rejected(self) -> None:
        with pytest.raises(InvalidByteValueError, match="real number"):
            validate_byte_value("70")

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_byte_value(math.inf)


class TestValidateDivisor:
    """Тесты для validate_divisor"""

    def test_non_zero_passes(self) -> None:
        assert validate_divisor(2) == 2
        assert validate_divisor(-0.5) == -0.5

    @pytest.mark.parametrize("zero", [0, 0.0, Fraction(0), Decimal("0")])
    def test_zero_rejected(self, zero) -> None:
        with pytest.raises(ZeroDivisorError):
            validate_divisor(zero)

    def test_zero_divisor_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            validate_divisor(0)


class TestAreCompatible:
    """Тесты для are_compatible"""

    @pytest.mark.parametrize("other", [2, Decimal("0.5")])
    def test_decimal_with_int_or_decimal(self, other) -> None:
        assert are_compatible(Decimal("1"), other)
        assert are_compatible(other, Decimal("1"))

    @pytest.mark.parametrize("other", [0.5, Fraction(1, 2)])
    def test_decimal_with_float_or_fraction(self, other) -> None:
        assert not are_compatible(Decimal("1"), other)
        assert not are_compatible(other, Decimal("1"))

    def test_without_decimal(self) -> None:
        assert are_compatible(Fraction(1, 2), 0.5)
        assert are_compatible(1, 0.5)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_float_drift(self) -> None:
        assert is_close(0.1 + 0.2, 0.3)

    def test_exact_equal(self) -> None:
        assert is_close(Fraction(1, 3), Fraction(1, 3))

    def test_mixed_types(self) -> None:
        assert is_close(Decimal("1.5"), 1.5)
        assert is_close(Fraction(1, 2), 0.5)

    def test_far_values(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_large_values_do_not_overflow(self) -> None:
        """Значения Y в B (1e24) сравниваются относительно"""
        assert is_close(10**24, 10**24 * (1 + 1e-12))
        assert not is_close(10**24, 10**24 * 1.001)

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError):
            is_close(1.0, 1.0, rel_tol=-1)
