"""
Numerical Safeguards — Проверки числовых значений байт

Библиотека не реализует собственную алгебру: сложение, умножение на скаляр,
деление, abs и сравнение предоставляет сам числовой тип (int, float,
Fraction, Decimal или любой numbers.Real). Модуль отвечает только за
границы допустимого:

- Допустимые значения: конечные вещественные числа
- Допустимые скаляры: вещественные числа (bool и byte-типы исключены)
- Несовместимые типы (Decimal с float/Fraction) → NotImplemented в операторах
- Деление на нулевой скаляр → ZeroDivisorError (а не тихий Inf)
- Сравнение с толерантностью для накопленной погрешности float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают внутрь Bytes (нормализация NaN не завершается)
2. Деление на ноль всегда явная ошибка
3. Точные типы (int, Fraction, Decimal) сравниваются без перевода во float
"""

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final, Protocol, Union

from bytetypes.core.domain.errors import InvalidByteValueError, ZeroDivisorError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (в единицах сравниваемых значений)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ТИПЫ
# =============================================================================

# Встроенные числовые типы, с которыми библиотека тестируется
Number = Union[int, float, Fraction, Decimal]


class SupportsByteArithmetic(Protocol):
    """
    Возможности, которые числовой тип должен предоставлять.

    Сложение/вычитание (аддитивная группа), умножение и деление на скаляр,
    abs, полный порядок и смешанные операции с int-литералом 1000.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __abs__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __ge__(self, other: Any) -> bool: ...


# =============================================================================
# ПРОВЕРКИ ЗНАЧЕНИЙ
# =============================================================================


def is_real_number(value: Any) -> bool:
    """
    Проверка, что value — вещественное число.

    Decimal не зарегистрирован как numbers.Real, поэтому проверяется
    отдельно. bool формально int, но количеством байт не является.

    Examples:
        >>> is_real_number(10)
        True
        >>> is_real_number(Fraction(1, 3))
        True
        >>> is_real_number(True)
        False
        >>> is_real_number(1 + 2j)
        False
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_valid_number(value: Any) -> bool:
    """
    Проверка, что value — конечное вещественное число (не NaN, не Inf).

    Рациональные значения (int, Fraction) всегда конечны и не переводятся
    во float: int за пределами float (10**400) остаётся валидным.
    """
    if not is_real_number(value):
        return False
    if isinstance(value, numbers.Rational):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def validate_byte_value(value: Any) -> Any:
    """
    Валидация значения для Bytes.

    Args:
        value: Числовое значение

    Returns:
        value без изменений (тип сохраняется)

    Raises:
        InvalidByteValueError: Если value не вещественное число или NaN/Inf
    """
    if not is_real_number(value):
        raise InvalidByteValueError(
            f"Byte value must be a real number, got {type(value).__name__}: {value!r}"
        )
    if not is_valid_number(value):
        raise InvalidByteValueError(f"Byte value must be finite (not NaN/Inf), got {value}")
    return value


def is_scalar(value: Any) -> bool:
    """Можно ли умножать/делить byte-значение на value."""
    return is_real_number(value)


def are_compatible(a: Any, b: Any) -> bool:
    """
    Поддерживает ли Python арифметику между a и b.

    Decimal складывается и умножается только с int и Decimal;
    смешивание с float или Fraction даёт TypeError внутри оператора.

    Examples:
        >>> are_compatible(Decimal("1"), 2)
        True
        >>> are_compatible(Decimal("1"), 0.5)
        False
        >>> are_compatible(Fraction(1, 2), 0.5)
        True
    """
    a_decimal = isinstance(a, Decimal)
    b_decimal = isinstance(b, Decimal)
    if a_decimal == b_decimal:
        return True
    other = b if a_decimal else a
    return isinstance(other, numbers.Integral)


def validate_divisor(divisor: Any) -> Any:
    """
    Проверка скалярного делителя.

    Raises:
        ZeroDivisorError: Если divisor == 0
    """
    if divisor == 0:
        raise ZeroDivisorError("Cannot divide a byte value by zero")
    return divisor


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def _as_fraction(value: Any) -> Fraction:
    if isinstance(value, (numbers.Rational, float, Decimal)):
        return Fraction(value)
    return Fraction(float(value))


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение с учётом накопленной погрешности.

    Алгоритм как в math.isclose:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    но вычисляется в Fraction, поэтому смешивание Decimal и float
    допустимо, а большие значения (Y → B) не переполняются.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(Decimal("1.5"), 1.5)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"Tolerances must be non-negative, got rel={rel_tol}, abs={abs_tol}")

    if a == b:
        return True

    fa = _as_fraction(a)
    fb = _as_fraction(b)
    diff = abs(fa - fb)
    bound = max(Fraction(rel_tol) * max(abs(fa), abs(fb)), Fraction(abs_tol))
    return diff <= bound
