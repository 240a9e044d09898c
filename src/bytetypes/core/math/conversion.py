"""
Conversion — Конверсия значений между единицами

Единственный допустимый способ перевода числового значения из одной
единицы Size в другую:

    convert(from, to, x) = x * 1000 ** (rank(from) - rank(to))

Для Fraction (и Decimal в пределах точности контекста) конверсия точная,
это эталонная семантика. Для float результат — приближение, погрешность
накапливается при повторных шагах. int при переходе к большей единице
делится по правилам Python (true division → float); если частное выходит
за диапазон float, результат — точный Fraction.

ФОРМУЛЫ:
    conversion_exponent(from, to) = rank(from) - rank(to)
    step_up(x)   = x / 1000   (единица становится на шаг больше)
    step_down(x) = x * 1000   (единица становится на шаг меньше)
"""

import numbers
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Final

from bytetypes.core.domain.size import Size

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Множитель между соседними единицами (десятичные приставки)
SIZE_STEP_FACTOR: Final[int] = 1000


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def conversion_exponent(from_size: Size, to_size: Size) -> int:
    """
    Показатель степени 1000 между единицами.

    Examples:
        >>> conversion_exponent(Size.G, Size.K)
        2
        >>> conversion_exponent(Size.B, Size.M)
        -2
    """
    return from_size.rank - to_size.rank


def conversion_factor(from_size: Size, to_size: Size) -> Fraction:
    """
    Точный множитель для перевода значения из from_size в to_size.

    Examples:
        >>> conversion_factor(Size.K, Size.B)
        Fraction(1000, 1)
        >>> conversion_factor(Size.B, Size.K)
        Fraction(1, 1000)
    """
    exponent = conversion_exponent(from_size, to_size)
    if exponent >= 0:
        return Fraction(SIZE_STEP_FACTOR**exponent)
    return Fraction(1, SIZE_STEP_FACTOR ** (-exponent))


def _divide(value: Any, divisor: int) -> Any:
    """
    value / divisor без переполнения для больших int.

    int делится по правилам Python (→ float). Если результат не помещается
    во float (10**400 / 1000), возвращается точный Fraction.
    """
    if isinstance(value, numbers.Integral):
        try:
            return value / divisor
        except OverflowError:
            return Fraction(value, divisor)
    return value / divisor


def convert(from_size: Size, to_size: Size, value: Any) -> Any:
    """
    Конверсия значения между единицами.

    Множитель применяется как int (умножение или деление), поэтому тип
    значения сохраняется там, где это позволяет его арифметика:
    Fraction → Fraction, Decimal → Decimal, float → float.

    Args:
        from_size: Исходная единица
        to_size: Целевая единица
        value: Значение в from_size

    Returns:
        Значение в to_size

    Examples:
        >>> convert(Size.M, Size.K, 7)
        7000
        >>> convert(Size.K, Size.M, Fraction(7))
        Fraction(7, 1000)
    """
    exponent = conversion_exponent(from_size, to_size)
    if exponent == 0:
        return value
    if exponent > 0:
        return value * SIZE_STEP_FACTOR**exponent
    return _divide(value, SIZE_STEP_FACTOR ** (-exponent))


def step_up(value: Any) -> Any:
    """Значение в следующей (большей) единице."""
    return _divide(value, SIZE_STEP_FACTOR)


def step_down(value: Any) -> Any:
    """Значение в предыдущей (меньшей) единице."""
    return value * SIZE_STEP_FACTOR


# =============================================================================
# CONVERSION MIXIN
# =============================================================================


class Conversion(ABC):
    """
    Девять именованных конверсий поверх convert_to.

    Тип результата определяет реализация convert_to: для Bytes и SomeSize
    это Bytes, для сетевых типов — NetBytes или SomeNetDir.
    """

    @abstractmethod
    def convert_to(self, size: Size) -> Any:
        """Конверсия в явно заданную единицу."""

    def to_b(self) -> Any:
        return self.convert_to(Size.B)

    def to_k(self) -> Any:
        return self.convert_to(Size.K)

    def to_m(self) -> Any:
        return self.convert_to(Size.M)

    def to_g(self) -> Any:
        return self.convert_to(Size.G)

    def to_t(self) -> Any:
        return self.convert_to(Size.T)

    def to_p(self) -> Any:
        return self.convert_to(Size.P)

    def to_e(self) -> Any:
        return self.convert_to(Size.E)

    def to_z(self) -> Any:
        return self.convert_to(Size.Z)

    def to_y(self) -> Any:
        return self.convert_to(Size.Y)
