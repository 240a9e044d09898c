"""
Errors — Таксономия ошибок bytetypes

Все ошибки библиотеки наследуются от ByteTypesError и одновременно от
встроенного исключения соответствующей природы (TypeError, ValueError,
ZeroDivisionError), поэтому существующие except-блоки продолжают работать.

КАТЕГОРИИ:
1. SizeMismatchError — same-unit операция над разными Size
2. DirectionMismatchError — операция над разными Direction
3. SizeBoundaryError — next для Y / prev для B
4. ZeroDivisorError — деление на нулевой скаляр
5. InvalidByteValueError — не-вещественное значение, NaN, ±Inf
6. ByteParseError — только из ParseResult.unwrap()
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bytetypes.text.parsing import ParseFailure


class ByteTypesError(Exception):
    """Базовый класс для всех ошибок bytetypes."""

    pass


class SizeMismatchError(ByteTypesError, TypeError):
    """
    Same-unit операция (+, -, <, ...) над значениями с разными Size.

    Аналог статической ошибки типов: перед комбинированием значения
    нужно явно сконвертировать (to_k(), convert_to(...)).
    """

    def __init__(self, left, right, operation: str):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(
            f"Cannot apply '{operation}' to sizes {left.value} and {right.value}; "
            f"convert one operand first"
        )


class DirectionMismatchError(ByteTypesError, TypeError):
    """
    Операция над сетевыми значениями с разными Direction.

    Uploaded и downloaded трафик не конвертируются друг в друга.
    """

    def __init__(self, left, right, operation: str):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(
            f"Cannot apply '{operation}' to directions {left.value} and {right.value}"
        )


class SizeBoundaryError(ByteTypesError, ValueError):
    """Выход за пределы решётки единиц: next для Y или prev для B."""

    pass


class ZeroDivisorError(ByteTypesError, ZeroDivisionError):
    """Деление byte-значения на нулевой скаляр."""

    pass


class InvalidByteValueError(ByteTypesError, ValueError):
    """
    Значение не может быть количеством байт.

    Допустимы только конечные вещественные числа (int, float, Fraction,
    Decimal, numbers.Real). bool, complex, str, NaN и ±Inf отклоняются.
    """

    pass


class ByteParseError(ByteTypesError, ValueError):
    """Ошибка разбора текста, поднятая явно через ParseResult.unwrap()."""

    def __init__(self, failure: "ParseFailure"):
        self.failure = failure
        super().__init__(str(failure))
