"""
Bytes / SomeSize — Количество байт с единицей измерения

Bytes — числовое значение, помеченное единицей Size. Арифметика и сравнение
разрешены только между значениями одной единицы; разные единицы требуют
явной конверсии (to_k(), convert_to(...)), иначе SizeMismatchError.

SomeSize — обёртка над Bytes, единица которой становится известна только
во время выполнения (например, результат нормализации или разбора текста).
Свидетель единицы — size обёрнутого Bytes, поэтому рассинхронизация
свидетеля и значения непредставима.

ЭКВИВАЛЕНТНОСТЬ SomeSize:
    x == y  ⇔  x.to_b().value == y.to_b().value

    SomeSize.of(Size.K, 1000) == SomeSize.of(Size.M, 1)

Это сознательно грубее структурного равенства и нарушает подстановочность
(x == y, но x.size != y.size). Порядок, hash и арифметика согласованы
именно с этой эквивалентностью; результаты +, -, * и / нормализуются.
"""

from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator

from bytetypes.core.domain.errors import SizeMismatchError
from bytetypes.core.domain.size import Size
from bytetypes.core.math.conversion import Conversion, convert, step_down, step_up
from bytetypes.core.math.normalization import normalize_value
from bytetypes.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    are_compatible,
    is_close,
    is_scalar,
    validate_byte_value,
    validate_divisor,
)


# =============================================================================
# BYTES
# =============================================================================


class Bytes(BaseModel, Conversion):
    """
    Количество байт в заданной единице.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.

    Examples:
        >>> Bytes(Size.M, 20) + Bytes(Size.M, 50)
        Bytes(size=<Size.M: 'M'>, value=70)
        >>> Bytes(Size.M, 2500).inc_size()
        Bytes(size=<Size.G: 'G'>, value=2.5)
    """

    size: Size = Field(..., description="Единица измерения")
    value: Any = Field(..., description="Конечное вещественное значение в единице size")

    model_config = {"frozen": True}

    def __init__(self, size: Size, value: Any) -> None:
        super().__init__(size=size, value=value)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        """Только конечные вещественные числа (не bool, не NaN/Inf)."""
        return validate_byte_value(v)

    def _require_same_size(self, other: "Bytes", operation: str) -> None:
        if self.size is not other.size:
            raise SizeMismatchError(self.size, other.size, operation)

    # -------------------------------------------------------------------------
    # Равенство и порядок (только внутри одной единицы)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        return self.size is other.size and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.size, self.value))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        self._require_same_size(other, "<")
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        self._require_same_size(other, "<=")
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        self._require_same_size(other, ">")
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        self._require_same_size(other, ">=")
        return self.value >= other.value

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Bytes":
        if not isinstance(other, Bytes):
            return NotImplemented
        self._require_same_size(other, "+")
        if not are_compatible(self.value, other.value):
            return NotImplemented
        return Bytes(self.size, self.value + other.value)

    def __sub__(self, other: object) -> "Bytes":
        if not isinstance(other, Bytes):
            return NotImplemented
        self._require_same_size(other, "-")
        if not are_compatible(self.value, other.value):
            return NotImplemented
        return Bytes(self.size, self.value - other.value)

    def __mul__(self, scalar: object) -> "Bytes":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return Bytes(self.size, self.value * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "Bytes":
        """
        Деление на ненулевой скаляр.

        Raises:
            ZeroDivisorError: Если scalar == 0
        """
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        validate_divisor(scalar)
        return Bytes(self.size, self.value / scalar)

    def __neg__(self) -> "Bytes":
        return Bytes(self.size, -self.value)

    def __abs__(self) -> "Bytes":
        return Bytes(self.size, abs(self.value))

    # -------------------------------------------------------------------------
    # Единицы
    # -------------------------------------------------------------------------

    def inc_size(self) -> "Bytes":
        """
        Переход к следующей единице (значение / 1000).

        Raises:
            SizeBoundaryError: Для Y
        """
        return Bytes(self.size.next_size(), step_up(self.value))

    def dec_size(self) -> "Bytes":
        """
        Переход к предыдущей единице (значение * 1000).

        Raises:
            SizeBoundaryError: Для B
        """
        return Bytes(self.size.prev_size(), step_down(self.value))

    def convert_to(self, size: Size) -> "Bytes":
        return Bytes(size, convert(self.size, size, self.value))

    def normalize(self) -> "SomeSize":
        """Перевод в единицу, где |value| попадает в [1, 1000)."""
        size, value = normalize_value(self.size, self.value)
        return SomeSize(Bytes(size, value))

    def hide_size(self) -> "SomeSize":
        """Обёртка в SomeSize без нормализации."""
        return SomeSize(self)

    def map(self, fn: Callable[[Any], Any]) -> "Bytes":
        """
        Применение fn к значению с сохранением единицы.

        Результат проходит ту же валидацию, что и конструктор: NaN, Inf
        или не-число дают ValidationError.

        Examples:
            >>> Bytes(Size.K, 7).map(Fraction)
            Bytes(size=<Size.K: 'K'>, value=Fraction(7, 1))
        """
        return Bytes(self.size, fn(self.value))

    def __str__(self) -> str:
        return f"{self.value} {self.size.short_name}"


# =============================================================================
# SOME SIZE
# =============================================================================


class SomeSize(BaseModel, Conversion):
    """
    Bytes с единицей, известной только во время выполнения.

    Равенство, порядок и hash определены через значение в B
    (см. docstring модуля). Арифметика всегда возвращает
    нормализованный результат.
    """

    quantity: Bytes = Field(..., description="Обёрнутое значение; его size — свидетель единицы")

    model_config = {"frozen": True}

    def __init__(self, quantity: Bytes) -> None:
        super().__init__(quantity=quantity)

    @classmethod
    def of(cls, size: Size, value: Any) -> "SomeSize":
        return cls(Bytes(size, value))

    @classmethod
    def zero(cls) -> "SomeSize":
        """Нейтральный элемент сложения: 0 B."""
        return cls(Bytes(Size.B, 0))

    @property
    def size(self) -> Size:
        return self.quantity.size

    @property
    def value(self) -> Any:
        return self.quantity.value

    def _base_value(self) -> Any:
        return convert(self.size, Size.B, self.value)

    # -------------------------------------------------------------------------
    # Эквивалентность через B
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SomeSize):
            return NotImplemented
        return self._base_value() == other._base_value()

    def __hash__(self) -> int:
        return hash(self._base_value())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SomeSize):
            return NotImplemented
        return self._base_value() < other._base_value()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SomeSize):
            return NotImplemented
        return self._base_value() <= other._base_value()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SomeSize):
            return NotImplemented
        return self._base_value() > other._base_value()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SomeSize):
            return NotImplemented
        return self._base_value() >= other._base_value()

    def is_close(
        self,
        other: "SomeSize",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое равенство в B (abs_tol задаётся в байтах).

        Для float после цепочек конверсий точное == может не выполняться.
        """
        return is_close(self._base_value(), other._base_value(), rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------------------------------------------------
    # Арифметика (результат нормализован)
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "SomeSize":
        if not isinstance(other, SomeSize):
            return NotImplemented
        left, right = self._base_value(), other._base_value()
        if not are_compatible(left, right):
            return NotImplemented
        return Bytes(Size.B, left + right).normalize()

    def __sub__(self, other: object) -> "SomeSize":
        if not isinstance(other, SomeSize):
            return NotImplemented
        left, right = self._base_value(), other._base_value()
        if not are_compatible(left, right):
            return NotImplemented
        return Bytes(Size.B, left - right).normalize()

    def __mul__(self, scalar: object) -> "SomeSize":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return (self.quantity * scalar).normalize()

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "SomeSize":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return (self.quantity / scalar).normalize()

    def __neg__(self) -> "SomeSize":
        return SomeSize(-self.quantity)

    def __abs__(self) -> "SomeSize":
        return SomeSize(abs(self.quantity))

    # -------------------------------------------------------------------------
    # Единицы
    # -------------------------------------------------------------------------

    def convert_to(self, size: Size) -> Bytes:
        return self.quantity.convert_to(size)

    def normalize(self) -> "SomeSize":
        return self.quantity.normalize()

    def map(self, fn: Callable[[Any], Any]) -> "SomeSize":
        """Применение fn к значению; единица сохраняется, нормализации нет."""
        return SomeSize(self.quantity.map(fn))

    def __str__(self) -> str:
        return str(self.quantity)
