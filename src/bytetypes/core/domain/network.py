"""
Network — Байты с направлением трафика (Up / Down)

Тот же приём, что и Bytes/SomeSize, с дополнительной независимой осью
Direction. Четыре варианта по тому, что известно заранее:

    NetBytes     — известны и направление, и единица
    SomeNetSize  — известно направление, единица скрыта
    SomeNetDir   — известна единица, направление скрыто
    SomeNet      — скрыто и то, и другое

Конверсии между направлениями не существует. Поэтому:
- NetBytes и SomeNetSize складываются только при одинаковом направлении
  (иначе DirectionMismatchError)
- SomeNetDir и SomeNet не складываются и не упорядочиваются вовсе:
  скрытое направление нельзя проверить статически
- Равенство требует совпадения направления И равенства значений в B
"""

from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator

from bytetypes.core.domain.direction import Direction
from bytetypes.core.domain.errors import DirectionMismatchError, SizeMismatchError
from bytetypes.core.domain.quantity import Bytes, SomeSize
from bytetypes.core.domain.size import Size
from bytetypes.core.math.conversion import Conversion, convert, step_down, step_up
from bytetypes.core.math.normalization import normalize_value
from bytetypes.core.math.numerical_safeguards import (
    are_compatible,
    is_scalar,
    validate_byte_value,
    validate_divisor,
)


def _require_same_direction(left: Direction, right: Direction, operation: str) -> None:
    if left is not right:
        raise DirectionMismatchError(left, right, operation)


# =============================================================================
# NET BYTES
# =============================================================================


class NetBytes(BaseModel, Conversion):
    """
    Количество байт с направлением и единицей.

    Структурное равенство: направление, единица и значение.
    """

    direction: Direction = Field(..., description="Направление трафика")
    size: Size = Field(..., description="Единица измерения")
    value: Any = Field(..., description="Конечное вещественное значение в единице size")

    model_config = {"frozen": True}

    def __init__(self, direction: Direction, size: Size, value: Any) -> None:
        super().__init__(direction=direction, size=size, value=value)

    @classmethod
    def from_bytes(cls, direction: Direction, quantity: Bytes) -> "NetBytes":
        return cls(direction, quantity.size, quantity.value)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Any) -> Any:
        return validate_byte_value(v)

    def _require_compatible(self, other: "NetBytes", operation: str) -> None:
        _require_same_direction(self.direction, other.direction, operation)
        if self.size is not other.size:
            raise SizeMismatchError(self.size, other.size, operation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetBytes):
            return NotImplemented
        return (
            self.direction is other.direction
            and self.size is other.size
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.direction, self.size, self.value))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NetBytes):
            return NotImplemented
        self._require_compatible(other, "<")
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NetBytes):
            return NotImplemented
        self._require_compatible(other, "<=")
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NetBytes):
            return NotImplemented
        self._require_compatible(other, ">")
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NetBytes):
            return NotImplemented
        self._require_compatible(other, ">=")
        return self.value >= other.value

    def __add__(self, other: object) -> "NetBytes":
        if not isinstance(other, NetBytes):
            return NotImplemented
        self._require_compatible(other, "+")
        if not are_compatible(self.value, other.value):
            return NotImplemented
        return NetBytes(self.direction, self.size, self.value + other.value)

    def __sub__(self, other: object) -> "NetBytes":
        if not isinstance(other, NetBytes):
            return NotImplemented
        self._require_compatible(other, "-")
        if not are_compatible(self.value, other.value):
            return NotImplemented
        return NetBytes(self.direction, self.size, self.value - other.value)

    def __mul__(self, scalar: object) -> "NetBytes":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return NetBytes(self.direction, self.size, self.value * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "NetBytes":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        validate_divisor(scalar)
        return NetBytes(self.direction, self.size, self.value / scalar)

    def __neg__(self) -> "NetBytes":
        return NetBytes(self.direction, self.size, -self.value)

    def __abs__(self) -> "NetBytes":
        return NetBytes(self.direction, self.size, abs(self.value))

    def inc_size(self) -> "NetBytes":
        return NetBytes(self.direction, self.size.next_size(), step_up(self.value))

    def dec_size(self) -> "NetBytes":
        return NetBytes(self.direction, self.size.prev_size(), step_down(self.value))

    def convert_to(self, size: Size) -> "NetBytes":
        return NetBytes(self.direction, size, convert(self.size, size, self.value))

    def normalize(self) -> "SomeNetSize":
        size, value = normalize_value(self.size, self.value)
        return SomeNetSize(NetBytes(self.direction, size, value))

    def drop_direction(self) -> Bytes:
        """Забыть направление (обратного пути нет)."""
        return Bytes(self.size, self.value)

    def hide_size(self) -> "SomeNetSize":
        return SomeNetSize(self)

    def hide_direction(self) -> "SomeNetDir":
        return SomeNetDir(self)

    def hide_all(self) -> "SomeNet":
        return SomeNet(self)

    def map(self, fn: Callable[[Any], Any]) -> "NetBytes":
        """Применение fn к значению; направление и единица сохраняются."""
        return NetBytes(self.direction, self.size, fn(self.value))

    def __str__(self) -> str:
        return f"{self.value} {self.size.short_name} {self.direction.long_name}"


# =============================================================================
# ОБЩАЯ БАЗА ДЛЯ ОБЁРТОК
# =============================================================================


class _NetWrapper(BaseModel, Conversion):
    """Обёртка над NetBytes: свидетели направления и единицы берутся из него."""

    quantity: NetBytes = Field(..., description="Обёрнутое значение")

    model_config = {"frozen": True}

    def __init__(self, quantity: NetBytes) -> None:
        super().__init__(quantity=quantity)

    @property
    def direction(self) -> Direction:
        return self.quantity.direction

    @property
    def size(self) -> Size:
        return self.quantity.size

    @property
    def value(self) -> Any:
        return self.quantity.value

    def _base_value(self) -> Any:
        return convert(self.size, Size.B, self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.direction is other.direction and self._base_value() == other._base_value()

    def __hash__(self) -> int:
        return hash((self.direction, self._base_value()))

    def map(self, fn: Callable[[Any], Any]) -> Any:
        """Применение fn к значению; вариант обёртки, направление и единица сохраняются."""
        return type(self)(self.quantity.map(fn))

    def __str__(self) -> str:
        return str(self.quantity)


# =============================================================================
# SOME NET SIZE
# =============================================================================


class SomeNetSize(_NetWrapper):
    """
    Направление известно, единица скрыта.

    Ведёт себя как SomeSize внутри одного направления: порядок и
    арифметика через B, результат нормализован.

    Examples:
        >>> up_k = NetBytes(Direction.UP, Size.K, 1000).hide_size()
        >>> up_k == NetBytes(Direction.UP, Size.M, 1).hide_size()
        True
    """

    def _require_same_direction(self, other: "SomeNetSize", operation: str) -> None:
        _require_same_direction(self.direction, other.direction, operation)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SomeNetSize):
            return NotImplemented
        self._require_same_direction(other, "<")
        return self._base_value() < other._base_value()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SomeNetSize):
            return NotImplemented
        self._require_same_direction(other, "<=")
        return self._base_value() <= other._base_value()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SomeNetSize):
            return NotImplemented
        self._require_same_direction(other, ">")
        return self._base_value() > other._base_value()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SomeNetSize):
            return NotImplemented
        self._require_same_direction(other, ">=")
        return self._base_value() >= other._base_value()

    def __add__(self, other: object) -> "SomeNetSize":
        if not isinstance(other, SomeNetSize):
            return NotImplemented
        self._require_same_direction(other, "+")
        left, right = self._base_value(), other._base_value()
        if not are_compatible(left, right):
            return NotImplemented
        total = left + right
        return NetBytes(self.direction, Size.B, total).normalize()

    def __sub__(self, other: object) -> "SomeNetSize":
        if not isinstance(other, SomeNetSize):
            return NotImplemented
        self._require_same_direction(other, "-")
        left, right = self._base_value(), other._base_value()
        if not are_compatible(left, right):
            return NotImplemented
        total = left - right
        return NetBytes(self.direction, Size.B, total).normalize()

    def __mul__(self, scalar: object) -> "SomeNetSize":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return (self.quantity * scalar).normalize()

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "SomeNetSize":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return (self.quantity / scalar).normalize()

    def __neg__(self) -> "SomeNetSize":
        return SomeNetSize(-self.quantity)

    def __abs__(self) -> "SomeNetSize":
        return SomeNetSize(abs(self.quantity))

    def convert_to(self, size: Size) -> NetBytes:
        return self.quantity.convert_to(size)

    def normalize(self) -> "SomeNetSize":
        return self.quantity.normalize()

    def hide_direction(self) -> "SomeNet":
        return SomeNet(self.quantity)

    def drop_direction(self) -> SomeSize:
        return SomeSize(self.quantity.drop_direction())


# =============================================================================
# SOME NET DIR
# =============================================================================


class SomeNetDir(_NetWrapper):
    """
    Единица известна, направление скрыто.

    Сложение, вычитание и порядок не предоставляются: направление
    нельзя проверить заранее. Умножение на скаляр сохраняет единицу.
    """

    def __mul__(self, scalar: object) -> "SomeNetDir":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return SomeNetDir(self.quantity * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "SomeNetDir":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return SomeNetDir(self.quantity / scalar)

    def convert_to(self, size: Size) -> "SomeNetDir":
        return SomeNetDir(self.quantity.convert_to(size))

    def normalize(self) -> "SomeNet":
        return SomeNet(self.quantity.normalize().quantity)

    def drop_direction(self) -> Bytes:
        return self.quantity.drop_direction()


# =============================================================================
# SOME NET
# =============================================================================


class SomeNet(_NetWrapper):
    """
    Скрыты и направление, и единица.

    Examples:
        >>> up_k = SomeNet(NetBytes(Direction.UP, Size.K, 1000))
        >>> up_k == SomeNet(NetBytes(Direction.UP, Size.M, 1))
        True
        >>> up_k == SomeNet(NetBytes(Direction.DOWN, Size.M, 1))
        False
    """

    def __mul__(self, scalar: object) -> "SomeNet":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return (self.quantity * scalar).normalize().hide_direction()

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "SomeNet":
        if not is_scalar(scalar) or not are_compatible(self.value, scalar):
            return NotImplemented
        return (self.quantity / scalar).normalize().hide_direction()

    def convert_to(self, size: Size) -> SomeNetDir:
        return SomeNetDir(self.quantity.convert_to(size))

    def normalize(self) -> "SomeNet":
        return self.quantity.normalize().hide_direction()

    def drop_direction(self) -> SomeSize:
        return SomeSize(self.quantity.drop_direction())
