"""
Payloads — JSON-представление byte-значений

Формат (контракт byte_quantity.json):

    {"size": "K", "value": 70}
    {"size": "M", "value": "1.5", "direction": "up"}
    {"size": "B", "value": "1/3"}

Кодирование value:
- int, float → JSON number
- Decimal → десятичная строка без экспоненты ("1000", "0.001")
- Fraction → строка "n/d" (точное значение)

Декодирование восстанавливает тип: "n/d" → Fraction, десятичная
строка → Decimal, number → int/float.

Единица и направление, известные заранее (Bytes, NetBytes), после
декодирования становятся известны только во время выполнения:
from_payload возвращает SomeSize или SomeNet.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Union

from bytetypes.core.contracts.validators import validate_byte_quantity
from bytetypes.core.domain.direction import Direction
from bytetypes.core.domain.network import NetBytes, SomeNet, SomeNetDir, SomeNetSize
from bytetypes.core.domain.quantity import Bytes, SomeSize
from bytetypes.core.domain.size import Size

ByteQuantity = Union[Bytes, SomeSize, NetBytes, SomeNetSize, SomeNetDir, SomeNet]


def encode_value(value: Any) -> Union[int, float, str]:
    if isinstance(value, Fraction):
        return f"{value.numerator}/{value.denominator}"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (int, float)):
        return value
    raise TypeError(f"Cannot encode byte value of type {type(value).__name__}")


def decode_value(raw: Union[int, float, str]) -> Any:
    if isinstance(raw, str):
        if "/" in raw:
            return Fraction(raw)
        return Decimal(raw)
    return raw


def to_payload(quantity: ByteQuantity) -> Dict[str, Any]:
    """
    JSON-совместимый dict для любого byte-типа.

    Examples:
        >>> to_payload(Bytes(Size.K, 70))
        {'size': 'K', 'value': 70}
        >>> to_payload(NetBytes(Direction.UP, Size.M, Fraction(1, 3)))
        {'size': 'M', 'value': '1/3', 'direction': 'up'}
    """
    payload: Dict[str, Any] = {
        "size": quantity.size.value,
        "value": encode_value(quantity.value),
    }
    if isinstance(quantity, (NetBytes, SomeNetSize, SomeNetDir, SomeNet)):
        payload["direction"] = quantity.direction.value
    return payload


def from_payload(data: Dict[str, Any]) -> Union[SomeSize, SomeNet]:
    """
    Восстановление значения из payload.

    Args:
        data: dict по контракту byte_quantity

    Returns:
        SomeSize (без direction) или SomeNet (с direction)

    Raises:
        jsonschema.ValidationError: Если data не соответствует контракту
        pydantic.ValidationError: Если value не конечно (NaN/Inf)
    """
    validate_byte_quantity(data)

    size = Size(data["size"])
    value = decode_value(data["value"])
    if "direction" in data:
        return SomeNet(NetBytes(Direction(data["direction"]), size, value))
    return SomeSize.of(size, value)
