"""
Formatting — Отображение byte-значений в текст

Конфигурируемая альтернатива str(): число, единица, направление.

    format_sized(Bytes(Size.K, 70))                         → "70 K"
    format_sized(Bytes(Size.K, 70), FormatConfig(size_style=SizeStyle.LONG,
                                                 case_style=CaseStyle.LOWER))
                                                            → "70 kilobytes"
    format_directed(NetBytes(Direction.UP, Size.M, 1.5))    → "1.5 M up"

Конфигурация по умолчанию даёт тот же текст, что и str().
Регистр (case_style) применяется только к обозначению единицы;
направление всегда в нижнем регистре.
"""

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Optional

from pydantic import BaseModel, Field

from bytetypes.core.domain.direction import Direction
from bytetypes.core.domain.size import Size


class SizeStyle(str, Enum):
    """Вид обозначения единицы."""

    SHORT = "SHORT"  # K
    MEDIUM = "MEDIUM"  # KB
    LONG = "LONG"  # kilobytes


class CaseStyle(str, Enum):
    """Регистр обозначения единицы."""

    UPPER = "UPPER"
    LOWER = "LOWER"
    TITLE = "TITLE"


class DirectionStyle(str, Enum):
    """Вид обозначения направления."""

    SHORT = "SHORT"  # u / d
    LONG = "LONG"  # up / down


class FormatConfig(BaseModel):
    """
    Параметры отображения.

    decimals=None выводит значение как есть (str(value)).
    """

    decimals: Optional[int] = Field(None, ge=0, description="Знаков после запятой")
    size_style: SizeStyle = Field(SizeStyle.SHORT, description="Вид единицы")
    case_style: CaseStyle = Field(CaseStyle.UPPER, description="Регистр единицы")
    direction_style: DirectionStyle = Field(DirectionStyle.LONG, description="Вид направления")

    model_config = {"frozen": True}


DEFAULT_FORMAT_CONFIG = FormatConfig()


def format_number(value: Any, decimals: Optional[int] = None) -> str:
    """
    Число с фиксированным количеством знаков после запятой.

    Fraction переводится через Decimal, чтобы не терять точность
    на больших значениях.

    Examples:
        >>> format_number(2.5, 2)
        '2.50'
        >>> format_number(Fraction(1, 3), 3)
        '0.333'
        >>> format_number(70)
        '70'
    """
    if decimals is None:
        return str(value)
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    if isinstance(value, Fraction):
        value = Decimal(value.numerator) / Decimal(value.denominator)
    return format(value, f".{decimals}f")


def format_size_label(size: Size, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    if config.size_style is SizeStyle.SHORT:
        label = size.short_name
    elif config.size_style is SizeStyle.MEDIUM:
        label = size.medium_name
    else:
        label = size.long_name

    if config.case_style is CaseStyle.UPPER:
        return label.upper()
    if config.case_style is CaseStyle.LOWER:
        return label.lower()
    return label.title()


def format_direction_label(direction: Direction, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    if config.direction_style is DirectionStyle.SHORT:
        return direction.short_name
    return direction.long_name


def format_sized(quantity: Any, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """
    "<число> <единица>" для любого значения с атрибутами size и value.

    Args:
        quantity: Bytes, SomeSize или сетевой тип
        config: Параметры отображения
    """
    number = format_number(quantity.value, config.decimals)
    return f"{number} {format_size_label(quantity.size, config)}"


def format_directed(quantity: Any, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """"<число> <единица> <направление>" для сетевых типов."""
    direction = format_direction_label(quantity.direction, config)
    return f"{format_sized(quantity, config)} {direction}"
