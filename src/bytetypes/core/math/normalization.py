"""
Normalization — Выбор единицы для отображения значения

Нормализация переводит значение в такую единицу, что его модуль m
попадает в окно [1, 1000):

- Внутренние единицы (K..Z): 1 <= m < 1000
- B (наименьшая):  только m < 1000 (ниже B шагать некуда)
- Y (наибольшая):  только m >= 1   (выше Y шагать некуда)

АЛГОРИТМ (линейный обход решётки):
    B: m < 1000 → стоп;  m >= 1000 → step_up
    Y: m >= 1   → стоп;  m < 1     → step_down
    K..Z: m < 1 → step_down;  m >= 1000 → step_up;  иначе стоп

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. B и Y поглощающие: next для Y и prev для B никогда не вызываются
2. Ноль из любой единицы сходится к B
3. Обход завершается: округление монотонно, поэтому после шага вверх
   m >= 1, а после шага вниз m <= 1000. Разворот возможен только если шаг
   вниз округлился ровно до 1000; следующий шаг вверх даёт 1 и обход
   останавливается
"""

import logging
from typing import Any, Final

from bytetypes.core.domain.size import Size
from bytetypes.core.math.conversion import step_down, step_up

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАНИЦЫ ОКНА НОРМАЛИЗАЦИИ
# =============================================================================

# Нижняя граница |m| для всех единиц, кроме B
NORMALIZED_LOWER_BOUND: Final[int] = 1

# Верхняя граница |m| (не включительно) для всех единиц, кроме Y
NORMALIZED_UPPER_BOUND: Final[int] = 1000


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def is_normalized(size: Size, value: Any) -> bool:
    """
    Проверка правила окна для пары (size, value).

    Examples:
        >>> is_normalized(Size.B, 999)
        True
        >>> is_normalized(Size.K, 0.5)
        False
        >>> is_normalized(Size.Y, 10**6)
        True
    """
    magnitude = abs(value)
    if magnitude >= NORMALIZED_UPPER_BOUND and not size.is_largest:
        return False
    if magnitude < NORMALIZED_LOWER_BOUND and not size.is_smallest:
        return False
    return True


def normalize_value(size: Size, value: Any) -> tuple[Size, Any]:
    """
    Поиск единицы, в которой значение попадает в окно [1, 1000).

    Args:
        size: Исходная единица
        value: Значение в исходной единице (конечное)

    Returns:
        (единица, значение в этой единице)

    Examples:
        >>> normalize_value(Size.B, 1000)
        (<Size.K: 'K'>, 1.0)
        >>> normalize_value(Size.K, 0.5)
        (<Size.B: 'B'>, 500.0)
        >>> normalize_value(Size.Y, 1)
        (<Size.Y: 'Y'>, 1)
    """
    current_size = size
    current = value
    steps = 0

    while True:
        magnitude = abs(current)
        if magnitude >= NORMALIZED_UPPER_BOUND and not current_size.is_largest:
            current_size = current_size.next_size()
            current = step_up(current)
        elif magnitude < NORMALIZED_LOWER_BOUND and not current_size.is_smallest:
            current_size = current_size.prev_size()
            current = step_down(current)
        else:
            break
        steps += 1

    if steps:
        logger.debug(
            "Normalized %s %s -> %s %s (%d steps)",
            value,
            size.value,
            current,
            current_size.value,
            steps,
        )
    return current_size, current
