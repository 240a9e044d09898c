"""
Size — Решётка единиц измерения байт

Закрытое, полностью упорядоченное множество единиц:

    B < K < M < G < T < P < E < Z < Y

Каждая единица — степень 1000 относительно B (rank 0..8).
Порядок определяется rank, а не буквой: "K" > "G" лексикографически,
но K < G.

Отношения next/prev определены только для соседних элементов:
- next_size() определён для всех, кроме Y
- prev_size() определён для всех, кроме B
"""

from enum import Enum
from typing import Final

from bytetypes.core.domain.errors import SizeBoundaryError


# =============================================================================
# SIZE
# =============================================================================


class Size(Enum):
    """Единица измерения байт (степень 1000)."""

    B = "B"
    K = "K"
    M = "M"
    G = "G"
    T = "T"
    P = "P"
    E = "E"
    Z = "Z"
    Y = "Y"

    @property
    def rank(self) -> int:
        """Положение в решётке: 0 для B, 8 для Y."""
        return _RANK_BY_SIZE[self]

    @classmethod
    def from_rank(cls, rank: int) -> "Size":
        """
        Единица по rank.

        Raises:
            SizeBoundaryError: Если rank вне [0, 8]
        """
        if not 0 <= rank < len(_SIZES_BY_RANK):
            raise SizeBoundaryError(
                f"Size rank must be in [0, {len(_SIZES_BY_RANK) - 1}], got {rank}"
            )
        return _SIZES_BY_RANK[rank]

    @property
    def is_smallest(self) -> bool:
        return self is Size.B

    @property
    def is_largest(self) -> bool:
        return self is Size.Y

    def next_size(self) -> "Size":
        """
        Следующая (большая) единица.

        Raises:
            SizeBoundaryError: Для Y (у Y нет следующей единицы)
        """
        if self.is_largest:
            raise SizeBoundaryError("The byte unit Y does not have a next size")
        return _SIZES_BY_RANK[self.rank + 1]

    def prev_size(self) -> "Size":
        """
        Предыдущая (меньшая) единица.

        Raises:
            SizeBoundaryError: Для B (у B нет предыдущей единицы)
        """
        if self.is_smallest:
            raise SizeBoundaryError("The byte unit B does not have a previous size")
        return _SIZES_BY_RANK[self.rank - 1]

    @property
    def short_name(self) -> str:
        """Однобуквенное обозначение: 'B', 'K', 'M', ..."""
        return self.value

    @property
    def medium_name(self) -> str:
        """Двухбуквенное обозначение: 'B', 'KB', 'MB', ..."""
        return "B" if self is Size.B else f"{self.value}B"

    @property
    def long_name(self) -> str:
        """Полное название во множественном числе: 'bytes', 'kilobytes', ..."""
        return _LONG_NAMES[self]

    # Сравнение только по rank
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.rank >= other.rank


# =============================================================================
# ТАБЛИЦЫ РЕШЁТКИ
# =============================================================================

_SIZES_BY_RANK: Final[tuple[Size, ...]] = tuple(Size)

_RANK_BY_SIZE: Final[dict[Size, int]] = {size: rank for rank, size in enumerate(_SIZES_BY_RANK)}

_LONG_NAMES: Final[dict[Size, str]] = {
    Size.B: "bytes",
    Size.K: "kilobytes",
    Size.M: "megabytes",
    Size.G: "gigabytes",
    Size.T: "terabytes",
    Size.P: "petabytes",
    Size.E: "exabytes",
    Size.Z: "zettabytes",
    Size.Y: "yottabytes",
}

# Поглощающие границы нормализации
SMALLEST_SIZE: Final[Size] = Size.B
LARGEST_SIZE: Final[Size] = Size.Y
