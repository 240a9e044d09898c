"""
Тесты решётки единиц Size и тега Direction

Проверяет:
1. Полный порядок B < K < ... < Y (по rank, не по букве)
2. next/prev и ошибки на границах
3. Обозначения единиц и направлений
"""

import pytest

from bytetypes.core.domain.direction import Direction
from bytetypes.core.domain.errors import ByteTypesError, SizeBoundaryError
from bytetypes.core.domain.size import LARGEST_SIZE, SMALLEST_SIZE, Size

ALL_SIZES = list(Size)


class TestSizeOrder:
    """Порядок единиц"""

    def test_ranks_are_consecutive(self) -> None:
        """rank: B=0 ... Y=8"""
        assert [s.rank for s in ALL_SIZES] == list(range(9))
        assert Size.B.rank == 0
        assert Size.Y.rank == 8

    def test_order_is_by_rank_not_letter(self) -> None:
        """K < G, хотя 'K' > 'G' лексикографически"""
        assert Size.K < Size.G
        assert Size.G > Size.K
        assert Size.M <= Size.M
        assert Size.Y >= Size.Z

    def test_sorted_lattice(self) -> None:
        """sorted() восстанавливает порядок решётки"""
        shuffled = [Size.T, Size.B, Size.Y, Size.K, Size.E, Size.M, Size.Z, Size.G, Size.P]
        assert sorted(shuffled) == ALL_SIZES

    def test_from_rank(self) -> None:
        for size in ALL_SIZES:
            assert Size.from_rank(size.rank) is size

    @pytest.mark.parametrize("rank", [-1, 9, 100])
    def test_from_rank_out_of_range(self, rank: int) -> None:
        with pytest.raises(SizeBoundaryError):
            Size.from_rank(rank)

    def test_comparison_with_foreign_type(self) -> None:
        """Сравнение с не-Size → TypeError"""
        with pytest.raises(TypeError):
            Size.K < "M"


class TestSizeSteps:
    """next_size / prev_size"""

    def test_next_size_chain(self) -> None:
        for lower, upper in zip(ALL_SIZES, ALL_SIZES[1:]):
            assert lower.next_size() is upper
            assert upper.prev_size() is lower

    def test_y_has_no_next(self) -> None:
        with pytest.raises(SizeBoundaryError, match="Y does not have a next size"):
            Size.Y.next_size()

    def test_b_has_no_prev(self) -> None:
        with pytest.raises(SizeBoundaryError, match="B does not have a previous size"):
            Size.B.prev_size()

    def test_boundary_error_taxonomy(self) -> None:
        """SizeBoundaryError — и ByteTypesError, и ValueError"""
        with pytest.raises(ByteTypesError):
            Size.Y.next_size()
        with pytest.raises(ValueError):
            Size.B.prev_size()

    def test_smallest_and_largest(self) -> None:
        assert SMALLEST_SIZE is Size.B
        assert LARGEST_SIZE is Size.Y
        assert Size.B.is_smallest and not Size.B.is_largest
        assert Size.Y.is_largest and not Size.Y.is_smallest
        assert not Size.M.is_smallest and not Size.M.is_largest


class TestSizeNames:
    """Обозначения единиц"""

    @pytest.mark.parametrize(
        "size,short,medium,long",
        [
            (Size.B, "B", "B", "bytes"),
            (Size.K, "K", "KB", "kilobytes"),
            (Size.G, "G", "GB", "gigabytes"),
            (Size.Y, "Y", "YB", "yottabytes"),
        ],
    )
    def test_names(self, size: Size, short: str, medium: str, long: str) -> None:
        assert size.short_name == short
        assert size.medium_name == medium
        assert size.long_name == long


class TestDirection:
    """Тег направления"""

    def test_names(self) -> None:
        assert Direction.UP.short_name == "u"
        assert Direction.DOWN.short_name == "d"
        assert Direction.UP.long_name == "up"
        assert Direction.DOWN.long_name == "down"

    def test_unordered(self) -> None:
        """Направления не упорядочены"""
        with pytest.raises(TypeError):
            Direction.UP < Direction.DOWN

    def test_equality(self) -> None:
        assert Direction.UP == Direction.UP
        assert Direction.UP != Direction.DOWN
