"""
Direction — Направление сетевого трафика

Второй, независимый от Size тег для сетевых счётчиков.
Down / Up не упорядочены и не конвертируются друг в друга:
сложение downloaded и uploaded байт не имеет смысла.
"""

from enum import Enum


class Direction(Enum):
    """Направление трафика (без отношения порядка)."""

    DOWN = "down"
    UP = "up"

    @property
    def short_name(self) -> str:
        """'d' или 'u'"""
        return self.value[0]

    @property
    def long_name(self) -> str:
        """'down' или 'up'"""
        return self.value
