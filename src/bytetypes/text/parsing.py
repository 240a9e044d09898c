"""
Parsing — Разбор byte-значений из текста

ГРАММАТИКА (регистронезависимо, пробелы вокруг токенов необязательны):

    quantity  := number [unit] [direction]
    number    := digits ['.' digits]
    unit      := 'b' ['ytes']
               | letter ['b' | long_suffix]     (k, kb, kilobytes; m, mb, ...)
    direction := 'u' ['p'] | 'd' ['own']

Примеры: "70", "70 kilobytes", "2300G", "5.5 tb", "1 kb up", "3md".

ОШИБКИ:
Разбор никогда не бросает исключение для некорректного ввода.
Каждая функция возвращает ParseResult: либо value, либо ParseFailure
с позицией (offset, 1-based column), сообщением и списком ожидаемых
альтернатив. Исключение ByteParseError поднимается только явно,
через ParseResult.unwrap().

    parse_some_size("70 tx")
    → 1:5: unexpected 'x'; expecting "erabytes", 'b', end of input or white space
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import ValidationError

from bytetypes.core.domain.direction import Direction
from bytetypes.core.domain.errors import ByteParseError
from bytetypes.core.domain.network import NetBytes, SomeNet, SomeNetDir, SomeNetSize
from bytetypes.core.domain.quantity import Bytes, SomeSize
from bytetypes.core.domain.size import Size

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Преобразователь числового литерала ("70", "100.45") в значение
Numeric = Callable[[str], Any]


# =============================================================================
# ТОКЕНЫ
# =============================================================================

_WHITESPACE = re.compile(r"\s*")

_NUMBER = re.compile(r"\d+(?:\.\d+)?")

# Хвост длинного имени после буквы: k + "ilobytes"
_LONG_SUFFIXES = {size: size.long_name[1:] for size in Size}

_UNIT = re.compile(
    "|".join(
        f"(?P<{size.value}>b(?:ytes)?)"
        if size is Size.B
        else f"(?P<{size.value}>{size.value.lower()}(?:b|{_LONG_SUFFIXES[size]})?)"
        for size in Size
    ),
    re.IGNORECASE,
)

_DIRECTION = re.compile(r"(?P<UP>u(?:p)?)|(?P<DOWN>d(?:own)?)", re.IGNORECASE)

_EXPECT_DIGIT = "digit"
_EXPECT_UNIT = "size unit"
_EXPECT_DIRECTION = "direction"
_EXPECT_END = "end of input"
_EXPECT_SPACE = "white space"


# =============================================================================
# РЕЗУЛЬТАТ РАЗБОРА
# =============================================================================


@dataclass(frozen=True)
class ParseFailure:
    """Описание ошибки разбора."""

    input: str
    offset: int
    message: str
    expected: tuple[str, ...] = ()

    @property
    def column(self) -> int:
        """Номер колонки (с 1)."""
        return self.offset + 1

    def __str__(self) -> str:
        text = f"1:{self.column}: {self.message}"
        if self.expected:
            if len(self.expected) == 1:
                alternatives = self.expected[0]
            else:
                alternatives = ", ".join(self.expected[:-1]) + f" or {self.expected[-1]}"
            text = f"{text}; expecting {alternatives}"
        return text


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Результат разбора: value при успехе, error при ошибке."""

    value: Optional[T] = None
    error: Optional[ParseFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Значение или исключение.

        Raises:
            ByteParseError: Если разбор завершился ошибкой
        """
        if self.error is not None:
            raise ByteParseError(self.error)
        return self.value


class _ScanError(Exception):
    """Внутренний сигнал прерывания разбора (наружу не выходит)."""

    def __init__(self, failure: ParseFailure):
        self.failure = failure
        super().__init__(str(failure))


# =============================================================================
# СКАНЕР
# =============================================================================


@dataclass(frozen=True)
class _Token(Generic[T]):
    value: T
    offset: int
    text: str


@dataclass(frozen=True)
class _Scanned:
    literal: _Token[str]
    size: Optional[_Token[Size]]
    direction: Optional[_Token[Direction]]


class _Scanner:
    """Последовательный разбор строки регулярными выражениями."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def skip_space(self) -> bool:
        match = _WHITESPACE.match(self.text, self.pos)
        self.pos = match.end()
        return match.end() > match.start()

    def take(self, pattern: re.Pattern) -> Optional[re.Match]:
        match = pattern.match(self.text, self.pos)
        if match is not None:
            self.pos = match.end()
        return match

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def failure(self, expected: tuple[str, ...], offset: Optional[int] = None) -> ParseFailure:
        position = self.pos if offset is None else offset
        if position >= len(self.text):
            message = "unexpected end of input"
        else:
            message = f"unexpected {self.text[position]!r}"
        return ParseFailure(self.text, position, message, expected)

    def fail(self, expected: tuple[str, ...]) -> None:
        raise _ScanError(self.failure(expected))


def _size_token(match: re.Match) -> _Token[Size]:
    return _Token(Size(match.lastgroup), match.start(), match.group())


def _direction_token(match: re.Match) -> _Token[Direction]:
    return _Token(Direction[match.lastgroup], match.start(), match.group())


def _unit_suffix_expectations(token: _Token[Size]) -> tuple[str, ...]:
    """Что ещё могло продолжить голую букву единицы ("t" → "erabytes", 'b')."""
    if len(token.text) != 1:
        return ()
    if token.value is Size.B:
        return ('"ytes"',)
    return (f'"{_LONG_SUFFIXES[token.value]}"', "'b'")


def _scan(text: str, *, unit: str, direction: str) -> _Scanned:
    """
    Разбор quantity по грамматике модуля.

    Args:
        text: Исходная строка
        unit: "required" | "optional"
        direction: "required" | "optional" | "absent"

    Raises:
        _ScanError: При любой ошибке разбора
    """
    scanner = _Scanner(text)
    scanner.skip_space()

    number = scanner.take(_NUMBER)
    if number is None:
        scanner.fail((_EXPECT_DIGIT,))
    literal = _Token(number.group(), number.start(), number.group())
    spaced = scanner.skip_space()

    size_match = scanner.take(_UNIT)
    size_token = _size_token(size_match) if size_match is not None else None
    if size_token is None and unit == "required":
        scanner.fail((_EXPECT_UNIT,))
    if size_token is not None:
        spaced = scanner.skip_space()

    direction_token = None
    if direction != "absent":
        direction_match = scanner.take(_DIRECTION)
        if direction_match is not None:
            direction_token = _direction_token(direction_match)
            spaced = scanner.skip_space()
        elif direction == "required":
            alternatives = (_EXPECT_DIRECTION,)
            if size_token is None:
                alternatives = (_EXPECT_UNIT,) + alternatives
            elif not spaced:
                alternatives = _unit_suffix_expectations(size_token) + alternatives
            scanner.fail(alternatives)

    if not scanner.at_end():
        expected: tuple[str, ...] = ()
        if size_token is not None and direction_token is None and not spaced:
            expected += _unit_suffix_expectations(size_token)
        if size_token is None:
            expected += (_EXPECT_UNIT,)
        if direction != "absent" and direction_token is None:
            expected += (_EXPECT_DIRECTION,)
        expected += (_EXPECT_END,)
        if not spaced:
            expected += (_EXPECT_SPACE,)
        scanner.fail(expected)

    return _Scanned(literal, size_token, direction_token)


# =============================================================================
# ЧИСЛА И ТЕГИ
# =============================================================================


def _default_numeric(literal: str) -> Any:
    return float(literal) if "." in literal else int(literal)


def _read_number(text: str, token: _Token[str], numeric: Optional[Numeric]) -> Any:
    reader = numeric or _default_numeric
    try:
        return reader(token.value)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise _ScanError(
            ParseFailure(text, token.offset, f"could not read {token.value!r}: {e}", (_EXPECT_DIGIT,))
        )


def _check_size(text: str, token: Optional[_Token[Size]], expected: Size) -> None:
    if token is not None and token.value is not expected:
        raise _ScanError(
            ParseFailure(
                text,
                token.offset,
                f"expected size {expected.value}, found {token.value.value}",
                (expected.short_name,),
            )
        )


def _check_direction(text: str, token: Optional[_Token[Direction]], expected: Direction) -> None:
    if token is not None and token.value is not expected:
        raise _ScanError(
            ParseFailure(
                text,
                token.offset,
                f"expected direction {expected.long_name}, found {token.value.long_name}",
                (expected.long_name,),
            )
        )


def _build(text: str, token: _Token[str], factory: Callable[[], T]) -> T:
    """Создание модели; ошибка валидации значения — ошибка разбора числа."""
    try:
        return factory()
    except ValidationError as e:
        raise _ScanError(
            ParseFailure(
                text,
                token.offset,
                f"invalid byte value {token.value!r}: {e.errors()[0]['msg']}",
                (_EXPECT_DIGIT,),
            )
        )


def _run(text: str, action: Callable[[], T]) -> ParseResult[T]:
    try:
        return ParseResult(value=action())
    except _ScanError as e:
        logger.debug("Failed to parse %r: %s", text, e.failure)
        return ParseResult(error=e.failure)


def _parse_tag(text: str, pattern: re.Pattern, convert: Callable[[re.Match], Any], label: str):
    def action():
        scanner = _Scanner(text)
        scanner.skip_space()
        match = scanner.take(pattern)
        if match is None:
            scanner.fail((label,))
        spaced = scanner.skip_space()
        if not scanner.at_end():
            scanner.fail((_EXPECT_END,) if spaced else (_EXPECT_END, _EXPECT_SPACE))
        return convert(match)

    return _run(text, action)


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_size(text: str) -> ParseResult[Size]:
    """
    Разбор единицы: "k", "KB", "kilobytes", "b", "bytes".

    Examples:
        >>> parse_size("Megabytes").unwrap()
        <Size.M: 'M'>
    """
    return _parse_tag(text, _UNIT, lambda m: _size_token(m).value, _EXPECT_UNIT)


def parse_direction(text: str) -> ParseResult[Direction]:
    """Разбор направления: "u", "up", "d", "down"."""
    return _parse_tag(text, _DIRECTION, lambda m: _direction_token(m).value, _EXPECT_DIRECTION)


def parse_bytes(text: str, size: Size, numeric: Optional[Numeric] = None) -> ParseResult[Bytes]:
    """
    Разбор Bytes с заранее известной единицей.

    Единица в тексте необязательна; если указана, она должна совпадать
    с size (иначе ошибка в позиции единицы).

    Args:
        text: Исходная строка
        size: Ожидаемая единица
        numeric: Преобразователь литерала (default: int для целых, иначе float)

    Examples:
        >>> parse_bytes("70", Size.M).unwrap()
        Bytes(size=<Size.M: 'M'>, value=70)
    """

    def action() -> Bytes:
        scanned = _scan(text, unit="optional", direction="absent")
        _check_size(text, scanned.size, size)
        value = _read_number(text, scanned.literal, numeric)
        return _build(text, scanned.literal, lambda: Bytes(size, value))

    return _run(text, action)


def parse_some_size(text: str, numeric: Optional[Numeric] = None) -> ParseResult[SomeSize]:
    """
    Разбор SomeSize: единица обязательна.

    Examples:
        >>> parse_some_size("2300G").unwrap().size
        <Size.G: 'G'>
    """

    def action() -> SomeSize:
        scanned = _scan(text, unit="required", direction="absent")
        value = _read_number(text, scanned.literal, numeric)
        return _build(text, scanned.literal, lambda: SomeSize.of(scanned.size.value, value))

    return _run(text, action)


def parse_net_bytes(
    text: str,
    direction: Direction,
    size: Size,
    numeric: Optional[Numeric] = None,
) -> ParseResult[NetBytes]:
    """Разбор NetBytes: единица и направление необязательны, но должны совпадать."""

    def action() -> NetBytes:
        scanned = _scan(text, unit="optional", direction="optional")
        _check_size(text, scanned.size, size)
        _check_direction(text, scanned.direction, direction)
        value = _read_number(text, scanned.literal, numeric)
        return _build(text, scanned.literal, lambda: NetBytes(direction, size, value))

    return _run(text, action)


def parse_some_net_size(
    text: str,
    direction: Direction,
    numeric: Optional[Numeric] = None,
) -> ParseResult[SomeNetSize]:
    """Разбор SomeNetSize: единица обязательна, направление — если указано — совпадает."""

    def action() -> SomeNetSize:
        scanned = _scan(text, unit="required", direction="optional")
        _check_direction(text, scanned.direction, direction)
        value = _read_number(text, scanned.literal, numeric)
        return _build(
            text,
            scanned.literal,
            lambda: SomeNetSize(NetBytes(direction, scanned.size.value, value)),
        )

    return _run(text, action)


def parse_some_net_dir(
    text: str,
    size: Size,
    numeric: Optional[Numeric] = None,
) -> ParseResult[SomeNetDir]:
    """Разбор SomeNetDir: направление обязательно."""

    def action() -> SomeNetDir:
        scanned = _scan(text, unit="optional", direction="required")
        _check_size(text, scanned.size, size)
        value = _read_number(text, scanned.literal, numeric)
        return _build(
            text,
            scanned.literal,
            lambda: SomeNetDir(NetBytes(scanned.direction.value, size, value)),
        )

    return _run(text, action)


def parse_some_net(text: str, numeric: Optional[Numeric] = None) -> ParseResult[SomeNet]:
    """
    Разбор SomeNet: обязательны и единица, и направление.

    Examples:
        >>> str(parse_some_net("1.5 mb down").unwrap())
        '1.5 M down'
    """

    def action() -> SomeNet:
        scanned = _scan(text, unit="required", direction="required")
        value = _read_number(text, scanned.literal, numeric)
        return _build(
            text,
            scanned.literal,
            lambda: SomeNet(NetBytes(scanned.direction.value, scanned.size.value, value)),
        )

    return _run(text, action)
