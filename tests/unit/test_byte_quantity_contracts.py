"""
Tests for JSON Schema Contract Validators

Комплексное тестирование контракта byte_quantity:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и enum
- Кодирование / декодирование byte-типов (to_payload / from_payload)
"""

import json
import math
from decimal import Decimal
from fractions import Fraction

import pydantic
import pytest
from jsonschema import ValidationError

from bytetypes.core.contracts import (
    ByteQuantityValidator,
    SchemaLoader,
    from_payload,
    to_payload,
    validate_byte_quantity,
)
from bytetypes.core.domain import Bytes, Direction, NetBytes, Size, SomeNet, SomeSize


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_quantity():
    """Валидный byte_quantity без направления."""
    return {"size": "K", "value": 70}


@pytest.fixture
def valid_net_quantity():
    """Валидный byte_quantity с направлением."""
    return {"size": "M", "value": "1.5", "direction": "up"}


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_schema():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()
    schema = loader.load_schema("byte_quantity")

    assert schema["required"] == ["size", "value"]
    assert schema["properties"]["size"]["enum"] == [s.value for s in Size]
    assert schema["properties"]["direction"]["enum"] == ["up", "down"]


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("byte_quantity")
    schema2 = loader.load_schema("byte_quantity")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    """Отсутствующий каталог схем — ошибка при создании загрузчика."""
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Meta-validation: файл не является JSON Schema."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - BYTE QUANTITY VALIDATION
# =============================================================================


def test_validator_accepts_valid_data(valid_quantity, valid_net_quantity):
    """Валидация правильных данных."""
    validator = ByteQuantityValidator()
    validator.validate(valid_quantity)  # Не должно выбросить исключение
    assert validator.is_valid(valid_quantity)
    assert validator.is_valid(valid_net_quantity)


def test_validate_function(valid_quantity):
    """Проверка функции validate_byte_quantity."""
    validate_byte_quantity(valid_quantity)


@pytest.mark.parametrize("value", [0, -5, 2.5, "1000", "-0.001", "1/3", "-7/2"])
def test_accepts_value_encodings(valid_quantity, value):
    data = dict(valid_quantity, value=value)
    assert ByteQuantityValidator().is_valid(data)


def test_rejects_missing_required_field(valid_quantity):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_quantity.copy()
    del data["size"]

    with pytest.raises(ValidationError) as exc_info:
        validate_byte_quantity(data)
    assert "'size' is a required property" in str(exc_info.value)


def test_rejects_unknown_size(valid_quantity):
    data = dict(valid_quantity, size="X")

    with pytest.raises(ValidationError) as exc_info:
        validate_byte_quantity(data)
    assert "is not one of" in str(exc_info.value)


def test_rejects_lowercase_size(valid_quantity):
    assert not ByteQuantityValidator().is_valid(dict(valid_quantity, size="k"))


@pytest.mark.parametrize("value", ["abc", "1e3", "1/0", "", True, None, [1]])
def test_rejects_invalid_value(valid_quantity, value):
    assert not ByteQuantityValidator().is_valid(dict(valid_quantity, value=value))


def test_rejects_invalid_direction(valid_net_quantity):
    data = dict(valid_net_quantity, direction="sideways")
    assert not ByteQuantityValidator().is_valid(data)


def test_rejects_additional_properties(valid_quantity):
    data = dict(valid_quantity, unit="K")

    with pytest.raises(ValidationError):
        validate_byte_quantity(data)


def test_iter_errors_reports_all_violations():
    errors = list(ByteQuantityValidator().iter_errors({"size": "X", "direction": "left"}))
    assert len(errors) == 3


# =============================================================================
# TESTS - PAYLOAD ENCODING
# =============================================================================


def test_to_payload_bytes():
    assert to_payload(Bytes(Size.K, 70)) == {"size": "K", "value": 70}


def test_to_payload_exact_values():
    assert to_payload(Bytes(Size.B, Fraction(1, 3)))["value"] == "1/3"
    assert to_payload(Bytes(Size.B, Decimal("1E+3")))["value"] == "1000"


def test_to_payload_network():
    payload = to_payload(NetBytes(Direction.DOWN, Size.G, 2.5).hide_all())
    assert payload == {"size": "G", "value": 2.5, "direction": "down"}


def test_payloads_validate():
    """Все byte-типы кодируются в валидный контракт."""
    net = NetBytes(Direction.UP, Size.T, Fraction(7, 2))
    for quantity in [
        Bytes(Size.K, 70),
        SomeSize.of(Size.M, Decimal("0.5")),
        net,
        net.hide_size(),
        net.hide_direction(),
        net.hide_all(),
    ]:
        validate_byte_quantity(to_payload(quantity))


def test_from_payload_some_size(valid_quantity):
    result = from_payload(valid_quantity)
    assert isinstance(result, SomeSize)
    assert result == SomeSize.of(Size.K, 70)


def test_from_payload_some_net(valid_net_quantity):
    result = from_payload(valid_net_quantity)
    assert isinstance(result, SomeNet)
    assert result.direction is Direction.UP
    assert result.value == Decimal("1.5")


def test_from_payload_restores_exact_types():
    original = Bytes(Size.P, Fraction(-7, 3))
    restored = from_payload(json.loads(json.dumps(to_payload(original))))
    assert restored.quantity == original


def test_from_payload_rejects_invalid(valid_quantity):
    with pytest.raises(ValidationError):
        from_payload(dict(valid_quantity, size="Q"))


def test_from_payload_rejects_non_finite(valid_quantity):
    """NaN проходит схему (number), но отклоняется моделью."""
    with pytest.raises(pydantic.ValidationError):
        from_payload(dict(valid_quantity, value=math.nan))
