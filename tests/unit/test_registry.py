import pytest

from lazystruct.errors import DuplicatedTypeError, UnknownTypeError
from lazystruct.types import FloatType, Type, TypeRegistry, resolve_type
from lazystruct.types.registry import default_registry


class IntType(Type):
    must_be_kind_of = int

    @classmethod
    def coerce(cls, context, value):
        if isinstance(value, str):
            value = int(value)
        return super().coerce(context, value)


class Celsius(float):
    pass


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry({float: FloatType})


def test_get(registry: TypeRegistry):
    assert registry.get(float) is FloatType


def test_get_subclass(registry: TypeRegistry):
    assert registry.get(Celsius) is FloatType


def test_most_derived_registration_wins(registry: TypeRegistry):
    class CelsiusType(FloatType):
        pass

    registry.register(Celsius, CelsiusType)

    assert registry.get(Celsius) is CelsiusType
    assert registry.get(float) is FloatType


def test_unknown(registry: TypeRegistry):
    with pytest.raises(UnknownTypeError) as exc_info:
        registry.get(str)

    assert exc_info.value.kind is str


def test_unknown_is_lookup_error(registry: TypeRegistry):
    with pytest.raises(LookupError):
        registry.get(dict)


def test_not_a_kind(registry: TypeRegistry):
    with pytest.raises(UnknownTypeError):
        registry.get("float")  # type: ignore[arg-type]


def test_duplicate(registry: TypeRegistry):
    with pytest.raises(DuplicatedTypeError) as exc_info:
        registry.register(float, IntType)

    assert exc_info.value.existing is FloatType
    assert registry.get(float) is FloatType


def test_contains(registry: TypeRegistry):
    registry.register(int, IntType)

    assert float in registry
    assert bool in registry
    assert str not in registry
    assert set(registry.kinds()) == {float, int}


def test_default_registry():
    assert default_registry.get(float) is FloatType


def test_resolve_type(registry: TypeRegistry):
    registry.register(int, IntType)

    assert resolve_type(IntType) is IntType
    assert resolve_type(float) is FloatType
    assert resolve_type(int, registry) is IntType
    with pytest.raises(UnknownTypeError):
        resolve_type(int)
