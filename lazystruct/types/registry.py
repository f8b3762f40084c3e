"""Registry mapping Python kinds to the types coercing them."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from lazystruct.errors import DuplicatedTypeError, UnknownTypeError
from lazystruct.types.base import Type
from lazystruct.types.float_type import FloatType

__all__ = ("TypeRegistry", "default_registry", "resolve_type")

EXCLUDED_BASE_TYPES = (object, Protocol)


def resolve_base_types(kind: type) -> tuple[type, ...]:
    """Resolve the bases of a kind, most derived first."""
    return tuple(base for base in kind.mro() if base not in EXCLUDED_BASE_TYPES)


class MemoizedBaseTypeResolver:
    """We are tying the cache to the object so it is cleared when the object is deleted."""

    def __init__(self):
        super().__init__()
        self._base_types: dict[type, tuple[type, ...]] = {}

    def resolve_base_types(self, kind: type) -> Sequence[type]:
        if kind in self._base_types:
            return self._base_types[kind]
        self._base_types[kind] = bases = resolve_base_types(kind)
        return bases


class TypeRegistry:
    __slots__ = ("_types", "_resolver")

    _types: dict[type, type[Type]]

    def __init__(
        self,
        types: Mapping[type, type[Type]] | None = None,
        *,
        resolver: MemoizedBaseTypeResolver | None = None,
    ) -> None:
        self._types = {}
        self._resolver = resolver or MemoizedBaseTypeResolver()
        if types:
            for kind, type_ in types.items():
                self.register(kind, type_)

    def register(self, kind: type, type_: type[Type]) -> None:
        """Register the type coercing values of a kind.

        Args:
            kind (type): The Python kind.
            type_ (type[Type]): The type coercing values to this kind.

        Raises:
            DuplicatedTypeError: If a type is already registered for the kind.
        """
        existing = self._types.get(kind)
        if existing is not None:
            raise DuplicatedTypeError(kind, type_, existing)
        self._types[kind] = type_

    def get(self, kind: type) -> type[Type]:
        """Get the type for a kind or its nearest registered base.

        Args:
            kind (type): The Python kind.

        Raises:
            UnknownTypeError: If no type is registered for the kind or its bases.

        Returns:
            type[Type]: The registered type.
        """
        if not isinstance(kind, type):
            raise UnknownTypeError(kind)
        for base in self._resolver.resolve_base_types(kind):
            type_ = self._types.get(base)
            if type_ is not None:
                return type_
        raise UnknownTypeError(kind)

    def __contains__(self, kind: object) -> bool:
        try:
            self.get(kind)  # type: ignore[arg-type]
        except UnknownTypeError:
            return False
        return True

    def kinds(self) -> Iterable[type]:
        return tuple(self._types)


default_registry = TypeRegistry({float: FloatType})


def resolve_type(
    type_or_kind: type, registry: TypeRegistry | None = None
) -> type[Type]:
    """Return a Type as is, or the Type registered for a Python kind.

    Args:
        type_or_kind (type): A Type subclass or a Python kind.
        registry (TypeRegistry | None, optional): The registry to look kinds up in.
            Defaults to the default registry.

    Returns:
        type[Type]: The Type.
    """
    if isinstance(type_or_kind, type) and issubclass(type_or_kind, Type):
        return type_or_kind
    return (registry or default_registry).get(type_or_kind)
