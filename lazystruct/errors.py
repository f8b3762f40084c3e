"""Module containing errors classes."""

from typing import Any


class StructError(Exception):
    """Base class for all attribute related errors."""

    pass


class InvalidAssignmentError(StructError, TypeError):
    """Raised when a block attribute is set to a value that is not callable."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"{name} must be set to a callable or LazyValue: caller tried to set {name} to {value!r}"
        )


class UnknownAttributeError(StructError, TypeError):
    """Raised when a struct is given a value for an undeclared attribute."""

    def __init__(self, struct_type: type, name: str) -> None:
        self.struct_type = struct_type
        self.name = name
        super().__init__(
            f"{struct_type.__qualname__} has no attribute named {name!r}"
        )


class CoercionError(ValueError):
    """Base class for all coercion errors."""

    def __init__(self, value: Any, msg: str | None = None) -> None:
        self.value = value
        super().__init__(msg or f"Unable to coerce {value!r}")


class KindMismatchError(CoercionError):
    """Raised when a coerced value is not of the kind required by its type."""

    def __init__(
        self, value: Any, expected: type | tuple[type, ...], actual: type
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            value,
            f"Expected value of kind {_format_kind(expected)}, got {value!r} of kind {_format_kind(actual)}",
        )


def _format_kind(kind: type | tuple[type, ...]) -> str:
    if isinstance(kind, tuple):
        return " | ".join(k.__qualname__ for k in kind)
    return kind.__qualname__


class TypeRegistryError(Exception):
    """Base class for all type registry errors."""

    pass


class DuplicatedTypeError(TypeRegistryError):
    """Raised when a kind is registered more than once."""

    def __init__(self, kind: type, to_add: Any, existing: Any) -> None:
        self.kind = kind
        self.to_add = to_add
        self.existing = existing
        super().__init__(
            f"Type {to_add!r} for kind {kind!r} conflict with existing type {existing!r}"
        )


class UnknownTypeError(TypeRegistryError, LookupError):
    """Raised when no type is registered for a kind or any of its bases."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"No type registered for kind {kind!r}")


class InvalidSettingsError(ValueError):
    """Raised when settings loaded from the environment fail validation."""

    pass
