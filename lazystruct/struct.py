"""Base class for structs declaring attributes."""

from typing import Any

from lazystruct.attributes import (
    Attribute,
    find_attribute,
    invoke_block_attribute,
)
from lazystruct.errors import UnknownAttributeError

__all__ = ("SimpleStruct",)


class SimpleStruct:
    """A struct whose unset attributes fall back to its supertype.

    Args:
        supertype (SimpleStruct | None, optional): The struct asked for the
            values of attributes not set on this one. Defaults to None.
        **attributes: Initial values, assigned through each attribute's setter.

    Raises:
        UnknownAttributeError: If a keyword is not a declared attribute.
    """

    def __init__(
        self, supertype: "SimpleStruct | None" = None, **attributes: Any
    ) -> None:
        self.supertype = supertype
        for name, value in attributes.items():
            descriptor = find_attribute(type(self), name)
            if descriptor is None:
                raise UnknownAttributeError(type(self), name)
            descriptor.set(self, value)

    @classmethod
    def attributes(cls) -> dict[str, Attribute]:
        """Return the attributes declared by the class and its bases."""
        result: dict[str, Attribute] = {}
        for klass in reversed(cls.mro()):
            for name, value in vars(klass).items():
                if isinstance(value, Attribute):
                    result[name] = value
        return result

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        return tuple(cls.attributes())

    def explicit_values(self) -> dict[str, Any]:
        """Return the raw values explicitly set on this struct.

        Lazy values are returned without being evaluated.
        """
        return {
            name: descriptor.slot(self).value
            for name, descriptor in self.attributes().items()
            if descriptor.is_set(self)
        }

    def invoke(self, name: str) -> Any:
        """Invoke the block stored in a block attribute with this struct as context."""
        return invoke_block_attribute(getattr(self, name), self)

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={value!r}" for name, value in self.explicit_values().items()
        )
        return f"{type(self).__name__}({values})"
