"""The coercion contract implemented by every type."""

import logging
from typing import Any, ClassVar

from lazystruct.errors import CoercionError, KindMismatchError

__all__ = ("Type", "Kind")

logger = logging.getLogger(__name__)

Kind = type | tuple[type, ...]


class Type:
    """Base class for all types.

    Types are never instantiated. A concrete type declares the kind its
    values must be of and overrides coerce() to normalize input values before
    delegating to the kind check of this class.

    Example:
        class IntType(Type):
            must_be_kind_of = int

            @classmethod
            def coerce(cls, context, value):
                if isinstance(value, str):
                    value = int(value)
                return super().coerce(context, value)
    """

    must_be_kind_of: ClassVar[Kind] = object

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__qualname__} cannot be instantiated")

    @classmethod
    def required_kind(cls) -> Kind:
        return cls.must_be_kind_of

    @classmethod
    def coerce(cls, context: Any, value: Any) -> Any:
        """Check that the value is of the required kind.

        Args:
            context (Any): The instance the value is coerced for.
            value (Any): The value to check.

        Raises:
            KindMismatchError: If the value is not of the required kind.

        Returns:
            Any: The value unchanged.
        """
        kind = cls.required_kind()
        if not isinstance(value, kind):
            raise KindMismatchError(value, kind, type(value))
        return value

    @classmethod
    def is_valid(cls, context: Any, value: Any) -> bool:
        """Check if coerce() accepts the value.

        Args:
            context (Any): The instance the value is coerced for.
            value (Any): The value to check.

        Returns:
            bool: True if the value can be coerced; otherwise False.
        """
        try:
            cls.coerce(context, value)
        except CoercionError as exc:
            logger.debug("%s rejected %r: %s", cls.__qualname__, value, exc)
            return False
        return True
