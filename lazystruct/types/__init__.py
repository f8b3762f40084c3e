"""Types implementing the coercion contract.

Example:
    from lazystruct.types import FloatType

    print(FloatType.coerce(None, "3.14"))
    #> 3.14
    print(FloatType.coerce(None, 3))
    #> 3.0
"""

from .base import Kind, Type
from .float_type import FloatType
from .registry import TypeRegistry, default_registry, resolve_type

__all__ = (
    "Kind",
    "Type",
    "FloatType",
    "TypeRegistry",
    "default_registry",
    "resolve_type",
)
