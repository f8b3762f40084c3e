"""lazystruct, typed and inheritable attributes with lazy values."""

__version__ = "0.1.0"


from .attributes import (
    Attribute,
    BlockAttribute,
    BooleanAttribute,
    TypedAttribute,
    attribute,
    block_attribute,
    boolean_attribute,
    define_attribute,
    define_block_attribute,
    define_boolean_attribute,
    define_typed_attribute,
    invoke_block_attribute,
    typed_attribute,
)
from .lazy import LazyValue, lazy
from .struct import SimpleStruct
from .types import FloatType, Type

__all__ = [
    "SimpleStruct",
    "Attribute",
    "BlockAttribute",
    "BooleanAttribute",
    "TypedAttribute",
    "attribute",
    "block_attribute",
    "boolean_attribute",
    "typed_attribute",
    "define_attribute",
    "define_block_attribute",
    "define_boolean_attribute",
    "define_typed_attribute",
    "invoke_block_attribute",
    "LazyValue",
    "lazy",
    "Type",
    "FloatType",
]
