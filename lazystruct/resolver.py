"""Resolution of attribute values.

An attribute value is resolved in order from:

1. The value explicitly set on the instance, evaluated if it is a LazyValue.
2. The value the supertype of the instance resolves for the same attribute.
3. The default of the attribute.

Lazy values are evaluated on every resolution. A lazy value reading another
attribute of the same instance whose lazy value reads it back never
terminates; guarding against that is up to the caller.
"""

import logging
from collections.abc import Callable
from typing import Any, Final

from lazystruct.slots import SET_LAZY, UNSET, AttributeSlot

__all__ = ("NOT_FOUND", "resolve", "resolve_raw")

logger = logging.getLogger(__name__)


class _NotFound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = _NotFound()
"""Returned by a supertype lookup when no supertype defines the attribute."""

DefaultProvider = Callable[[], Any]
SupertypeLookup = Callable[[], Any]


def _resolve_unset(
    instance: Any,
    default_provider: DefaultProvider,
    supertype_lookup: SupertypeLookup,
) -> Any:
    value = supertype_lookup()
    if value is not NOT_FOUND:
        logger.debug("Resolved %r from the supertype of %r", value, instance)
        return value
    logger.debug("Resolved the default for %r", instance)
    return default_provider()


def resolve(
    slot: AttributeSlot,
    instance: Any,
    default_provider: DefaultProvider,
    supertype_lookup: SupertypeLookup,
) -> Any:
    """Compute the effective value of an attribute.

    Args:
        slot (AttributeSlot): The slot of the attribute on the instance.
        instance (Any): The instance owning the slot, used as context for
            "instance_eval" lazy values.
        default_provider (DefaultProvider): Returns the default value.
        supertype_lookup (SupertypeLookup): Returns the value resolved by the
            supertype of the instance, or NOT_FOUND.

    Returns:
        Any: The effective value.
    """
    if slot.state == SET_LAZY:
        return slot.value.get(instance)
    if slot.state == UNSET:
        return _resolve_unset(instance, default_provider, supertype_lookup)
    return slot.value


def resolve_raw(
    slot: AttributeSlot,
    instance: Any,
    default_provider: DefaultProvider,
    supertype_lookup: SupertypeLookup,
) -> Any:
    """Same as resolve() but returns lazy values without evaluating them."""
    if slot.state == UNSET:
        return _resolve_unset(instance, default_provider, supertype_lookup)
    return slot.value
