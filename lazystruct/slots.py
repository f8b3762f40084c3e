"""Per-instance storage of attribute values."""

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from lazystruct.lazy import LazyValue

__all__ = (
    "SlotState",
    "UNSET",
    "SET",
    "SET_LAZY",
    "AttributeSlot",
    "EMPTY_SLOT",
)

SlotState: TypeAlias = Literal["unset", "set", "set_lazy"]
UNSET: SlotState = "unset"
SET: SlotState = "set"
SET_LAZY: SlotState = "set_lazy"


@dataclass(frozen=True, slots=True)
class AttributeSlot:
    """Storage for a single attribute of a single instance."""

    state: SlotState = UNSET
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "AttributeSlot":
        """Create the slot holding an explicitly assigned value.

        Args:
            value (Any): The assigned value.

        Returns:
            AttributeSlot: A set_lazy slot for a LazyValue; otherwise a set slot.
        """
        if isinstance(value, LazyValue):
            return cls(SET_LAZY, value)
        return cls(SET, value)

    @property
    def is_set(self) -> bool:
        return self.state != UNSET

    def __repr__(self) -> str:
        if self.state == UNSET:
            return "AttributeSlot(unset)"
        return f"AttributeSlot({self.state}, {self.value!r})"


EMPTY_SLOT = AttributeSlot()
