"""Module containing supported lazy evaluation modes."""

from typing import Any, Literal, TypeAlias

__all__ = (
    "EvalMode",
    "PLAIN",
    "INSTANCE_EVAL",
    "DEFAULT_EVAL_MODE",
    "is_eval_mode",
)

EvalMode: TypeAlias = Literal["plain", "instance_eval"]
PLAIN: EvalMode = "plain"
INSTANCE_EVAL: EvalMode = "instance_eval"
DEFAULT_EVAL_MODE: EvalMode = PLAIN

EVAL_MODES = {PLAIN, INSTANCE_EVAL}


def is_eval_mode(val: Any) -> bool:
    """Check if a value is a valid evaluation mode.

    Args:
        val (Any): Any value.

    Returns:
        bool: True if the value is a valid evaluation mode; otherwise False.
    """
    return val in EVAL_MODES
