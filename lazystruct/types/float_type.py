"""Float type, supporting text and number inputs."""

import logging
import math
import numbers
import re
from decimal import Decimal
from typing import Any

from lazystruct.errors import CoercionError
from lazystruct.settings import CoercionSettings, get_settings
from lazystruct.types.base import Type

__all__ = ("FloatType", "parse_float_prefix")

logger = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(
    r"\s*(?P<number>[+-]?(?:\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?|\.\d+(?:_\d+)*)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


def parse_float_prefix(text: str) -> float:
    """Parse the leading number of a text, ignoring whatever follows it.

    Text without a leading number parses to 0.0.

    Args:
        text (str): The text to parse.

    Returns:
        float: The parsed number.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        logger.debug("No number found in %r, parsing as 0.0", text)
        return 0.0
    if match.end() != len(text.rstrip()):
        logger.debug(
            "Ignoring trailing %r when parsing %r",
            text[match.end() :],
            text,
        )
    return float(match.group("number").replace("_", ""))


def _parse_float_strict(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise CoercionError(text, f"{text!r} is not a valid float") from None


def _is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(
        value, bool
    )


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # Out of float range, saturates like Numeric#to_f.
        logger.debug("%r is out of float range", value)
        return math.inf if value > 0 else -math.inf


class FloatType(Type):
    """Handles float values.

    Text is parsed leniently by default: "2.5kg" becomes 2.5 and "abc"
    becomes 0.0. Enable strict_float_parsing in the settings to reject text
    that is not entirely a number.
    """

    must_be_kind_of = float

    @classmethod
    def coerce(
        cls,
        context: Any,
        value: Any,
        *,
        settings: CoercionSettings | None = None,
    ) -> Any:
        if isinstance(value, str):
            settings = settings or get_settings()
            if settings.strict_float_parsing:
                value = _parse_float_strict(value)
            else:
                value = parse_float_prefix(value)
        elif _is_number(value):
            value = _to_float(value)
        return super().coerce(context, value)
