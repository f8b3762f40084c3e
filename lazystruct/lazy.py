"""This module contains the deferred value wrapper.

Example:
    from lazystruct import SimpleStruct, attribute, lazy

    class Package(SimpleStruct):
        name = attribute()
        filename = attribute()

    package = Package(name="nginx")
    package.filename = lazy(lambda pkg: f"{pkg.name}.tar.gz", "instance_eval")
    print(package.filename)
    #> nginx.tar.gz
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from lazystruct.eval_modes import (
    DEFAULT_EVAL_MODE,
    INSTANCE_EVAL,
    EvalMode,
    is_eval_mode,
)

__all__ = ("LazyValue", "lazy")

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class LazyValue(Generic[T]):
    """A computation stored in place of a value and run on every read.

    With the "plain" mode the function is called without arguments. With the
    "instance_eval" mode it receives the instance the value is read from.
    """

    function: Callable[..., T]
    requested_eval_mode: EvalMode | None = None

    def __post_init__(self) -> None:
        if not callable(self.function):
            raise TypeError(f"{self.function!r} is not callable")
        if self.requested_eval_mode is not None and not is_eval_mode(
            self.requested_eval_mode
        ):
            raise ValueError(
                f"Invalid evaluation mode {self.requested_eval_mode!r}"
            )

    @property
    def eval_mode(self) -> EvalMode:
        return self.requested_eval_mode or DEFAULT_EVAL_MODE

    @property
    def eval_mode_explicitly_set(self) -> bool:
        return self.requested_eval_mode is not None

    @property
    def is_instance_eval(self) -> bool:
        return self.eval_mode == INSTANCE_EVAL

    def with_eval_mode(self, eval_mode: EvalMode) -> "LazyValue[T]":
        """Return a copy of this value with the evaluation mode set explicitly.

        Args:
            eval_mode (EvalMode): The evaluation mode of the copy.

        Returns:
            LazyValue[T]: The new lazy value.
        """
        return LazyValue(self.function, eval_mode)

    def get(self, instance: Any = None) -> T:
        """Evaluate the computation.

        Args:
            instance (Any, optional): The context passed to the function in
                "instance_eval" mode. Ignored in "plain" mode.

        Returns:
            T: The freshly computed value.
        """
        if self.is_instance_eval:
            logger.debug("Evaluating %r in context of %r", self, instance)
            return self.function(instance)
        logger.debug("Evaluating %r", self)
        return self.function()

    def __call__(self, instance: Any = None) -> T:
        return self.get(instance)

    def __repr__(self) -> str:
        name = getattr(self.function, "__qualname__", repr(self.function))
        return f"LazyValue({name}, eval_mode={self.eval_mode!r})"


@overload
def lazy(
    function: Callable[..., T], eval_mode: EvalMode | None = None
) -> LazyValue[T]: ...


@overload
def lazy(
    function: None = None, eval_mode: EvalMode | None = None
) -> Callable[[Callable[..., T]], LazyValue[T]]: ...


def lazy(function=None, eval_mode=None):
    """Wrap a function into a LazyValue. Can be used as a decorator.

    Args:
        function (Callable | None, optional): The computation to defer. Defaults to None.
        eval_mode (EvalMode | None, optional): Set the evaluation mode explicitly;
            otherwise it is "plain" and block attributes may switch it to
            "instance_eval". Defaults to None.

    Returns:
        The LazyValue, or a decorator producing one if no function was given.
    """
    if function is None:

        def decorator(f: Callable[..., T]) -> LazyValue[T]:
            return LazyValue(f, eval_mode)

        return decorator
    return LazyValue(function, eval_mode)
