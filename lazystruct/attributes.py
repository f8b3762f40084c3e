"""Attribute descriptors with lazy values and supertype fallback.

Each attribute provides a getter (struct.name), a setter
(Struct.name.set(struct, value)) and an equal setter (struct.name = value).
Values not set on an instance are asked from its supertype, then from the
default.

Example:
    from lazystruct import SimpleStruct, attribute, lazy

    class Service(SimpleStruct):
        port = attribute(default=80)
        url = attribute()

    base = Service(port=8080)
    web = Service(supertype=base)
    web.url = lazy(lambda svc: f"http://localhost:{svc.port}", "instance_eval")
    print(web.port)
    #> 8080
    print(web.url)
    #> http://localhost:8080
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

from lazystruct.errors import InvalidAssignmentError
from lazystruct.eval_modes import INSTANCE_EVAL
from lazystruct.lazy import LazyValue
from lazystruct.resolver import NOT_FOUND, resolve, resolve_raw
from lazystruct.slots import EMPTY_SLOT, SET_LAZY, AttributeSlot
from lazystruct.types import Type, TypeRegistry, resolve_type

__all__ = (
    "Attribute",
    "BlockAttribute",
    "BooleanAttribute",
    "BooleanPredicate",
    "TypedAttribute",
    "attribute",
    "block_attribute",
    "boolean_attribute",
    "typed_attribute",
    "define_attribute",
    "define_block_attribute",
    "define_boolean_attribute",
    "define_typed_attribute",
    "find_attribute",
    "install_attribute",
    "invoke_block_attribute",
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A", bound="Attribute")

SLOT_PREFIX = "_lazystruct_slot_"


def find_attribute(owner: type, name: str) -> "Attribute | None":
    """Find the attribute declared under a name by a class or its bases.

    Args:
        owner (type): The class to look in.
        name (str): The name of the attribute.

    Returns:
        Attribute | None: The attribute if declared; otherwise None.
    """
    value = getattr(owner, name, None)
    if isinstance(value, Attribute):
        return value
    return None


class Attribute(Generic[T]):
    """A plain attribute accepting any value."""

    def __init__(
        self,
        default: T | None = None,
        *,
        default_factory: Callable[[], T] | None = None,
        name: str | None = None,
    ) -> None:
        if default is not None and default_factory is not None:
            raise ValueError("Cannot specify both default and default_factory")
        self._default = default
        self._default_factory = default_factory
        self._name = name

    def __set_name__(self, owner: type, name: str) -> None:
        if self._name is None:
            self._name = name

    @property
    def name(self) -> str:
        if self._name is None:
            raise AttributeError(f"{self!r} has not been named")
        return self._name

    @property
    def slot_name(self) -> str:
        return SLOT_PREFIX + self.name

    def default(self) -> T | None:
        if self._default_factory is not None:
            return self._default_factory()
        return self._default

    def slot(self, instance: Any) -> AttributeSlot:
        return vars(instance).get(self.slot_name, EMPTY_SLOT)

    def is_set(self, instance: Any) -> bool:
        """Check if a value has been explicitly set on the instance."""
        return self.slot(instance).is_set

    def _supertype_lookup(self, instance: Any) -> Callable[[], Any]:
        def lookup() -> Any:
            supertype = getattr(instance, "supertype", None)
            if supertype is None:
                return NOT_FOUND
            if find_attribute(type(supertype), self.name) is None:
                return NOT_FOUND
            return getattr(supertype, self.name)

        return lookup

    def get(self, instance: Any) -> T | None:
        """Resolve the value of the attribute.

        Args:
            instance (Any): The instance to get the value of.

        Returns:
            T | None: The explicit value, the evaluated lazy value, the
                supertype value or the default; in that order.
        """
        return resolve(
            self.slot(instance),
            instance,
            self.default,
            self._supertype_lookup(instance),
        )

    def validate(self, instance: Any, value: Any) -> Any:
        """Check a value before it is stored. Plain attributes accept any value."""
        return value

    def set(self, instance: Any, value: Any) -> None:
        """Set the value of the attribute on the instance.

        Args:
            instance (Any): The instance to set the value on.
            value (Any): A value or a LazyValue.
        """
        value = self.validate(instance, value)
        logger.debug("Setting %s of %r to %r", self.name, instance, value)
        vars(instance)[self.slot_name] = AttributeSlot.of(value)

    @overload
    def __get__(self: A, instance: None, owner: type) -> A: ...

    @overload
    def __get__(self, instance: object, owner: type) -> T | None: ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return self.get(instance)

    def __set__(self, instance: Any, value: Any) -> None:
        self.set(instance, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class BlockAttribute(Attribute[Callable[..., Any] | LazyValue]):
    """An attribute holding a block of code to be invoked later.

    Has several setter forms:

    - Block form, Struct.attr.set_block(struct, fn) or the
      @Struct.attr.block(struct) decorator: sets attr to a LazyValue in
      "instance_eval" mode.
    - Bare callable, struct.attr = fn: stored as is, it will NOT be given
      the instance when evaluated as a lazy value.
    - LazyValue, struct.attr = lazy(fn): switched to "instance_eval" mode
      unless its mode was explicitly set, in which case it is obeyed.

    Reading the attribute returns what was stored without running it; use
    invoke_block_attribute() to run it.
    """

    def __init__(self, *, name: str | None = None) -> None:
        super().__init__(name=name)

    def get(self, instance: Any) -> Callable[..., Any] | LazyValue | None:
        return resolve_raw(
            self.slot(instance),
            instance,
            self.default,
            self._supertype_lookup(instance),
        )

    def validate(self, instance: Any, value: Any) -> Any:
        if isinstance(value, LazyValue):
            # Flip on instance_eval if it's not set, so that
            # attr = lazy(fn) does the expected thing.
            if not value.eval_mode_explicitly_set:
                value = value.with_eval_mode(INSTANCE_EVAL)
            return value
        if not callable(value):
            raise InvalidAssignmentError(self.name, value)
        return value

    def set_block(self, instance: Any, block: Callable[[Any], Any]) -> None:
        """Set a block that is given the instance when invoked."""
        self.set(instance, LazyValue(block, INSTANCE_EVAL))

    def block(
        self, instance: Any
    ) -> Callable[[Callable[[Any], T]], Callable[[Any], T]]:
        """Decorator form of set_block().

        Example:
            @Recipe.action.block(recipe)
            def action(recipe):
                ...
        """

        def decorator(block: Callable[[Any], T]) -> Callable[[Any], T]:
            self.set_block(instance, block)
            return block

        return decorator


class BooleanPredicate(property):
    """The is_<attr> property installed by a BooleanAttribute."""

    pass


class BooleanAttribute(Attribute[T]):
    """A plain attribute with a predicate.

    The predicate is available as Struct.attr.test(struct) and as an
    is_<attr> property installed on the class declaring the attribute.
    A predicate inherited from a base class declaring the same attribute is
    replaced; any other existing is_<attr> is kept.
    """

    def __set_name__(self, owner: type, name: str) -> None:
        super().__set_name__(owner, name)
        predicate_name = f"is_{self.name}"
        existing = getattr(owner, predicate_name, None)
        if existing is None or isinstance(existing, BooleanPredicate):
            setattr(owner, predicate_name, BooleanPredicate(self.test))

    def test(self, instance: Any) -> bool:
        return bool(self.get(instance))


class TypedAttribute(Attribute[T]):
    """An attribute coercing its values through a Type.

    Values are coerced when set, with the instance as context. Lazy values
    are coerced every time they are evaluated. None is stored as is.
    """

    def __init__(
        self,
        type_: type,
        default: T | None = None,
        *,
        default_factory: Callable[[], T] | None = None,
        name: str | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        super().__init__(default, default_factory=default_factory, name=name)
        self._type = resolve_type(type_, registry)

    @property
    def type(self) -> type[Type]:
        return self._type

    def get(self, instance: Any) -> T | None:
        slot = self.slot(instance)
        value = super().get(instance)
        if slot.state == SET_LAZY and value is not None:
            value = self._type.coerce(instance, value)
        return value

    def validate(self, instance: Any, value: Any) -> Any:
        if value is None or isinstance(value, LazyValue):
            return value
        coerced = self._type.coerce(instance, value)
        logger.debug(
            "%s coerced %r to %r", self._type.__qualname__, value, coerced
        )
        return coerced

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, type={self._type.__qualname__})"


def attribute(
    default: T | None = None,
    *,
    default_factory: Callable[[], T] | None = None,
) -> Attribute[T]:
    """Declare a plain attribute.

    Args:
        default (T | None, optional): Returned when neither the instance nor
            its supertypes have a value. Defaults to None.
        default_factory (Callable[[], T] | None, optional): Called for the
            default instead, on every read. Defaults to None.

    Returns:
        Attribute[T]: The attribute.
    """
    return Attribute(default, default_factory=default_factory)


def block_attribute() -> BlockAttribute:
    """Declare a block attribute."""
    return BlockAttribute()


def boolean_attribute(
    default: T | None = None,
    *,
    default_factory: Callable[[], T] | None = None,
) -> BooleanAttribute[T]:
    """Declare a boolean attribute with an is_<name> predicate."""
    return BooleanAttribute(default, default_factory=default_factory)


def typed_attribute(
    type_: type,
    default: T | None = None,
    *,
    default_factory: Callable[[], T] | None = None,
    registry: TypeRegistry | None = None,
) -> TypedAttribute[T]:
    """Declare an attribute whose values are coerced.

    Args:
        type_ (type): A Type subclass, or a Python kind registered in the registry.
        default (T | None, optional): The default value. Defaults to None.
        default_factory (Callable[[], T] | None, optional): Factory for the default. Defaults to None.
        registry (TypeRegistry | None, optional): The registry to look kinds up in.
            Defaults to the default registry.

    Raises:
        UnknownTypeError: If type_ is neither a Type nor a registered kind.

    Returns:
        TypedAttribute[T]: The attribute.
    """
    return TypedAttribute(
        type_, default, default_factory=default_factory, registry=registry
    )


def install_attribute(owner: type, name: str, descriptor: A) -> A:
    """Install an attribute on an existing class.

    Args:
        owner (type): The class to install the attribute on.
        name (str): The name of the attribute.
        descriptor (A): The attribute.

    Returns:
        A: The installed attribute.
    """
    setattr(owner, name, descriptor)
    descriptor.__set_name__(owner, name)
    return descriptor


def define_attribute(
    owner: type,
    name: str,
    default: Any = None,
    *,
    default_factory: Callable[[], Any] | None = None,
) -> Attribute:
    return install_attribute(
        owner, name, attribute(default, default_factory=default_factory)
    )


def define_block_attribute(owner: type, name: str) -> BlockAttribute:
    return install_attribute(owner, name, block_attribute())


def define_boolean_attribute(
    owner: type,
    name: str,
    default: Any = None,
    *,
    default_factory: Callable[[], Any] | None = None,
) -> BooleanAttribute:
    return install_attribute(
        owner,
        name,
        boolean_attribute(default, default_factory=default_factory),
    )


def define_typed_attribute(
    owner: type,
    name: str,
    type_: type,
    default: Any = None,
    *,
    default_factory: Callable[[], Any] | None = None,
    registry: TypeRegistry | None = None,
) -> TypedAttribute:
    return install_attribute(
        owner,
        name,
        typed_attribute(
            type_,
            default,
            default_factory=default_factory,
            registry=registry,
        ),
    )


def invoke_block_attribute(value: Any, instance: Any) -> Any:
    """Invoke the value stored in a block attribute.

    A LazyValue is evaluated according to its mode. Any other callable is
    always given the instance, however it was stored.

    Args:
        value (Any): The attribute value to invoke.
        instance (Any): The instance to evaluate against.

    Returns:
        Any: The result of the invocation, or None if value is None.
    """
    if value is None:
        return None
    if isinstance(value, LazyValue):
        return value.get(instance)
    if not callable(value):
        raise TypeError(f"{value!r} is not callable")
    return value(instance)
