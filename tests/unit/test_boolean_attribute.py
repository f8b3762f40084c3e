import pytest

from lazystruct import (
    SimpleStruct,
    boolean_attribute,
    define_boolean_attribute,
    lazy,
)


class Feature(SimpleStruct):
    enabled = boolean_attribute(default=False)
    beta = boolean_attribute()


def test_predicate_default():
    feature = Feature()

    assert feature.is_enabled is False
    assert feature.is_beta is False
    assert feature.beta is None


def test_predicate_is_truthiness():
    feature = Feature(enabled="yes")

    assert feature.enabled == "yes"
    assert feature.is_enabled is True
    assert Feature.enabled.test(feature) is True


def test_predicate_follows_supertype():
    child = Feature(supertype=Feature(enabled=True))

    assert child.is_enabled


def test_predicate_evaluates_lazy_value(counter):
    feature = Feature(enabled=lazy(lambda: counter() % 2))

    assert feature.is_enabled is True
    assert feature.is_enabled is False


def test_predicate_is_read_only():
    feature = Feature()

    with pytest.raises(AttributeError):
        feature.is_enabled = True


def test_existing_predicate_name_is_kept():
    class Toggle(SimpleStruct):
        def is_on(self):
            return "custom"

        on = boolean_attribute()

    assert Toggle().is_on() == "custom"


def test_define_boolean_attribute():
    class Flags(SimpleStruct):
        pass

    define_boolean_attribute(Flags, "debug", default=True)

    assert Flags().is_debug is True
    assert Flags(debug=0).is_debug is False


def test_redeclared_attribute_predicate_uses_own_default():
    class Base(SimpleStruct):
        flag = boolean_attribute(default=False)

    class Child(Base):
        flag = boolean_attribute(default=True)

    child = Child()

    assert child.flag is True
    assert child.is_flag is True
    assert Base().is_flag is False


def test_inherited_custom_predicate_is_kept():
    class Base(SimpleStruct):
        @property
        def is_on(self):
            return "custom"

    class Child(Base):
        on = boolean_attribute(default=False)

    assert Child().is_on == "custom"
