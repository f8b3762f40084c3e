import logging

import pytest

from lazystruct.eval_modes import INSTANCE_EVAL
from lazystruct.lazy import lazy
from lazystruct.resolver import NOT_FOUND, resolve, resolve_raw
from lazystruct.slots import EMPTY_SLOT, SET, SET_LAZY, UNSET, AttributeSlot


def _default():
    return "default"


def _not_found():
    return NOT_FOUND


def _from_supertype():
    return "supertype"


def _fail():
    raise AssertionError("should not be called")


def test_slot_of():
    assert AttributeSlot.of(1) == AttributeSlot(SET, 1)
    assert AttributeSlot.of(None).state == SET
    assert AttributeSlot.of(lazy(lambda: 1)).state == SET_LAZY
    assert EMPTY_SLOT.state == UNSET
    assert not EMPTY_SLOT.is_set


def test_set_value():
    assert resolve(AttributeSlot.of(1), None, _fail, _fail) == 1


def test_set_lazy_value_plain():
    slot = AttributeSlot.of(lazy(lambda: "plain"))

    assert resolve(slot, object(), _fail, _fail) == "plain"


def test_set_lazy_value_instance_eval():
    instance = object()
    slot = AttributeSlot.of(lazy(lambda ctx: ctx, INSTANCE_EVAL))

    assert resolve(slot, instance, _fail, _fail) is instance


def test_unset_from_supertype():
    assert resolve(EMPTY_SLOT, None, _fail, _from_supertype) == "supertype"


def test_unset_supertype_none_value_is_found():
    assert resolve(EMPTY_SLOT, None, _fail, lambda: None) is None


def test_unset_default():
    assert resolve(EMPTY_SLOT, None, _default, _not_found) == "default"


def test_raw_does_not_evaluate():
    value = lazy(_fail)
    slot = AttributeSlot.of(value)

    assert resolve_raw(slot, None, _fail, _fail) is value


def test_raw_unset():
    assert resolve_raw(EMPTY_SLOT, None, _default, _not_found) == "default"
    assert resolve_raw(EMPTY_SLOT, None, _fail, _from_supertype) == "supertype"


def test_lazy_error_propagates():
    slot = AttributeSlot.of(lazy(_fail))

    with pytest.raises(AssertionError):
        resolve(slot, None, _default, _not_found)


def test_not_found_is_falsy():
    assert not NOT_FOUND
    assert repr(NOT_FOUND) == "NOT_FOUND"


def test_logs_fallback_to_default(caplog):
    caplog.set_level(logging.DEBUG, logger="lazystruct.resolver")

    resolve(EMPTY_SLOT, "instance", _default, _not_found)

    assert "Resolved the default for 'instance'" in caplog.text


def test_logs_fallback_to_supertype(caplog):
    caplog.set_level(logging.DEBUG, logger="lazystruct.resolver")

    resolve(EMPTY_SLOT, "instance", _fail, _from_supertype)

    assert "from the supertype of 'instance'" in caplog.text
