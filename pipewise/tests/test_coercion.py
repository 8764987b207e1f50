"""Tests for coercing results into typed slots."""

import pytest

from pipewise.models.exceptions import CoercionError
from pipewise.models.slot import Slot
from pipewise.services.coercion import coerce, coerce_into, is_convertible
from pipewise.services.pipeline import build


class TestSlot:
    """Tests for the Slot target."""

    def test_starts_empty(self):
        slot = Slot(str)
        assert slot.is_set is False
        with pytest.raises(LookupError):
            slot.value

    def test_set_stores_value(self):
        slot = Slot(int)
        slot.set(3)
        assert slot.is_set is True
        assert slot.value == 3

    def test_readonly_rejects_writes(self):
        slot = Slot(int, readonly=True)
        with pytest.raises(AttributeError):
            slot.set(3)


class TestCoerceInto:
    """Tests for coerce_into."""

    def test_string_into_string_slot(self):
        target = Slot(str)
        coerce_into("hello", target)
        assert target.value == "hello"

    def test_string_into_int_slot_fails(self):
        target = Slot(int)
        with pytest.raises(CoercionError) as exc_info:
            coerce_into("12", target)
        assert "str" in str(exc_info.value)
        assert "int" in str(exc_info.value)
        assert target.is_set is False

    def test_non_slot_target_fails(self):
        with pytest.raises(CoercionError, match="writable reference"):
            coerce_into("hello", ["not", "a", "slot"])

    def test_readonly_slot_fails(self):
        target = Slot(str, readonly=True)
        with pytest.raises(CoercionError, match="writable reference"):
            coerce_into("hello", target)

    def test_pipeline_result_into_slot(self):
        def shout(s: str) -> str:
            return s.upper()

        value, err = build(shout)("go")
        target = Slot(str)
        coerce_into(value, target)

        assert err is None
        assert target.value == "GO"


class TestCoerce:
    """Tests for coerce and is_convertible."""

    def test_int_widens_to_float(self):
        assert coerce(5, float) == 5.0

    def test_bool_is_not_int(self):
        assert is_convertible(True, int) is False

    def test_float_is_not_int(self):
        assert is_convertible(1.5, int) is False

    def test_generic_container(self):
        assert coerce([1, 2], list[int]) == [1, 2]
        assert is_convertible(["a"], list[int]) is False

    def test_arbitrary_class(self):
        class Token:
            pass

        token = Token()
        assert coerce(token, Token) is token
        assert is_convertible("token", Token) is False
