#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from recjson import ABSENT, SlotStore


def test_new_store_is_all_absent():
    slots = SlotStore(3)
    assert slots.size() == 3
    assert slots.count() == 0
    assert slots.values() == [ABSENT, ABSENT, ABSENT]
    assert not any(slots.contains(i) for i in range(3))


def test_none_is_present_not_absent():
    slots = SlotStore(2)
    slots.set(0, None)
    assert slots.contains(0)
    assert slots.get(0) is None
    assert slots.get(1) is ABSENT
    assert slots.count() == 1


def test_set_twice_counts_once():
    slots = SlotStore(2)
    slots.set(1, "a")
    slots.set(1, "b")
    assert slots.count() == 1
    assert slots.get(1) == "b"


def test_fully_initialized_prefix():
    slots = SlotStore(3)
    slots.set(0, 1)
    slots.set(1, 2)
    assert slots.isFullyInitialized(2)
    assert not slots.isFullyInitialized(3)
    assert not slots.isFullyInitialized()
    slots.set(2, 3)
    assert slots.isFullyInitialized()
    assert slots.values(0, 2) == [1, 2]


def test_fully_initialized_ignores_appended_slots():
    slots = SlotStore(3)
    slots.set(0, 1)
    slots.set(2, "appended")
    assert slots.isFullyInitialized(1)
    assert not slots.isFullyInitialized(2)


def test_absent_is_falsy_singleton():
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"
    assert type(ABSENT)() is ABSENT
