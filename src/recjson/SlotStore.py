#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class _Absent:
    """Marker for a slot that received no input (distinct from None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False


ABSENT = _Absent()


class SlotStore:
    """Fixed-size storage for constructor arguments being decoded.

    Slots are addressed by integer index: constructor parameters occupy
    ``[0, arity)`` and settable-only properties follow. Each decode call
    allocates its own store.
    """

    def __init__(self, size):
        self._values = [ABSENT] * size
        self._present = bytearray(size)
        self._count = 0

    def size(self):
        return len(self._values)

    def count(self):
        """Number of slots holding a value (None included)."""
        return self._count

    def set(self, index, value):
        """Store value in slot index, marking it present."""
        self._values[index] = value
        if not self._present[index]:
            self._present[index] = 1
            self._count += 1

    def get(self, index):
        """Get the value in slot index, or ABSENT."""
        return self._values[index]

    def contains(self, index):
        return self._present[index] != 0

    def isFullyInitialized(self, upTo=None):
        """Check if every slot in ``[0, upTo)`` is present.

        With no argument, checks the whole store.
        """
        if upTo is None or upTo == len(self._values):
            return self._count == len(self._values)
        return all(self._present[:upTo])

    def values(self, start=0, end=None):
        """Get a copy of slot values in ``[start, end)``."""
        return self._values[start:end]

    def __repr__(self):
        return f"SlotStore({self._values!r})"
