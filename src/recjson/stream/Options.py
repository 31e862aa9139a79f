#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Options:
    """Precompiled set of names for JsonReader.selectName().

    Index ``i`` of the options corresponds to ``names()[i]``.
    """

    def __init__(self, names):
        self._names = tuple(names)
        self._index = {}
        for i, name in enumerate(self._names):
            if name in self._index:
                from ..Err import ArgErr
                raise ArgErr.make(f"Duplicate option name: '{name}'")
            self._index[name] = i

    @staticmethod
    def of(*names):
        return Options(names)

    def names(self):
        return self._names

    def indexOf(self, name):
        """Get index of name, or -1 if name is not an option."""
        return self._index.get(name, -1)

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return f"Options{list(self._names)!r}"
