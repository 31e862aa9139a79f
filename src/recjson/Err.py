#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        # Empty string when no message provided, never None
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def qname(self):
        return f"recjson::{type(self).__name__}"

    def toStr(self):
        if self._msg:
            return f"{self.qname()}: {self._msg}"
        return self.qname()

    def traceToStr(self):
        """Return stack trace as string"""
        import traceback

        s = self.toStr()

        tb = getattr(self, '__traceback__', None)
        if tb:
            s += "\n" + "".join(traceback.format_tb(tb))

        if self._cause:
            if hasattr(self._cause, 'traceToStr'):
                s += "\n  Caused by: " + self._cause.traceToStr()
            else:
                s += f"\n  Caused by: {self._cause!r}"

        return s

    def __str__(self):
        return self.toStr()


class ArgErr(Err):
    """Argument error"""
    pass


class NullErr(Err):
    """Null error - raised when None is passed where a value is required"""
    pass


class UnsupportedErr(Err):
    """Unsupported operation error"""
    pass


class IOErr(Err):
    """I/O error"""
    pass


class JsonEncodingErr(IOErr):
    """Raised when the input is not well-formed JSON."""
    pass


#################################################################
# Configuration errors
#################################################################

class ConfigErr(Err):
    """Raised while building a binding table for a type.

    Configuration errors surface at setup time, never per record. A
    type that fails inspection is never used for encoding or decoding.
    """

    def __init__(self, msg=None, cause=None, type_name=None):
        super().__init__(msg, cause)
        self._type_name = type_name

    @classmethod
    def makeFor(cls, type_name, msg):
        return cls(msg, None, type_name)

    def typeName(self):
        """Qualified name of the type that was rejected."""
        return self._type_name


class UnsupportedTypeErr(ConfigErr):
    """Type shape can't be bound reflectively (local, abstract, sealed...)."""
    pass


class TypeMismatchErr(ConfigErr):
    """Constructor parameter and property declare different types."""
    pass


class MissingDefaultErr(ConfigErr):
    """Transient property feeds a constructor parameter without a default."""
    pass


class NoSourceErr(ConfigErr):
    """Required constructor parameter has no property to read it from."""
    pass


#################################################################
# Decode errors
#################################################################

class JsonDataErr(Err):
    """Raised when well-formed JSON doesn't fit the expected shape."""

    def __init__(self, msg=None, cause=None, name=None, json_name=None, path=None):
        super().__init__(msg, cause)
        self._name = name
        self._json_name = json_name
        self._path = path

    def name(self):
        """Declared property or parameter name, if known."""
        return self._name

    def jsonName(self):
        """Wire name of the offending field, if known."""
        return self._json_name

    def path(self):
        """JSON path where the error was detected, e.g. ``$.items[2].id``."""
        return self._path


class DuplicateFieldErr(JsonDataErr):
    """Same field appeared twice in one object"""

    @staticmethod
    def makeFor(name, json_name, path):
        return DuplicateFieldErr(
            f"Multiple values for '{name}' at {path}", None, name, json_name, path)


class UnexpectedNullErr(JsonDataErr):
    """Explicit null for a non-nullable property"""

    @staticmethod
    def makeFor(name, json_name, path):
        if json_name is None or json_name == name:
            msg = f"Unexpected null for property '{name}' at {path}"
        else:
            msg = f"Unexpected null for property '{name}' (JSON name '{json_name}') at {path}"
        return UnexpectedNullErr(msg, None, name, json_name, path)


class MissingPropertyErr(JsonDataErr):
    """Required constructor parameter absent from the input"""

    @staticmethod
    def makeFor(name, json_name, path):
        if json_name is None or json_name == name:
            msg = f"Missing required property '{name}' at {path}"
        else:
            msg = f"Missing required property '{name}' (JSON name '{json_name}') at {path}"
        return MissingPropertyErr(msg, None, name, json_name, path)
