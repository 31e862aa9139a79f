#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
JsonToken defines the token type constants reported by JsonReader.peek().
"""


class JsonToken:
    """Token type constants for JSON streams."""

    BEGIN_ARRAY = 0      # [
    END_ARRAY = 1        # ]
    BEGIN_OBJECT = 2     # {
    END_OBJECT = 3       # }
    NAME = 4             # "name":
    STRING = 5
    NUMBER = 6
    BOOLEAN = 7
    NULL = 8
    END_DOCUMENT = 9

    @staticmethod
    def isValue(type_):
        """Check if token type starts a value."""
        return type_ in (JsonToken.BEGIN_ARRAY, JsonToken.BEGIN_OBJECT) or \
            JsonToken.STRING <= type_ <= JsonToken.NULL

    @staticmethod
    def toStr(type_):
        """Get string representation of token type."""
        names = {
            JsonToken.BEGIN_ARRAY: "BEGIN_ARRAY",
            JsonToken.END_ARRAY: "END_ARRAY",
            JsonToken.BEGIN_OBJECT: "BEGIN_OBJECT",
            JsonToken.END_OBJECT: "END_OBJECT",
            JsonToken.NAME: "NAME",
            JsonToken.STRING: "STRING",
            JsonToken.NUMBER: "NUMBER",
            JsonToken.BOOLEAN: "BOOLEAN",
            JsonToken.NULL: "NULL",
            JsonToken.END_DOCUMENT: "END_DOCUMENT",
        }
        return names.get(type_, f"JsonToken[{type_}]")
