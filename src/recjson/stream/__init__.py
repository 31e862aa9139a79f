#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
stream - JSON token reader and writer.
"""

from .JsonToken import JsonToken
from .Options import Options
from .JsonReader import JsonReader
from .JsonWriter import JsonWriter
