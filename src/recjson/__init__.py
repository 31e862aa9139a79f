#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

"""
recjson - JSON adapters for record classes, bound through their primary
constructor.
"""

from .Err import (
    Err,
    ArgErr,
    NullErr,
    UnsupportedErr,
    IOErr,
    JsonEncodingErr,
    ConfigErr,
    UnsupportedTypeErr,
    TypeMismatchErr,
    MissingDefaultErr,
    NoSourceErr,
    JsonDataErr,
    DuplicateFieldErr,
    UnexpectedNullErr,
    MissingPropertyErr,
)
from .Config import Config
from .Log import Log, LogLevel, LogRec
from .Facet import Facet, Json, Transient, JsonQualifier, sealed
from .Types import Types
from .Param import Param
from .Prop import Prop, PropFlags
from .Ctor import Ctor
from .SlotStore import SlotStore, ABSENT
from .stream import JsonToken, Options, JsonReader, JsonWriter
from .JsonAdapter import JsonAdapter
from .Binding import Binding
from .BindingTable import BindingTable
from .Inspector import Inspector, InspectResult
from .RecordAdapter import RecordAdapter
from .RecordAdapterFactory import RecordAdapterFactory
from .GeneratedAdapterFactory import GeneratedAdapterFactory
from .StdAdapters import StdAdapters
from .Registry import Registry, RegistryBuilder
