#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Facet:
    """Base class for facets (metadata on properties, parameters and types).

    Facets are attached with ``typing.Annotated``::

        @dataclass
        class Card:
            rank: Annotated[int, Json(name="r")]
            cache: Annotated[dict, Transient()] = field(default_factory=dict)

    Dataclass fields may also carry them through field metadata, see
    ``Facet.fromFieldMetadata``.
    """

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self):
        args = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"

    @staticmethod
    def find(metadata, facet_type):
        """Find first facet of the given type, or None."""
        for m in metadata:
            if isinstance(m, facet_type):
                return m
            if m is facet_type:
                return facet_type()
        return None

    @staticmethod
    def jsonName(metadata):
        """Get the wire name override declared in metadata, or None."""
        json = Facet.find(metadata, Json)
        return json.name() if json is not None else None

    @staticmethod
    def isTransient(metadata):
        return Facet.find(metadata, Transient) is not None

    @staticmethod
    def qualifiers(metadata):
        """Get the qualifier facets, deduplicated, in declaration order."""
        result = []
        for m in metadata:
            if isinstance(m, type) and issubclass(m, JsonQualifier):
                m = m()
            if isinstance(m, JsonQualifier) and m not in result:
                result.append(m)
        return tuple(result)

    @staticmethod
    def fromFieldMetadata(metadata):
        """Translate dataclass field metadata into facets.

        Recognized keys: ``json`` (wire name string or a Json facet),
        ``transient`` (bool) and ``facets`` (iterable of Facet).
        """
        facets = []
        json = metadata.get("json")
        if isinstance(json, Json):
            facets.append(json)
        elif json is not None:
            facets.append(Json(str(json)))
        if metadata.get("transient"):
            facets.append(Transient())
        facets.extend(metadata.get("facets", ()))
        return facets

    @staticmethod
    def isSealed(cls):
        """Sealed marker is not inherited; only the annotated root is sealed."""
        return bool(cls.__dict__.get("__json_sealed__", False))


class Json(Facet):
    """Overrides the name a property or parameter uses on the wire."""

    def __init__(self, name=None):
        self._name = name

    def name(self):
        return self._name


class Transient(Facet):
    """Excludes a property from both encoding and decoding."""
    pass


class JsonQualifier(Facet):
    """Base class for qualifier facets.

    Qualifiers are forwarded to the registry when an adapter is looked up,
    so a factory registered for ``(str, HexColor())`` can handle a property
    declared as ``Annotated[str, HexColor()]``.
    """
    pass


def sealed(cls):
    """Mark cls as the root of a closed hierarchy.

    Sealed types need a hand-registered adapter; reflective binding
    refuses them.
    """
    cls.__json_sealed__ = True
    return cls
