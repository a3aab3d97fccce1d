"""Formal context and the closure operators of its Galois connection.

A formal context K = (G, M, I) relates a finite set of objects G to a finite
set of attributes M. Here every object is stored as its attribute set (its
row of I) and is addressed by a stable 1-based id, its position in the row
list. The attribute domain M is the union of all rows, computed once.

The four closure operators pair object sets with attribute sets:

    attribute_closure(a)        a'   objects having attribute a
    object_closure(o)           o'   attributes of object o
    set_attribute_closure(A)    A'   objects having every attribute of A
    set_object_closure(O)       O'   attributes shared by every object of O

A concept (A, O) is closed when A' == O and O' == A. The context is
read-only once built, so every closure is a pure query.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from pyaoc.concept import Concept
from pyaoc.errors import MalformedRowError, OutOfRangeError

logger = logging.getLogger(__name__)

# Attribute labels are alphanumerics and spaces.
LABEL_RE = re.compile(r"^[A-Za-z0-9 ]+$")


def validate_label(label: str, context: str) -> None:
    """Raise MalformedRowError if *label* is not an acceptable attribute label."""
    if not isinstance(label, str) or not LABEL_RE.match(label):
        raise MalformedRowError(
            f"{context}: attribute label {label!r} must be a non-empty string "
            f"of letters, digits and spaces."
        )


class FormalContext:
    """An immutable object/attribute relation.

    Parameters:
        rows: One attribute set per object. Row ``i`` (0-based) becomes the
            object with id ``i + 1``. Duplicate rows stay distinct objects.
    """

    def __init__(self, rows: Iterable[Iterable[str]] = ()) -> None:
        objects: list[frozenset[str]] = []
        for index, row in enumerate(rows, start=1):
            attrs = frozenset(row)
            for label in attrs:
                validate_label(label, f"Object {index}")
            objects.append(attrs)
        self._objects: tuple[frozenset[str], ...] = tuple(objects)
        self._all_objects: frozenset[int] = frozenset(range(1, len(objects) + 1))

        # Inverted index: attribute -> objects having it (the attribute closure).
        inverted: dict[str, set[int]] = {}
        for object_id, attrs in enumerate(self._objects, start=1):
            for label in attrs:
                inverted.setdefault(label, set()).add(object_id)
        self._extents: dict[str, frozenset[int]] = {
            label: frozenset(ids) for label, ids in inverted.items()
        }
        self._domain: frozenset[str] = frozenset(self._extents)

        logger.debug(
            "FormalContext created: %d objects, %d attributes",
            len(self._objects),
            len(self._domain),
        )

    # --- Read-only properties ---

    @property
    def objects(self) -> tuple[frozenset[str], ...]:
        """The rows of the relation; position ``i`` holds object ``i + 1``."""
        return self._objects

    @property
    def object_ids(self) -> frozenset[int]:
        """All object ids, ``{1, ..., object_count}``."""
        return self._all_objects

    @property
    def object_count(self) -> int:
        """Number of objects (rows)."""
        return len(self._objects)

    @property
    def attribute_domain(self) -> frozenset[str]:
        """All distinct attributes across the objects."""
        return self._domain

    def __len__(self) -> int:
        return len(self._objects)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormalContext):
            return NotImplemented
        return self._objects == other._objects

    def __hash__(self) -> int:
        return hash(self._objects)

    def __repr__(self) -> str:
        return (
            f"FormalContext({self.object_count} objects, "
            f"{len(self._domain)} attributes)"
        )

    def __str__(self) -> str:
        return "\n".join(
            f"o{object_id} : [{';'.join(sorted(attrs))}]"
            for object_id, attrs in enumerate(self._objects, start=1)
        )

    # --- Rows ---

    def _check_object(self, object_id: int) -> None:
        if (
            isinstance(object_id, bool)
            or not isinstance(object_id, int)
            or not 1 <= object_id <= len(self._objects)
        ):
            raise OutOfRangeError(
                f"Object id {object_id!r} is out of range: "
                f"the context has {len(self._objects)} objects."
            )

    def attributes_of(self, object_id: int) -> frozenset[str]:
        """Return the attribute set of object *object_id* (1-based)."""
        self._check_object(object_id)
        return self._objects[object_id - 1]

    # --- Closures ---

    def attribute_closure(self, attribute: str) -> frozenset[int]:
        """Objects having *attribute*: the extent of its attribute-concept.

        Attributes outside the domain close to the empty set.
        """
        return self._extents.get(attribute, frozenset())

    def object_closure(self, object_id: int) -> frozenset[str]:
        """Attributes of *object_id*: the intent of its object-concept."""
        return self.attributes_of(object_id)

    def set_attribute_closure(self, attributes: Iterable[str]) -> frozenset[int]:
        """Objects having every attribute of *attributes*.

        The empty attribute set closes to all objects.
        """
        result = self._all_objects
        for attribute in attributes:
            result = result & self.attribute_closure(attribute)
            if not result:
                break
        return result

    def set_object_closure(self, objects: Iterable[int]) -> frozenset[str]:
        """Attributes shared by every object of *objects*.

        The empty object set closes to the whole attribute domain.
        """
        result = self._domain
        for object_id in objects:
            result = result & self.object_closure(object_id)
        return result

    # --- Concept predicates ---

    def introduces_attribute(self, attribute: str, concept: Concept) -> bool:
        """True iff *concept* is exactly the attribute-concept of *attribute*."""
        return concept.extent == self.attribute_closure(attribute)

    def introduces_object(self, object_id: int, concept: Concept) -> bool:
        """True iff *concept* is exactly the object-concept of *object_id*."""
        return concept.intent == self.object_closure(object_id)

    def is_concept(self, concept: Concept) -> bool:
        """True iff *concept* is closed in this context.

        Raises OutOfRangeError if the extent names an unknown object.
        """
        return (
            self.set_object_closure(concept.extent) == concept.intent
            and self.set_attribute_closure(concept.intent) == concept.extent
        )

    def top(self) -> Concept:
        """The concept whose extent is every object."""
        return Concept(self.set_object_closure(self._all_objects), self._all_objects)

    def bottom(self) -> Concept:
        """The concept whose intent is the whole attribute domain."""
        return Concept(self._domain, self.set_attribute_closure(self._domain))

    # --- Duality ---

    def transpose(self) -> FormalContext:
        """Return the dual context with objects and attributes swapped.

        Object ``i`` of the result is the ``i``-th attribute of this context
        in sorted label order; its row holds the ids of the objects having
        that attribute, written as decimal strings.
        """
        return FormalContext(
            [str(object_id) for object_id in sorted(self._extents[label])]
            for label in sorted(self._domain)
        )

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {"objects": [sorted(attrs) for attrs in self._objects]}

    @classmethod
    def from_dict(cls, data: dict) -> FormalContext:
        """Deserialize from a dict (as produced by ``to_dict``)."""
        rows = data.get("objects", [])
        if not isinstance(rows, list):
            raise MalformedRowError("'objects' must be a list of attribute lists.")
        for index, row in enumerate(rows, start=1):
            if not isinstance(row, list):
                raise MalformedRowError(f"Object {index}: expected a list of attributes, got {row!r}.")
        return cls(rows)

    def to_file(self, path: str | Path) -> None:
        """Write the context to a JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug("Saved context to %s", path)

    @classmethod
    def from_file(cls, path: str | Path) -> FormalContext:
        """Load a context from a JSON file."""
        with open(path) as f:
            data = json.load(f)
        logger.debug("Loaded context from %s", path)
        return cls.from_dict(data)
