"""Formal concepts as immutable (intent, extent) values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyaoc.context import FormalContext


def fmt_set(items: frozenset) -> str:
    """Format a set of labels or ids in sorted order, ``{A, B}``."""
    return "{" + ", ".join(str(x) for x in sorted(items)) + "}"


@dataclass(frozen=True, slots=True)
class Concept:
    """A pair (intent, extent) of an attribute set and an object set.

    Construction does not check closedness; use ``FormalContext.is_concept``
    for that. The ``introduce_*`` constructors always return closed concepts.

    Attributes:
        intent: Attribute labels.
        extent: Object ids (1-based).
    """

    intent: frozenset[str] = frozenset()
    extent: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        # Accept any iterable; store frozensets.
        object.__setattr__(self, "intent", frozenset(self.intent))
        object.__setattr__(self, "extent", frozenset(self.extent))

    def __str__(self) -> str:
        return f"({fmt_set(self.intent)}, {fmt_set(self.extent)})"

    @classmethod
    def introduce_attribute(cls, attribute: str, context: FormalContext) -> Concept:
        """The attribute-concept of *attribute*: (a'', a')."""
        extent = context.attribute_closure(attribute)
        return cls(context.set_object_closure(extent), extent)

    @classmethod
    def introduce_object(cls, object_id: int, context: FormalContext) -> Concept:
        """The object-concept of *object_id*: (o', o'')."""
        intent = context.object_closure(object_id)
        return cls(intent, context.set_attribute_closure(intent))

    def is_top(self, context: FormalContext) -> bool:
        """True iff the extent holds every object of *context*."""
        return self.extent == context.object_ids

    def is_bottom(self, context: FormalContext) -> bool:
        """True iff the intent holds the whole attribute domain of *context*."""
        return self.intent == context.attribute_domain

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {"intent": sorted(self.intent), "extent": sorted(self.extent)}

    @classmethod
    def from_dict(cls, data: dict) -> Concept:
        return cls(frozenset(data.get("intent", [])), frozenset(data.get("extent", [])))
