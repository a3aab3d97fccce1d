"""Conceptual cover: the neighbourhood of a pivot concept under construction.

The same structure serves both directions. For an upper cover the members are
super-concepts of the pivot, for a lower cover sub-concepts. Members are kept
unique by intent and by extent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pyaoc.concept import Concept
from pyaoc.context import FormalContext

logger = logging.getLogger(__name__)


class ConceptualCover:
    """A deduplicated collection of candidate neighbour concepts.

    Parameters:
        context: The formal context in which candidates are introduced.
        concepts: Optional initial members.
    """

    def __init__(self, context: FormalContext, concepts: Iterable[Concept] = ()) -> None:
        self.context = context
        self._members: list[Concept] = []
        for concept in concepts:
            if self.find_by_intent(concept.intent) is None and self.find_by_extent(concept.extent) is None:
                self._members.append(concept)

    # --- Size and iteration ---

    def size(self) -> int:
        """Number of concepts in the cover."""
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Concept]:
        return iter(self._members)

    def __contains__(self, concept: object) -> bool:
        return concept in self._members

    @property
    def concepts(self) -> tuple[Concept, ...]:
        """The current members (read-only view)."""
        return tuple(self._members)

    def as_set(self) -> frozenset[Concept]:
        return frozenset(self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConceptualCover):
            return NotImplemented
        return self.as_set() == other.as_set()

    # --- Insertion ---

    def add_candidate_attribute_concept(self, attribute: str) -> Concept | None:
        """Insert the attribute-concept of *attribute* unless already represented.

        A member whose intent contains *attribute* lies below the
        attribute-concept or is it, so nothing is added in that case.
        Returns the inserted concept, or None.
        """
        for concept in self._members:
            if attribute in concept.intent:
                return None
        concept = Concept.introduce_attribute(attribute, self.context)
        self._members.append(concept)
        logger.debug("Added attribute-concept of %s: %s", attribute, concept)
        return concept

    def add_candidate_object_concept(self, object_id: int) -> Concept | None:
        """Insert the object-concept of *object_id* unless already represented."""
        for concept in self._members:
            if object_id in concept.extent:
                return None
        concept = Concept.introduce_object(object_id, self.context)
        self._members.append(concept)
        logger.debug("Added object-concept of %d: %s", object_id, concept)
        return concept

    # --- Lookup and removal ---

    def find_by_intent(self, intent: Iterable[str]) -> Concept | None:
        """Return the member whose intent equals *intent*, if any."""
        intent = frozenset(intent)
        for concept in self._members:
            if concept.intent == intent:
                return concept
        return None

    def find_by_extent(self, extent: Iterable[int]) -> Concept | None:
        """Return the member whose extent equals *extent*, if any."""
        extent = frozenset(extent)
        for concept in self._members:
            if concept.extent == extent:
                return concept
        return None

    def remove_by_intent(self, intent: Iterable[str]) -> None:
        """Remove the member whose intent equals *intent*; no-op if absent."""
        concept = self.find_by_intent(intent)
        if concept is not None:
            self._members.remove(concept)
            logger.debug("Removed %s", concept)

    def remove_by_extent(self, extent: Iterable[int]) -> None:
        """Remove the member whose extent equals *extent*; no-op if absent."""
        concept = self.find_by_extent(extent)
        if concept is not None:
            self._members.remove(concept)
            logger.debug("Removed %s", concept)

    # --- Projections ---

    def intents(self) -> list[frozenset[str]]:
        """Intents of all members."""
        return [concept.intent for concept in self._members]

    def extents(self) -> list[frozenset[int]]:
        """Extents of all members."""
        return [concept.extent for concept in self._members]

    # --- Rendering ---

    def sorted_concepts(self) -> list[Concept]:
        """Members in a stable order: by sorted intent, then sorted extent."""
        return sorted(self._members, key=lambda c: (sorted(c.intent), sorted(c.extent)))

    def __str__(self) -> str:
        return "\n".join(str(concept) for concept in self.sorted_concepts())

    def __repr__(self) -> str:
        return f"ConceptualCover({len(self._members)} concepts)"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "size": len(self._members),
            "concepts": [concept.to_dict() for concept in self.sorted_concepts()],
        }
