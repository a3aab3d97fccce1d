"""Local generation of the AOC-poset neighbourhood of a concept.

Given a closed pivot concept C = (A, O), the upper cover is the set of
concepts of the AOC-poset directly above C and the lower cover the set
directly below it. Both are recomputed from the closure operators of the
context, without building the concept lattice.

Upper cover, in three phases:

    1. Attribute candidates. Take the attributes of A not introduced by C.
       For each surviving a, drop every other candidate that belongs to the
       intent of a's attribute-concept: its attribute-concept lies above
       a's. The survivors' attribute-concepts enter the cover.
    2. Object candidates. Collect every object outside O whose own attribute
       set is included in A. Objects with no attributes qualify, so the top
       concept is reached when it is an object-concept. Of these keep the
       ones whose attribute set is not strictly included in another
       candidate's.
    3. Merge. An object candidate whose object-concept lies above (or is)
       one of the Phase 1 attribute-concepts is skipped. Otherwise the
       attribute-concepts whose extent holds o sit above o's
       object-concept: remove them and insert o's object-concept instead.

Phase 2 scans all objects rather than the extents of the Phase 1 survivors:
an object-concept can sit below only an attribute-concept that Phase 1
dropped, and would otherwise be missed. After the merge the cover holds the
minimal elements of all AOC-poset concepts strictly above C, which is the
exact upper cover.

The lower cover is the same procedure with objects and attributes swapped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pyaoc.concept import Concept
from pyaoc.context import FormalContext
from pyaoc.cover import ConceptualCover
from pyaoc.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class Neighborhood:
    """Upper and lower covers of a concept.

    Attributes:
        concept: The pivot concept.
        upper: Direct super-concepts (empty for the top concept).
        lower: Direct sub-concepts (empty for the bottom concept).
        trace: Human-readable record of the phases.
    """

    concept: Concept
    upper: ConceptualCover
    lower: ConceptualCover
    trace: list[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of concepts generated, the pivot included."""
        return len(self.upper) + len(self.lower) + 1

    def to_dict(self) -> dict:
        return {
            "concept": self.concept.to_dict(),
            "upper": self.upper.to_dict(),
            "lower": self.lower.to_dict(),
        }


class LocalGenerator:
    """Computes covers of concepts of one formal context.

    The generator holds no state besides its context, so one instance can
    serve concurrent calls on distinct pivots.

    Parameters:
        context: The formal context the pivots belong to.
    """

    def __init__(self, context: FormalContext) -> None:
        self.context = context

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def upper_cover(self, concept: Concept) -> ConceptualCover:
        """Return the direct super-concepts of *concept* in the AOC-poset.

        These are the minimal attribute- and object-concepts strictly above
        *concept*. The top concept is among them when some object has no
        attributes and nothing else lies in between.

        Raises InvalidArgumentError if *concept* is not closed or has an
        empty intent (the top concept).
        """
        return self._upper_cover(concept, [])

    def lower_cover(self, concept: Concept) -> ConceptualCover:
        """Return the direct sub-concepts of *concept* in the AOC-poset.

        These are the maximal attribute- and object-concepts strictly below
        *concept*.

        Raises InvalidArgumentError if *concept* is not closed or has an
        empty extent (the bottom concept).
        """
        return self._lower_cover(concept, [])

    def neighborhood(self, concept: Concept) -> Neighborhood:
        """Compute both covers, skipping the side the pivot has none on."""
        trace: list[str] = []
        self._check_closed(concept)
        if concept.intent and not concept.is_top(self.context):
            upper = self._upper_cover(concept, trace)
        else:
            self._log(trace, "TOP: upper cover skipped")
            upper = ConceptualCover(self.context)
        if concept.extent and not concept.is_bottom(self.context):
            lower = self._lower_cover(concept, trace)
        else:
            self._log(trace, "BOTTOM: lower cover skipped")
            lower = ConceptualCover(self.context)
        return Neighborhood(concept=concept, upper=upper, lower=lower, trace=trace)

    def object_neighborhood(self, object_id: int) -> Neighborhood:
        """Neighbourhood of the object-concept of *object_id*."""
        return self.neighborhood(Concept.introduce_object(object_id, self.context))

    def attribute_neighborhood(self, attribute: str) -> Neighborhood:
        """Neighbourhood of the attribute-concept of *attribute*."""
        if attribute not in self.context.attribute_domain:
            raise InvalidArgumentError(f"Unknown attribute {attribute!r}.")
        return self.neighborhood(Concept.introduce_attribute(attribute, self.context))

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _check_closed(self, concept: Concept) -> None:
        unknown = concept.extent - self.context.object_ids
        if unknown:
            raise InvalidArgumentError(
                f"Concept {concept} names objects outside "
                f"[1, {self.context.object_count}]: {sorted(unknown)}"
            )
        if not self.context.is_concept(concept):
            raise InvalidArgumentError(f"Concept {concept} is not closed in the context.")

    @staticmethod
    def _log(trace: list[str], msg: str) -> None:
        trace.append(msg)
        logger.debug(msg)

    # ------------------------------------------------------------------
    # UPPER COVER
    # ------------------------------------------------------------------

    def _upper_cover(self, concept: Concept, trace: list[str]) -> ConceptualCover:
        self._check_closed(concept)
        if not concept.intent:
            raise InvalidArgumentError("The top concept has no upper cover.")

        ctx = self.context
        cover = ConceptualCover(ctx)
        self._log(trace, f"Upper cover of {concept}")

        # Phase 1: lowest attribute-concepts above the pivot.
        candidates = [
            a for a in sorted(concept.intent) if not ctx.introduces_attribute(a, concept)
        ]
        kept = set(candidates)
        for a in candidates:
            if a in kept:
                above = ctx.set_object_closure(ctx.attribute_closure(a)) - {a}
                kept -= above
        for a in candidates:
            if a in kept:
                cover.add_candidate_attribute_concept(a)
        self._log(
            trace,
            f"  [AC] {len(candidates)} candidate attributes, "
            f"{len(cover)} attribute-concepts",
        )

        # Phase 2: lowest object-concepts above the pivot.
        pool = sorted(ctx.object_ids - concept.extent)
        inside = [o for o in pool if ctx.object_closure(o) <= concept.intent]
        lowest = [
            o1
            for o1 in inside
            if not any(
                o2 != o1 and ctx.object_closure(o2) > ctx.object_closure(o1)
                for o2 in inside
            )
        ]
        self._log(
            trace,
            f"  [OC] {len(pool)} candidate objects, {len(inside)} below the pivot "
            f"intent, {len(lowest)} lowest",
        )

        # Phase 3: object-concepts replace the attribute-concepts above them.
        members = cover.concepts
        for o in lowest:
            extent = ctx.set_attribute_closure(ctx.object_closure(o))
            if any(member.extent <= extent for member in members):
                continue
            replaced = [member for member in members if o in member.extent]
            for member in replaced:
                cover.remove_by_intent(member.intent)
            added = cover.add_candidate_object_concept(o)
            self._log(
                trace,
                f"  [MERGE] object {o} replaces {len(replaced)} attribute-concepts"
                + ("" if added is not None else " (already represented)"),
            )

        self._log(trace, f"  {len(cover)} upper neighbours")
        return cover

    # ------------------------------------------------------------------
    # LOWER COVER
    # ------------------------------------------------------------------

    def _lower_cover(self, concept: Concept, trace: list[str]) -> ConceptualCover:
        self._check_closed(concept)
        if not concept.extent:
            raise InvalidArgumentError("The bottom concept has no lower cover.")

        ctx = self.context
        cover = ConceptualCover(ctx)
        self._log(trace, f"Lower cover of {concept}")

        # Phase 1: greatest object-concepts below the pivot.
        candidates = [
            o for o in sorted(concept.extent) if not ctx.introduces_object(o, concept)
        ]
        kept = set(candidates)
        for o in candidates:
            if o in kept:
                below = ctx.set_attribute_closure(ctx.object_closure(o)) - {o}
                kept -= below
        for o in candidates:
            if o in kept:
                cover.add_candidate_object_concept(o)
        self._log(
            trace,
            f"  [OC] {len(candidates)} candidate objects, "
            f"{len(cover)} object-concepts",
        )

        # Phase 2: greatest attribute-concepts below the pivot.
        pool = sorted(ctx.attribute_domain - concept.intent)
        inside = [a for a in pool if ctx.attribute_closure(a) <= concept.extent]
        greatest = [
            a1
            for a1 in inside
            if not any(
                a2 != a1 and ctx.attribute_closure(a2) > ctx.attribute_closure(a1)
                for a2 in inside
            )
        ]
        self._log(
            trace,
            f"  [AC] {len(pool)} candidate attributes, {len(inside)} below the pivot "
            f"extent, {len(greatest)} greatest",
        )

        # Phase 3: attribute-concepts replace the object-concepts below them.
        members = cover.concepts
        for a in greatest:
            intent = ctx.set_object_closure(ctx.attribute_closure(a))
            if any(member.intent <= intent for member in members):
                continue
            replaced = [member for member in members if a in member.intent]
            for member in replaced:
                cover.remove_by_extent(member.extent)
            added = cover.add_candidate_attribute_concept(a)
            self._log(
                trace,
                f"  [MERGE] attribute {a} replaces {len(replaced)} object-concepts"
                + ("" if added is not None else " (already represented)"),
            )

        self._log(trace, f"  {len(cover)} lower neighbours")
        return cover


def upper_cover(concept: Concept, context: FormalContext) -> ConceptualCover:
    """Direct super-concepts of *concept* in the AOC-poset of *context*."""
    return LocalGenerator(context).upper_cover(concept)


def lower_cover(concept: Concept, context: FormalContext) -> ConceptualCover:
    """Direct sub-concepts of *concept* in the AOC-poset of *context*."""
    return LocalGenerator(context).lower_cover(concept)
