"""Structural properties of the cover algorithms over seeded random contexts.

Covers antisymmetry, AOC-poset membership, antichains, completeness against
a brute-force enumeration, determinism, top/bottom handling, and
object/attribute duality.
"""

import pytest

from pyaoc import Concept, FormalContext, InvalidArgumentError, LocalGenerator


def aoc_concepts(ctx: FormalContext) -> set[Concept]:
    """Every attribute-concept and object-concept of *ctx*."""
    result = {Concept.introduce_object(o, ctx) for o in ctx.object_ids}
    result |= {Concept.introduce_attribute(a, ctx) for a in ctx.attribute_domain}
    return result


def leq(c1: Concept, c2: Concept) -> bool:
    """Concept order: c1 is below c2."""
    return c1.extent <= c2.extent


class TestAntisymmetry:
    def test_upper_cover_is_strictly_above(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx):
            if not pivot.intent:
                continue
            for c in gen.upper_cover(pivot):
                assert c != pivot
                assert c.intent < pivot.intent
                assert c.extent > pivot.extent

    def test_lower_cover_is_strictly_below(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx):
            if not pivot.extent:
                continue
            for c in gen.lower_cover(pivot):
                assert c != pivot
                assert c.intent > pivot.intent
                assert c.extent < pivot.extent


class TestMembership:
    def test_members_are_closed_aoc_concepts(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        aoc = aoc_concepts(random_ctx)
        for pivot in aoc:
            result = gen.neighborhood(pivot)
            for c in list(result.upper) + list(result.lower):
                assert random_ctx.is_concept(c)
                assert c in aoc

    def test_covers_are_antichains(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx):
            result = gen.neighborhood(pivot)
            for cover in (result.upper, result.lower):
                members = list(cover)
                for i, c1 in enumerate(members):
                    for c2 in members[i + 1:]:
                        assert not leq(c1, c2)
                        assert not leq(c2, c1)

    def test_intents_and_extents_unique(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx):
            result = gen.neighborhood(pivot)
            for cover in (result.upper, result.lower):
                assert len(set(cover.intents())) == cover.size()
                assert len(set(cover.extents())) == cover.size()


def brute_upper(ctx: FormalContext, pivot: Concept) -> set[Concept]:
    """Minimal AOC-poset concepts strictly above *pivot*, by enumeration."""
    above = {c for c in aoc_concepts(ctx) if c.extent > pivot.extent}
    return {c for c in above if not any(d.extent < c.extent for d in above)}


def brute_lower(ctx: FormalContext, pivot: Concept) -> set[Concept]:
    """Maximal AOC-poset concepts strictly below *pivot*, by enumeration."""
    below = {c for c in aoc_concepts(ctx) if c.extent < pivot.extent}
    return {c for c in below if not any(d.extent > c.extent for d in below)}


class TestCompleteness:
    def test_upper_cover_matches_enumeration(self, wide_random_ctx):
        gen = LocalGenerator(wide_random_ctx)
        for pivot in aoc_concepts(wide_random_ctx):
            if not pivot.intent:
                continue
            assert gen.upper_cover(pivot).as_set() == brute_upper(wide_random_ctx, pivot)

    def test_lower_cover_matches_enumeration(self, wide_random_ctx):
        gen = LocalGenerator(wide_random_ctx)
        for pivot in aoc_concepts(wide_random_ctx):
            if not pivot.extent:
                continue
            assert gen.lower_cover(pivot).as_set() == brute_lower(wide_random_ctx, pivot)

    def test_neighborhood_matches_enumeration(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx):
            result = gen.neighborhood(pivot)
            assert result.upper.as_set() == (
                brute_upper(random_ctx, pivot) if pivot.intent else set()
            )
            assert result.lower.as_set() == (
                brute_lower(random_ctx, pivot) if pivot.extent else set()
            )


class TestDeterminism:
    def test_repeated_calls_agree(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx):
            if pivot.intent:
                assert gen.upper_cover(pivot).as_set() == gen.upper_cover(pivot).as_set()
            if pivot.extent:
                assert gen.lower_cover(pivot).as_set() == gen.lower_cover(pivot).as_set()

    def test_fresh_generators_agree(self, random_ctx):
        for pivot in aoc_concepts(random_ctx):
            a = LocalGenerator(random_ctx).neighborhood(pivot)
            b = LocalGenerator(random_ctx).neighborhood(pivot)
            assert a.upper == b.upper
            assert a.lower == b.lower


class TestTopBottom:
    def test_upper_raises_exactly_on_empty_intent(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx) | {random_ctx.top()}:
            if pivot.intent:
                gen.upper_cover(pivot)
            else:
                with pytest.raises(InvalidArgumentError):
                    gen.upper_cover(pivot)

    def test_lower_raises_exactly_on_empty_extent(self, random_ctx):
        gen = LocalGenerator(random_ctx)
        for pivot in aoc_concepts(random_ctx) | {random_ctx.bottom()}:
            if pivot.extent:
                gen.lower_cover(pivot)
            else:
                with pytest.raises(InvalidArgumentError):
                    gen.lower_cover(pivot)


class TestDuality:
    """Upper covers in the transposed context are lower covers in the context itself."""

    @staticmethod
    def to_dual(ctx: FormalContext, concept: Concept) -> Concept:
        index = {a: i for i, a in enumerate(sorted(ctx.attribute_domain), start=1)}
        return Concept(
            frozenset(str(o) for o in concept.extent),
            frozenset(index[a] for a in concept.intent),
        )

    def test_dual_concepts_are_closed(self, dense_random_ctx):
        dual = dense_random_ctx.transpose()
        for pivot in aoc_concepts(dense_random_ctx):
            assert dual.is_concept(self.to_dual(dense_random_ctx, pivot))

    def test_lower_equals_dual_upper(self, dense_random_ctx):
        dual = dense_random_ctx.transpose()
        gen, dual_gen = LocalGenerator(dense_random_ctx), LocalGenerator(dual)
        for pivot in aoc_concepts(dense_random_ctx):
            if not pivot.extent:
                continue
            expected = {self.to_dual(dense_random_ctx, c) for c in gen.lower_cover(pivot)}
            actual = dual_gen.upper_cover(self.to_dual(dense_random_ctx, pivot)).as_set()
            assert actual == expected

    def test_upper_equals_dual_lower(self, dense_random_ctx):
        dual = dense_random_ctx.transpose()
        gen, dual_gen = LocalGenerator(dense_random_ctx), LocalGenerator(dual)
        for pivot in aoc_concepts(dense_random_ctx):
            if not pivot.intent:
                continue
            expected = {self.to_dual(dense_random_ctx, c) for c in gen.upper_cover(pivot)}
            actual = dual_gen.lower_cover(self.to_dual(dense_random_ctx, pivot)).as_set()
            assert actual == expected
