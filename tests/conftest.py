"""Shared fixtures for pyAOC test suite."""

import random

import pytest

from pyaoc import FormalContext, LocalGenerator


def random_context(
    seed: int, max_objects: int = 8, labels: str = "ABCDEF", empty_rows: bool = True
) -> FormalContext:
    """A random context over *labels*.

    About one row in ten is empty unless *empty_rows* is false, in which
    case every row holds at least one attribute.
    """
    rng = random.Random(seed)
    rows = []
    for _ in range(rng.randint(1, max_objects)):
        if rng.random() < 0.1:
            row = set()
        else:
            row = {a for a in labels if rng.random() < 0.5}
        if not row and not empty_rows:
            row = {rng.choice(labels)}
        rows.append(row)
    return FormalContext(rows)


@pytest.fixture
def empty_context():
    """A context with no objects and no attributes."""
    return FormalContext()


@pytest.fixture
def triangle():
    """Three objects, each lacking one of A, B, C: o1=AB, o2=AC, o3=BC."""
    return FormalContext([{"A", "B"}, {"A", "C"}, {"B", "C"}])


@pytest.fixture
def chain():
    """A three-level chain: o1=A, o2=AB, o3=ABC."""
    return FormalContext([{"A"}, {"A", "B"}, {"A", "B", "C"}])


@pytest.fixture
def diamond():
    """o1=B, o2=C, o3=BCD, o4=BC.

    The object-concept of o4, ({B, C}, {3, 4}), introduces no attribute and
    sits between the object-concept of o3 and the attribute-concepts of B
    and C.
    """
    return FormalContext([{"B"}, {"C"}, {"B", "C", "D"}, {"B", "C"}])


@pytest.fixture
def diamond_generator(diamond):
    return LocalGenerator(diamond)


@pytest.fixture(params=range(25))
def random_ctx(request):
    """A family of seeded random contexts."""
    return random_context(request.param)


@pytest.fixture(params=range(25))
def dense_random_ctx(request):
    """Seeded random contexts without empty rows, for transpose round trips."""
    return random_context(request.param, empty_rows=False)


@pytest.fixture(params=range(200))
def wide_random_ctx(request):
    """A larger family of seeded random contexts, for exhaustive comparisons."""
    return random_context(1000 + request.param)
