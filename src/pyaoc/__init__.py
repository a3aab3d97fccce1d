"""pyAOC — local generation of AOC-poset neighbourhoods.

Computes the upper and lower covers of a formal concept inside the
sub-order of the concept lattice generated by attribute-concepts and
object-concepts, recomputing them from the closure operators of the
formal context instead of building the full lattice.

Public API::

    from pyaoc import FormalContext, Concept, ConceptualCover
    from pyaoc import LocalGenerator, Neighborhood, upper_cover, lower_cover
    from pyaoc import load_context, parse_rows
"""

from pyaoc._version import __version__
from pyaoc.concept import Concept
from pyaoc.context import FormalContext
from pyaoc.cover import ConceptualCover
from pyaoc.errors import (
    InvalidArgumentError,
    MalformedRowError,
    OutOfRangeError,
    PyAOCError,
)
from pyaoc.loader import load_context, parse_rows
from pyaoc.localgen import LocalGenerator, Neighborhood, lower_cover, upper_cover

__all__ = [
    "__version__",
    "Concept",
    "ConceptualCover",
    "FormalContext",
    "InvalidArgumentError",
    "LocalGenerator",
    "MalformedRowError",
    "Neighborhood",
    "OutOfRangeError",
    "PyAOCError",
    "load_context",
    "lower_cover",
    "parse_rows",
    "upper_cover",
]
