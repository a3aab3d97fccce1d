"""Error taxonomy for pyAOC.

All errors are reported to the caller. Closure computation is deterministic,
so none of them is worth retrying.
"""

from __future__ import annotations


class PyAOCError(Exception):
    """Base class for every error raised by pyAOC."""


class OutOfRangeError(PyAOCError, IndexError):
    """An object id lies outside ``[1, object_count]``."""


class MalformedRowError(PyAOCError, ValueError):
    """An input row uses characters outside the accepted alphabet."""


class InvalidArgumentError(PyAOCError, ValueError):
    """A cover algorithm was called on a pivot that violates its precondition."""
