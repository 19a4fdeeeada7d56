"""Exception types raised by the hex kernel.

Both derive from :class:`ValueError` so callers that only guard against bad
arguments keep working.  They signal contract violations rather than normal
outcomes: a missing storage entry or an out-of-range index returns ``None``.
"""


class HexAlignmentError(ValueError):
    """A vertex coordinate lies on neither vertex sub-lattice."""


class NonFiniteCoordinateError(ValueError):
    """A fractional coordinate with a NaN or infinite component was rounded."""
