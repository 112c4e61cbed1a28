"""Domain exceptions."""

from __future__ import annotations


class InvalidOperationError(RuntimeError):
    """A board or move operation would break a structural invariant.

    Raised before any state is touched, e.g. when moving onto an occupied
    square, registering a second king or capturing a king.
    """
