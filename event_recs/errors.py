from __future__ import annotations


class EventRecsError(Exception):
    """Base class for errors raised by the event recommendation service."""


class TaxonomyError(EventRecsError):
    """The taxonomy source could not be read or does not describe a category tree."""


class DistanceUnavailable(EventRecsError):
    """The distance service could not answer for a pair of cities."""
