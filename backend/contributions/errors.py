"""
Contribution errors

Absence (unknown contribution, session or thread root) is never an error:
lookups return None. Orphaned replies and reactions to contributions that
do not exist yet are silently left out of derived views.
"""


class ContributionsError(Exception):
    """Base class for errors raised by the contributions package."""


class InvalidInputError(ContributionsError, ValueError):
    """Malformed configuration passed to an operation (e.g. an odd id size)."""
