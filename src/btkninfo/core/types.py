"""Core enums and type definitions."""

from enum import StrEnum


class LookupMode(StrEnum):
    """What a graph resolution should yield for a matching token."""

    METADATA = "metadata"
    IMAGE = "image"


class LookupStatus(StrEnum):
    """Outcome of a lookup, as seen by the HTTP boundary."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    MISSING_IDENTIFIER = "missing_identifier"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"  # Logo URL known, bytes unavailable
    ERROR = "error"


class TieBreak(StrEnum):
    """
    How concurrently searched sibling lists pick a winner.

    DECLARATION_ORDER prefers the earliest sibling whose branch produced a
    match, but branches still share one visited set: a list reachable from
    two siblings is searched only by whichever branch reaches it first, so
    the winner among such overlapping subtrees depends on timing.
    """

    FIRST_COMPLETED = "first_completed"
    DECLARATION_ORDER = "declaration_order"
