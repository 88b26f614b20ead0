"""Restrict head candidates to those touching the club anchor."""

from golftrace.core.geometry import intersection_area
from golftrace.core.models import Box


def filter_head_candidates(heads: list[Box], club: Box | None) -> list[Box]:
    """Keep heads with positive intersection area against the club box.

    Without a club anchor there is no spatial reference and nothing passes.
    """
    if club is None:
        return []
    return [head for head in heads if intersection_area(head, club) > 0]
