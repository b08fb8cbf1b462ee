"""
Type definitions for rigmap.

Bone names are plain strings. Features derived from them are small
immutable value records that are computed on demand and never shared.
"""

from typing import Dict, FrozenSet, NamedTuple


class Side:
    """Side of the body a bone belongs to."""

    LEFT = 'left'
    RIGHT = 'right'
    CENTER = 'center'

    ALL = (LEFT, RIGHT, CENTER)

    @staticmethod
    def are_opposite(a: str, b: str) -> bool:
        """True for a left/right pair."""
        return {a, b} == {Side.LEFT, Side.RIGHT}


class BoneFeatures(NamedTuple):
    """Name-derived features of a single bone."""
    side: str                      # One of Side.ALL
    keywords: FrozenSet[str]       # Body-part tags, possibly empty


class ScoredPair(NamedTuple):
    """Candidate (source, target) assignment with its compatibility score."""
    source: str
    target: str
    score: int


# Source bone name -> target bone name ('' means intentionally unmapped)
MappingDict = Dict[str, str]
