"""
Core module for rigmap.

Contains:
- Constants: Scoring weights and bone-name vocabularies
- Types: Side constants and small value records
"""

from .constants import (
    # Normalization
    SEPARATOR_CHARS,
    # Scoring
    SIDE_MATCH_BONUS,
    SIDE_CENTER_BONUS,
    KEYWORD_MATCH_BONUS,
    KEYWORD_TIE_BREAKER,
    MIN_VIABLE_SCORE,
    INVALID_SCORE,
    # Vocabularies
    BONE_KEYWORD_MAP,
    LEFT_MARKERS,
    RIGHT_MARKERS,
    HEAD_BONE_HINT,
    IDENTITY_QUATERNION,
)

from .types import (
    Side,
    BoneFeatures,
    ScoredPair,
    MappingDict,
)

__all__ = [
    # Constants
    "SEPARATOR_CHARS",
    "SIDE_MATCH_BONUS",
    "SIDE_CENTER_BONUS",
    "KEYWORD_MATCH_BONUS",
    "KEYWORD_TIE_BREAKER",
    "MIN_VIABLE_SCORE",
    "INVALID_SCORE",
    "BONE_KEYWORD_MAP",
    "LEFT_MARKERS",
    "RIGHT_MARKERS",
    "HEAD_BONE_HINT",
    "IDENTITY_QUATERNION",
    # Types
    "Side",
    "BoneFeatures",
    "ScoredPair",
    "MappingDict",
]
