"""
Centralized constants for rigmap.

This module defines the scoring weights and name vocabularies used by the
bone auto-mapper. Every value here can be overridden per call through an
``AutoMapConfig`` (see ``rigmap.utils.config``).

Usage:
    from rigmap.core.constants import SIDE_MATCH_BONUS, BONE_KEYWORD_MAP
"""

from typing import Dict, List, Tuple


# =============================================================================
# Name Normalization
# =============================================================================

# Characters stripped from bone names before comparison
SEPARATOR_CHARS: str = '-_.:'


# =============================================================================
# Scoring Weights
# =============================================================================

# Both bones on the same side (left/left, right/right, center/center)
SIDE_MATCH_BONUS: int = 50

# Exactly one of the two bones is a center bone
SIDE_CENTER_BONUS: int = 25

# Per shared body-part keyword
KEYWORD_MATCH_BONUS: int = 20

# Both bones carry keywords but share none
KEYWORD_TIE_BREAKER: int = 1

# Pairs scoring at or below this value are never assigned
MIN_VIABLE_SCORE: int = 1

# Returned for left/right pairs; always at or below MIN_VIABLE_SCORE
INVALID_SCORE: int = -1


# =============================================================================
# Vocabularies
# =============================================================================

# Body-part tag -> substrings that signal it in a normalized bone name
BONE_KEYWORD_MAP: Dict[str, List[str]] = {
    'head': ['head'],
    'neck': ['neck'],
    'spine': ['spine', 'chest'],
    'hips': ['hips', 'pelvis'],
    'leg': ['leg', 'thigh', 'shin'],
    'knee': ['knee'],
    'foot': ['foot'],
    'toes': ['toe', 'toes'],
    'shoulder': ['shoulder', 'clavicle', 'breast', 'pec'],
    'arm': ['arm', 'bicep'],
    'elbow': ['elbow', 'forearm'],
    'hand': ['hand', 'wrist'],
    'finger': ['finger'],
    'thumb': ['thumb'],
    'index': ['index'],
    'middle': ['middle'],
    'ring': ['ring'],
    'pinky': ['pinky', 'little'],
}

# Side markers, left is always checked first
LEFT_MARKERS: Tuple[str, ...] = ('l', 'left')
RIGHT_MARKERS: Tuple[str, ...] = ('r', 'right')


# =============================================================================
# Skeleton Defaults
# =============================================================================

# Substring used to auto-select the head bone of a base skeleton
HEAD_BONE_HINT: str = 'head'

# Identity quaternion [w, x, y, z]
IDENTITY_QUATERNION: Tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.0)
