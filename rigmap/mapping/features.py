"""
Bone feature extraction.

Bone names are reduced to a normalized form (lower case, separators
removed) and then described by two features:

- side: left, right or center, from substring markers
- keywords: body-part tags whose variant substrings appear in the name

Side detection is a plain substring test, so short markers like 'l' and 'r'
fire on many names. Left markers are checked first and win over right
markers on names containing both.
"""

from typing import Optional

from ..core.constants import SEPARATOR_CHARS
from ..core.types import Side, BoneFeatures
from ..utils.config import AutoMapConfig, DEFAULT_CONFIG


_SEPARATOR_TABLE = str.maketrans('', '', SEPARATOR_CHARS)


def normalize_bone_name(name: str) -> str:
    """Lower-case a bone name and strip the characters ``-_.:``."""
    return name.lower().translate(_SEPARATOR_TABLE)


def detect_side(
    normalized_name: str,
    config: Optional[AutoMapConfig] = None
) -> str:
    """
    Detect the body side of a normalized bone name.

    Args:
        normalized_name: Output of normalize_bone_name
        config: Marker configuration (defaults if None)

    Returns:
        One of Side.LEFT, Side.RIGHT, Side.CENTER
    """
    config = config or DEFAULT_CONFIG

    if any(marker in normalized_name for marker in config.left_markers):
        return Side.LEFT
    if any(marker in normalized_name for marker in config.right_markers):
        return Side.RIGHT
    return Side.CENTER


def extract_features(
    normalized_name: str,
    config: Optional[AutoMapConfig] = None
) -> BoneFeatures:
    """
    Derive side and body-part keywords from a normalized bone name.

    A name may carry several keywords ('leftforearm' is both 'arm' and
    'elbow'). Never fails; unknown names get an empty keyword set.

    Args:
        normalized_name: Output of normalize_bone_name
        config: Vocabulary configuration (defaults if None)

    Returns:
        BoneFeatures(side, keywords)
    """
    config = config or DEFAULT_CONFIG

    keywords = frozenset(
        tag
        for tag, variants in config.keyword_map.items()
        if any(variant in normalized_name for variant in variants)
    )
    return BoneFeatures(side=detect_side(normalized_name, config), keywords=keywords)


def get_bone_features(
    name: str,
    config: Optional[AutoMapConfig] = None
) -> BoneFeatures:
    """Normalize a raw bone name and extract its features."""
    return extract_features(normalize_bone_name(name), config)
