"""
Bone correspondence between skeletons.

Includes name feature extraction, pairwise scoring, greedy auto-mapping
and the editable mapping table.
"""

from .features import (
    normalize_bone_name,
    detect_side,
    extract_features,
    get_bone_features,
)
from .scoring import (
    score_pair,
    is_viable,
    score_all_pairs,
)
from .auto_map import (
    auto_map_bones,
    resolve_bone_names,
)
from .table import (
    MappingTable,
    MappingError,
    MappingLoadError,
    parse_mapping_json,
)

__all__ = [
    # Features
    "normalize_bone_name",
    "detect_side",
    "extract_features",
    "get_bone_features",
    # Scoring
    "score_pair",
    "is_viable",
    "score_all_pairs",
    # Auto-mapping
    "auto_map_bones",
    "resolve_bone_names",
    # Table
    "MappingTable",
    "MappingError",
    "MappingLoadError",
    "parse_mapping_json",
]
