"""
Pairwise compatibility scoring between two bones.

score = side bonus + keyword bonus (+ tie-breaker)

Side bonus:
    same side              -> side_match_bonus (50)
    one side is center     -> side_center_bonus (25)
    left vs right          -> INVALID_SCORE, hard veto

Keyword bonus:
    keyword_match_bonus (20) per shared tag, or keyword_tie_breaker (1)
    when both bones carry tags but share none.
"""

from typing import List, Optional, Sequence

from ..core.constants import INVALID_SCORE
from ..core.types import Side, BoneFeatures, ScoredPair
from ..utils.config import AutoMapConfig, DEFAULT_CONFIG
from .features import get_bone_features


def score_pair(
    source: BoneFeatures,
    target: BoneFeatures,
    config: Optional[AutoMapConfig] = None
) -> int:
    """
    Score how plausibly a source bone drives a target bone.

    Args:
        source: Features of the source bone
        target: Features of the target bone
        config: Scoring weights (defaults if None)

    Returns:
        Integer score, or INVALID_SCORE for opposite sides
    """
    config = config or DEFAULT_CONFIG

    if source.side == target.side:
        score = config.side_match_bonus
    elif Side.CENTER in (source.side, target.side):
        score = config.side_center_bonus
    else:
        return INVALID_SCORE

    keyword_matches = len(source.keywords & target.keywords)
    score += keyword_matches * config.keyword_match_bonus

    if source.keywords and target.keywords and keyword_matches == 0:
        score += config.keyword_tie_breaker

    return score


def is_viable(score: int, config: Optional[AutoMapConfig] = None) -> bool:
    """True if a score carries evidence of correspondence."""
    config = config or DEFAULT_CONFIG
    return score != INVALID_SCORE and score > config.min_viable_score


def score_all_pairs(
    source_names: Sequence[str],
    target_names: Sequence[str],
    config: Optional[AutoMapConfig] = None
) -> List[ScoredPair]:
    """
    Score the full source x target cross product.

    Enumeration order is source order outer, target order inner; features
    are computed once per name. Only viable pairs are returned.

    Args:
        source_names: Unique source bone names
        target_names: Unique target bone names
        config: Scoring configuration (defaults if None)

    Returns:
        List of ScoredPair in enumeration order
    """
    config = config or DEFAULT_CONFIG

    source_features = [get_bone_features(name, config) for name in source_names]
    target_features = [get_bone_features(name, config) for name in target_names]

    pairs = []
    for source_name, sf in zip(source_names, source_features):
        for target_name, tf in zip(target_names, target_features):
            score = score_pair(sf, tf, config)
            if is_viable(score, config):
                pairs.append(ScoredPair(source_name, target_name, score))
    return pairs
