"""
Automatic bone mapping between two skeletons.

Greedy best-score-first assignment over all scored source x target pairs:

1. Score every pair, keep the viable ones.
2. Sort by score, highest first. The sort is stable, so equal scores keep
   enumeration order (source order outer, target order inner).
3. Commit a pair if neither its source nor its target is taken yet.
4. Unmatched sources map to an unused target of the identical name, or to
   themselves when there is none (a dead entry left for manual fixing).

This is a greedy approximation of weighted bipartite matching, not an
optimal solver. Callers depend on the greedy result.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence
import logging

from ..utils.config import AutoMapConfig, DEFAULT_CONFIG
from .scoring import score_all_pairs

logger = logging.getLogger(__name__)


def _unique(names: Iterable[str]) -> List[str]:
    """Drop repeated names, keeping first occurrence order."""
    return list(dict.fromkeys(names))


def resolve_bone_names(bones: Any) -> List[str]:
    """
    Get bone names from a skeleton, bone records or plain strings.

    Args:
        bones: Object with a ``bones`` attribute, or a sequence of items that
            are either strings or expose a ``name`` attribute

    Returns:
        Unique bone names in input order
    """
    if hasattr(bones, 'bones'):
        bones = bones.bones
    return _unique(b if isinstance(b, str) else b.name for b in bones)


def auto_map_bones(
    source_bone_names: Sequence[str],
    target_bones: Any,
    config: Optional[AutoMapConfig] = None
) -> Dict[str, str]:
    """
    Infer a source -> target bone mapping from bone names alone.

    Total: every source name gets an entry. Pure and deterministic for a
    given input ordering.

    Args:
        source_bone_names: Bone names of the animation's source skeleton
        target_bones: Target skeleton, bone records or bone names
        config: Scoring configuration (defaults if None)

    Returns:
        Mapping from every source bone name to a target bone name
    """
    config = config or DEFAULT_CONFIG

    source_names = _unique(source_bone_names)
    target_names = resolve_bone_names(target_bones)
    target_set = set(target_names)

    pairs = score_all_pairs(source_names, target_names, config)
    pairs.sort(key=lambda p: p.score, reverse=True)
    logger.debug(f"Auto-map: {len(pairs)} viable pairs for "
                 f"{len(source_names)} x {len(target_names)} bones")

    mapping: Dict[str, str] = {}
    used_targets = set()

    for pair in pairs:
        if pair.source not in mapping and pair.target not in used_targets:
            mapping[pair.source] = pair.target
            used_targets.add(pair.target)

    num_matched = len(mapping)

    # Fallback for sources without a viable, unclaimed partner
    for name in source_names:
        if name in mapping:
            continue
        if name in target_set and name not in used_targets:
            used_targets.add(name)
        mapping[name] = name

    logger.info(f"Auto-mapped {num_matched}/{len(source_names)} bones, "
                f"{len(source_names) - num_matched} by name fallback")

    # Keep source order in the result
    return {name: mapping[name] for name in source_names}
