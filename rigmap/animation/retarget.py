"""
Animation retargeting through an explicit bone mapping.

Each source track is looked up in the mapping and, if its target bone
exists in the target skeleton, cloned and rebound to it. Tracks are
dropped, without error, when:

- the source bone has no entry or an empty entry (user excluded it)
- the entry names a bone the target skeleton does not have (stale entry)

The output always keeps the source clip's play range.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union
import logging

from ..mapping.table import MappingTable
from .clip import AnimationClip

logger = logging.getLogger(__name__)


def _target_bone_names(target_skeleton: Any) -> set:
    if hasattr(target_skeleton, 'bone_names'):
        return set(target_skeleton.bone_names())
    if hasattr(target_skeleton, 'bones'):
        target_skeleton = target_skeleton.bones
    return {b if isinstance(b, str) else b.name for b in target_skeleton}


def retarget_clip(
    source_clip: AnimationClip,
    target_skeleton: Any,
    mapping: Union[MappingTable, Mapping[str, Optional[str]]],
    name: Optional[str] = None
) -> AnimationClip:
    """
    Rebuild a clip against another skeleton.

    The mapping is snapshotted on entry; later edits to it are not seen.

    Args:
        source_clip: Clip bound to the source skeleton's bones
        target_skeleton: Skeleton, bone records or bone names
        mapping: Source bone name -> target bone name ('' or absent = drop)
        name: Name of the new clip (defaults to the source clip's name)

    Returns:
        New clip whose tracks are bound to target bones. Never raises for
        data reasons; an empty track list means nothing was mapped.
    """
    if isinstance(mapping, MappingTable):
        table = mapping.snapshot()
    else:
        table = dict(mapping)
    target_names = _target_bone_names(target_skeleton)

    retargeted = AnimationClip(
        name=source_clip.name if name is None else name,
        metadata=dict(source_clip.metadata),
    )

    num_unmapped = 0
    num_missing = 0
    for track in source_clip.tracks:
        target_bone = table.get(track.bone_name)
        if not target_bone:
            num_unmapped += 1
            continue
        if target_bone not in target_names:
            num_missing += 1
            continue
        retargeted.add_track(track.clone(bone_name=target_bone))

    retargeted.normalize(source_clip.from_frame, source_clip.to_frame)

    logger.debug(f"Retargeted '{source_clip.name}': kept {retargeted.num_tracks}/"
                 f"{source_clip.num_tracks} tracks ({num_unmapped} unmapped, "
                 f"{num_missing} missing target bone)")
    if retargeted.is_empty and not source_clip.is_empty:
        logger.warning(f"Retargeted '{source_clip.name}' has no tracks, check bone mapping")

    return retargeted


def retarget_clips(
    clips: Iterable[AnimationClip],
    target_skeleton: Any,
    mapping: Union[MappingTable, Mapping[str, Optional[str]]]
) -> List[AnimationClip]:
    """Retarget several clips with the same mapping snapshot."""
    if isinstance(mapping, MappingTable):
        mapping = mapping.snapshot()
    else:
        mapping = dict(mapping)
    return [retarget_clip(clip, target_skeleton, mapping) for clip in clips]
