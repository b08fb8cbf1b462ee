"""
Animation clips and retargeting for rigmap.

Includes clip/track records, mapping-driven retargeting and the export
plan for clips linked to gameplay actions.
"""

from .clip import (
    TrackProperty,
    Track,
    AnimationClip,
)
from .retarget import (
    retarget_clip,
    retarget_clips,
)
from .actions import (
    PlayerAction,
    PLAYER_ACTIONS,
    initial_animation_links,
    export_name,
    plan_export,
)

__all__ = [
    # Clips
    "TrackProperty",
    "Track",
    "AnimationClip",
    # Retargeting
    "retarget_clip",
    "retarget_clips",
    # Actions
    "PlayerAction",
    "PLAYER_ACTIONS",
    "initial_animation_links",
    "export_name",
    "plan_export",
]
