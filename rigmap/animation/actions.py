"""
Gameplay actions and the clips linked to them.

A player rig exports a set of clips. Clips linked to a gameplay action are
exported under the action's lower-cased name ('strafeLeft' -> 'strafeleft')
so the runtime can find them; other selected clips keep their own names.
"""

from typing import Dict, Iterable, List, Mapping, Optional
import logging

from .clip import AnimationClip

logger = logging.getLogger(__name__)


class PlayerAction:
    """Gameplay actions a clip can be linked to."""

    IDLE = 'idle'
    WALK = 'walk'
    RUN = 'run'
    STRAFE_LEFT = 'strafeLeft'
    STRAFE_RIGHT = 'strafeRight'
    TURN_LEFT = 'turnLeft'
    TURN_RIGHT = 'turnRight'
    STANDING_TO_CROUCH = 'standingToCrouch'
    CROUCH_TO_STANDING = 'crouchToStanding'
    CROUCH_IDLE = 'crouchIdle'
    CROUCH_WALK = 'crouchWalk'


PLAYER_ACTIONS: List[str] = [
    PlayerAction.IDLE,
    PlayerAction.WALK,
    PlayerAction.RUN,
    PlayerAction.STRAFE_LEFT,
    PlayerAction.STRAFE_RIGHT,
    PlayerAction.TURN_LEFT,
    PlayerAction.TURN_RIGHT,
    PlayerAction.CROUCH_IDLE,
    PlayerAction.CROUCH_WALK,
    PlayerAction.STANDING_TO_CROUCH,
    PlayerAction.CROUCH_TO_STANDING,
]


def initial_animation_links() -> Dict[str, Optional[str]]:
    """Every action unlinked."""
    return {action: None for action in PLAYER_ACTIONS}


def export_name(action: str) -> str:
    """Clip name used for an action in exported assets."""
    return action.lower()


def plan_export(
    clips: Iterable[AnimationClip],
    selected_names: Iterable[str],
    links: Mapping[str, Optional[str]]
) -> List[AnimationClip]:
    """
    Choose and name the clips to export with the player rig.

    Selected clips come first, then linked clips, each name once. Names not
    found among ``clips`` are skipped. If several actions link the same
    clip, the last one wins.

    Args:
        clips: Available (retargeted) clips
        selected_names: Clip names the user ticked for export
        links: Action -> linked clip name (or None)

    Returns:
        Clips to export. Linked clips are renamed copies; the originals are
        not modified.
    """
    by_name = {clip.name: clip for clip in clips}

    linked: Dict[str, str] = {}
    for action, clip_name in links.items():
        if clip_name:
            linked[clip_name] = export_name(action)

    names = list(dict.fromkeys([*selected_names, *linked]))
    logger.info(f"Preparing {len(names)} unique animation(s) for export")

    exported = []
    for clip_name in names:
        clip = by_name.get(clip_name)
        if clip is None:
            logger.debug(f"Skipping unknown animation '{clip_name}'")
            continue

        if clip_name in linked:
            exported.append(clip.renamed(linked[clip_name]))
            logger.info(f"Including and renaming '{clip_name}' to '{linked[clip_name]}'")
        else:
            exported.append(clip)
            logger.info(f"Including selected animation '{clip_name}'")

    return exported
