"""
Editing session for a player rig.

Holds the state an editor front end works on: the base (target) skeleton,
the bone mapping, the source skeleton's bone names, the retargeted clips
and which of them are selected or linked to gameplay actions. Scene
loading, playback and file export encoding stay with the caller.
"""

from typing import Dict, List, Optional, Sequence, Union
from pathlib import Path
import logging

from .animation.actions import PLAYER_ACTIONS, initial_animation_links, plan_export
from .animation.clip import AnimationClip
from .animation.retarget import retarget_clip
from .data.skeleton import Skeleton, find_head_bone
from .mapping.auto_map import auto_map_bones
from .mapping.table import MappingTable, MappingLoadError
from .utils.config import AutoMapConfig

logger = logging.getLogger(__name__)

# source_file_name of clips shipped with the player rig itself
BASE_MODEL_SOURCE = '(base model)'


class SessionError(Exception):
    """Operation needs session state that is not loaded yet."""
    pass


class EditorSession:
    """
    State of one rig editing session.

    Attributes:
        base_skeleton: Target skeleton of the player rig
        mapping: Source bone -> base bone mapping
        source_bone_names: Bones of the most recently scanned animation rig
        clips: Retargeted clips, in scan order
        selected_animations: Clip names ticked for export (ordered)
        animation_links: Gameplay action -> linked clip name
        head_bone_name: Bone the first-person camera is mounted on
    """

    def __init__(self, config: Optional[AutoMapConfig] = None):
        self.config = config or AutoMapConfig()

        self.base_skeleton: Optional[Skeleton] = None
        self.mapping = MappingTable()
        self.source_bone_names: List[str] = []
        self.clips: List[AnimationClip] = []
        self.selected_animations: Dict[str, None] = {}
        self.animation_links: Dict[str, Optional[str]] = initial_animation_links()
        self.head_bone_name: Optional[str] = None

    # -------------------------------------------------------------------------
    # Skeletons
    # -------------------------------------------------------------------------

    def set_base_skeleton(
        self,
        skeleton: Optional[Skeleton],
        clips: Optional[Sequence[AnimationClip]] = None
    ) -> None:
        """
        Install the player rig's skeleton.

        Clips retargeted onto the previous rig are discarded together with
        their selection and action links. The rig's own clips, if given,
        replace them and are selected. The mapping is reset to 1:1 over the
        new bones and a head bone is picked.

        Args:
            skeleton: Player rig skeleton, None if the model has none
            clips: Animation clips shipped with the player rig
        """
        self.base_skeleton = skeleton

        old_names = [clip.name for clip in self.clips]
        self.clips = []
        self.selected_animations = {}
        for clip in clips or []:
            clip.metadata['source_file_name'] = BASE_MODEL_SOURCE
            self.clips.append(clip)
            self.selected_animations[clip.name] = None
        self._unlink(set(old_names) - set(self.selected_animations))
        if self.clips:
            logger.info(f"Found {len(self.clips)} animation(s) in base model.")

        if skeleton is None:
            logger.warning("No skeleton found on base model")
            self.mapping.clear()
            self.head_bone_name = None
            return

        logger.info(f"Base skeleton loaded: {skeleton.name} ({len(skeleton)} bones)")
        self.mapping.update(MappingTable.identity(skeleton.bone_names()))
        logger.info("Generated default 1:1 bone mapping")

        self.head_bone_name = find_head_bone(skeleton)
        if self.head_bone_name is not None:
            logger.info(f"Auto-selected '{self.head_bone_name}' as head bone")

    def set_source_bones(self, names: Sequence[str]) -> None:
        """Remember the bone names of an animation rig for auto-mapping."""
        self.source_bone_names = list(names)

    def set_head_bone(self, name: Optional[str]) -> None:
        if name is not None and (self.base_skeleton is None or name not in self.base_skeleton):
            raise ValueError(f"Unknown head bone '{name}'")
        self.head_bone_name = name

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def auto_map(self) -> MappingTable:
        """
        Replace the mapping with a guess from bone names.

        Raises:
            SessionError: If no base skeleton or no source bones are loaded
        """
        if self.base_skeleton is None or not self.source_bone_names:
            raise SessionError("Load a base model and an animation file first")

        self.mapping.update(
            auto_map_bones(self.source_bone_names, self.base_skeleton, self.config)
        )
        dangling = self.mapping.dangling(self.base_skeleton)
        if dangling:
            logger.warning(f"{len(dangling)} bone(s) need a manual mapping: {', '.join(dangling)}")
        return self.mapping

    def edit_mapping(self, source: str, target: Optional[str]) -> None:
        """Point one source bone at a target bone ('' or None to exclude it)."""
        self.mapping.set(source, target)

    def load_mapping_text(self, text: str, origin: str = '<text>') -> bool:
        """
        Replace the mapping from JSON text.

        Returns:
            False if the text is malformed; the mapping is then unchanged
        """
        try:
            self.mapping.loads(text)
        except MappingLoadError as e:
            logger.error(f"Error parsing mapping JSON from {origin}: {e}")
            return False
        logger.info(f"Loaded mapping from {origin}")
        return True

    def load_mapping(self, filepath: Union[str, Path]) -> bool:
        """
        Replace the mapping from a JSON file.

        Returns:
            False if the file is unreadable or malformed; the mapping is
            then unchanged
        """
        try:
            self.mapping.load(filepath)
        except MappingLoadError as e:
            logger.error(f"Error parsing mapping JSON: {e}")
            return False
        return True

    def save_mapping(self, filepath: Union[str, Path]) -> None:
        self.mapping.save(filepath)

    # -------------------------------------------------------------------------
    # Clips
    # -------------------------------------------------------------------------

    def scan_animations(
        self,
        file_name: str,
        clips: Sequence[AnimationClip]
    ) -> List[AnimationClip]:
        """
        Retarget the clips of one animation file onto the base skeleton.

        Each clip is named ``"<file stem> | <clip name>"``, tagged with its
        source file and selected for export.

        Raises:
            SessionError: If no base skeleton is loaded
        """
        if self.base_skeleton is None:
            raise SessionError("Load a base model with a skeleton first")

        if not clips:
            logger.warning(f"No animation groups found in {file_name}")
            return []

        logger.info(f"Found {len(clips)} animation(s) in {file_name}. Retargeting...")
        stem = Path(file_name).stem
        mapping = self.mapping.snapshot()

        retargeted = []
        for clip in clips:
            new_clip = retarget_clip(
                clip, self.base_skeleton, mapping, name=f"{stem} | {clip.name}"
            )
            new_clip.metadata['source_file_name'] = file_name
            retargeted.append(new_clip)
            logger.info(f"  - Retargeted {clip.name}")

        self.clips.extend(retargeted)
        for clip in retargeted:
            self.selected_animations[clip.name] = None
        return retargeted

    def find_clip(self, name: str) -> Optional[AnimationClip]:
        for clip in self.clips:
            if clip.name == name:
                return clip
        return None

    def remove_clip(self, name: str) -> None:
        """Forget a clip, its selection and any action links to it."""
        self.clips = [clip for clip in self.clips if clip.name != name]
        self.selected_animations.pop(name, None)
        self._unlink({name})

    def prune_unselected(self) -> int:
        """
        Keep only the selected clips.

        Returns:
            Number of clips removed
        """
        removed = [clip.name for clip in self.clips if clip.name not in self.selected_animations]
        self.clips = [clip for clip in self.clips if clip.name in self.selected_animations]
        self._unlink(set(removed) - {clip.name for clip in self.clips})
        logger.info(f"Pruned {len(removed)} unselected animation(s).")
        return len(removed)

    def _unlink(self, names) -> None:
        for action, clip_name in self.animation_links.items():
            if clip_name in names:
                self.animation_links[action] = None

    def select_animation(self, name: str, selected: bool = True) -> None:
        if selected:
            self.selected_animations[name] = None
        else:
            self.selected_animations.pop(name, None)

    def link_animation(self, action: str, clip_name: Optional[str]) -> None:
        """
        Link a clip to a gameplay action (None unlinks).

        Raises:
            ValueError: If the action is unknown
        """
        if action not in PLAYER_ACTIONS:
            raise ValueError(f"action must be one of {PLAYER_ACTIONS}")
        self.animation_links[action] = clip_name or None

    def check_playable(self, name: str) -> bool:
        """True if the clip exists and drives at least one bone."""
        clip = self.find_clip(name)
        if clip is None or clip.is_empty:
            logger.warning(f"Cannot play \"{name}\": animation is empty, check bone mapping")
            return False
        return True

    def export_clips(self) -> List[AnimationClip]:
        """Clips to export with the player rig, linked ones renamed."""
        return plan_export(self.clips, self.selected_animations, self.animation_links)
