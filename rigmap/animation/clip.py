"""
Animation clip records.

A clip is an ordered list of per-bone keyframe tracks plus a play range
[from_frame, to_frame]. Tracks are bound to bones by name only, so a clip
can be rebound to another skeleton by cloning its tracks under new names.

Keyframe layout:
    times:  (K,) float32 frame numbers
    values: (K, D) float32, D = 4 for rotations [w, x, y, z],
            D = 3 for position and scaling
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Sequence
import numpy as np
import torch

from ..core.constants import IDENTITY_QUATERNION


class TrackProperty:
    """Animated bone property."""

    ROTATION = 'rotation'
    POSITION = 'position'
    SCALING = 'scaling'

    ALL = (ROTATION, POSITION, SCALING)


@dataclass(eq=False)
class Track:
    """Keyframes of one property of one bone."""
    bone_name: str
    target_property: str
    times: np.ndarray           # (K,) frame numbers
    values: np.ndarray          # (K, D)

    def __post_init__(self):
        self.times = np.asarray(self.times, dtype=np.float32).reshape(-1)
        self.values = np.asarray(self.values, dtype=np.float32)
        if self.values.ndim == 1 and self.times.shape[0] > 0:
            self.values = self.values.reshape(len(self.times), -1)
        if self.values.shape[0] != self.times.shape[0]:
            raise ValueError(
                f"Track '{self.bone_name}': {self.times.shape[0]} times but "
                f"{self.values.shape[0]} values"
            )

    @property
    def num_keys(self) -> int:
        return int(self.times.shape[0])

    def clone(self, bone_name: Optional[str] = None) -> 'Track':
        """Deep copy of the keyframes, optionally bound to another bone."""
        return Track(
            bone_name=self.bone_name if bone_name is None else bone_name,
            target_property=self.target_property,
            times=self.times.copy(),
            values=self.values.copy(),
        )


@dataclass
class AnimationClip:
    """
    Named bundle of bone tracks with a play range.

    Attributes:
        name: Clip name
        tracks: Bone tracks in playback order
        from_frame: First frame of the play range
        to_frame: Last frame of the play range
        metadata: Free-form annotations (e.g. source file name)
    """
    name: str
    tracks: List[Track] = field(default_factory=list)
    from_frame: float = 0.0
    to_frame: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def num_tracks(self) -> int:
        return len(self.tracks)

    @property
    def is_empty(self) -> bool:
        return not self.tracks

    @property
    def duration(self) -> float:
        """Play range length in frames."""
        return self.to_frame - self.from_frame

    def bone_names(self) -> List[str]:
        """Bones driven by this clip, in first-use order."""
        return list(dict.fromkeys(track.bone_name for track in self.tracks))

    def add_track(self, track: Track) -> None:
        self.tracks.append(track)

    def normalize(self, from_frame: float, to_frame: float) -> None:
        """Set the play range."""
        self.from_frame = float(from_frame)
        self.to_frame = float(to_frame)

    def renamed(self, name: str) -> 'AnimationClip':
        """Copy under a new name sharing the same tracks."""
        return AnimationClip(
            name=name,
            tracks=list(self.tracks),
            from_frame=self.from_frame,
            to_frame=self.to_frame,
            metadata=dict(self.metadata),
        )

    @classmethod
    def from_rotation_array(
        cls,
        name: str,
        joint_names: Sequence[str],
        keyframe_times: np.ndarray,
        keyframe_rotations: np.ndarray,
    ) -> 'AnimationClip':
        """
        Split a (T, J, 4) rotation array into one rotation track per joint.

        Args:
            name: Clip name
            joint_names: J joint names, in array order
            keyframe_times: (T,) frame numbers
            keyframe_rotations: (T, J, 4) quaternions [w, x, y, z]

        Returns:
            AnimationClip spanning the first to last keyframe
        """
        keyframe_times = np.asarray(keyframe_times, dtype=np.float32)
        keyframe_rotations = np.asarray(keyframe_rotations, dtype=np.float32)

        if keyframe_rotations.shape[1] != len(joint_names):
            raise ValueError(
                f"Expected {len(joint_names)} joints, got {keyframe_rotations.shape[1]}"
            )

        tracks = [
            Track(joint, TrackProperty.ROTATION, keyframe_times, keyframe_rotations[:, j])
            for j, joint in enumerate(joint_names)
        ]
        from_frame = float(keyframe_times[0]) if len(keyframe_times) else 0.0
        to_frame = float(keyframe_times[-1]) if len(keyframe_times) else 0.0
        return cls(name=name, tracks=tracks, from_frame=from_frame, to_frame=to_frame)

    def to_rotation_tensor(
        self,
        skeleton: Any,
        device: torch.device = torch.device('cpu')
    ) -> torch.Tensor:
        """
        Bake rotation tracks into a skeleton-ordered tensor.

        Bones without a rotation track hold the identity quaternion. Tracks
        on bones outside the skeleton are ignored.

        Args:
            skeleton: Object with ``bone_names()``
            device: Output device

        Returns:
            (T, J, 4) quaternions [w, x, y, z]
        """
        joint_names = skeleton.bone_names()
        rotation_tracks = [
            t for t in self.tracks
            if t.target_property == TrackProperty.ROTATION and t.bone_name in joint_names
        ]

        key_counts = {t.num_keys for t in rotation_tracks}
        if len(key_counts) > 1:
            raise ValueError(
                f"Clip '{self.name}' has rotation tracks with different key counts: "
                f"{sorted(key_counts)}"
            )
        num_frames = key_counts.pop() if key_counts else 0

        rotations = torch.tensor(IDENTITY_QUATERNION, dtype=torch.float32)
        rotations = rotations.repeat(num_frames, len(joint_names), 1)

        for track in rotation_tracks:
            j = joint_names.index(track.bone_name)
            rotations[:, j] = torch.as_tensor(np.ascontiguousarray(track.values))

        return rotations.to(device)
