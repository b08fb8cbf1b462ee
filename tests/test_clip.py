"""
Tests for animation clip and track records.

Run with: pytest tests/test_clip.py -v
"""

import numpy as np
import pytest
import torch

from rigmap.animation import AnimationClip, Track, TrackProperty
from rigmap.data import Skeleton


class TestTrack:
    """Track construction and cloning."""

    def test_arrays_converted(self):
        track = Track("Hips", TrackProperty.POSITION, [0, 1], [[0, 0, 0], [1, 1, 1]])
        assert track.times.dtype == np.float32
        assert track.values.shape == (2, 3)
        assert track.num_keys == 2

    def test_flat_values_reshaped(self):
        track = Track("Hips", TrackProperty.ROTATION, [0, 1], [1, 0, 0, 0, 1, 0, 0, 0])
        assert track.values.shape == (2, 4)

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            Track("Hips", TrackProperty.POSITION, [0, 1, 2], np.zeros((2, 3)))

    def test_clone_is_deep(self, make_rotation_track):
        track = make_rotation_track("Hips")
        copy = track.clone()
        copy.values[0, 0] = 5.0
        assert track.values[0, 0] == 1.0
        assert copy.bone_name == "Hips"

    def test_clone_rebinds(self, make_rotation_track):
        track = make_rotation_track("mixamorig:Hips")
        copy = track.clone(bone_name="Hips")
        assert copy.bone_name == "Hips"
        assert np.allclose(copy.values, track.values)
        assert copy.target_property == TrackProperty.ROTATION


class TestAnimationClip:
    """Clip properties and helpers."""

    def test_properties(self, make_clip):
        clip = make_clip(["Hips", "Spine"], from_frame=2.0, to_frame=10.0)
        assert clip.num_tracks == 2
        assert not clip.is_empty
        assert clip.duration == 8.0

    def test_bone_names_unique_in_order(self, make_rotation_track):
        clip = AnimationClip("c", tracks=[
            make_rotation_track("Spine"),
            make_rotation_track("Hips"),
            make_rotation_track("Spine"),
        ])
        assert clip.bone_names() == ["Spine", "Hips"]

    def test_normalize(self):
        clip = AnimationClip("c")
        clip.normalize(3, 42)
        assert (clip.from_frame, clip.to_frame) == (3.0, 42.0)

    def test_renamed_shares_tracks(self, make_clip):
        clip = make_clip(["Hips"], name="walk")
        copy = clip.renamed("idle")
        assert copy.name == "idle"
        assert clip.name == "walk"
        assert copy.tracks[0] is clip.tracks[0]
        assert (copy.from_frame, copy.to_frame) == (clip.from_frame, clip.to_frame)


class TestRotationArrays:
    """Conversion between clips and (T, J, 4) rotation data."""

    def test_from_rotation_array(self):
        times = np.arange(3, dtype=np.float32)
        rotations = np.zeros((3, 2, 4), dtype=np.float32)
        rotations[..., 0] = 1.0
        rotations[:, 1, 1] = 0.5

        clip = AnimationClip.from_rotation_array("walk", ["Hips", "Spine"], times, rotations)
        assert clip.bone_names() == ["Hips", "Spine"]
        assert (clip.from_frame, clip.to_frame) == (0.0, 2.0)
        assert np.allclose(clip.tracks[1].values[:, 1], 0.5)

    def test_from_rotation_array_joint_mismatch(self):
        with pytest.raises(ValueError):
            AnimationClip.from_rotation_array("c", ["Hips"], np.arange(2), np.zeros((2, 3, 4)))

    def test_to_rotation_tensor(self, make_clip, num_keys, cpu_device):
        skeleton = Skeleton.from_names(["Hips", "Spine", "Head"])
        clip = make_clip(["Spine"])

        rotations = clip.to_rotation_tensor(skeleton, device=cpu_device)
        assert rotations.shape == (num_keys, 3, 4)
        expected = torch.from_numpy(clip.tracks[0].values)
        assert torch.allclose(rotations[:, 1], expected)
        # Unanimated bones hold identity
        identity = torch.tensor([1.0, 0.0, 0.0, 0.0])
        assert torch.allclose(rotations[:, 0], identity.expand(num_keys, 4))
        assert torch.allclose(rotations[:, 2], identity.expand(num_keys, 4))

    def test_to_rotation_tensor_round_trip(self):
        times = np.arange(4, dtype=np.float32)
        rotations = np.random.randn(4, 2, 4).astype(np.float32)
        skeleton = Skeleton.from_names(["A", "B"])

        clip = AnimationClip.from_rotation_array("c", ["A", "B"], times, rotations)
        assert np.allclose(clip.to_rotation_tensor(skeleton).numpy(), rotations)

    def test_to_rotation_tensor_ignores_other_properties(self):
        skeleton = Skeleton.from_names(["Hips"])
        clip = AnimationClip("c", tracks=[
            Track("Hips", TrackProperty.POSITION, [0, 1], np.ones((2, 3))),
        ])
        assert clip.to_rotation_tensor(skeleton).shape == (0, 1, 4)

    def test_to_rotation_tensor_key_count_mismatch(self):
        skeleton = Skeleton.from_names(["A", "B"])
        clip = AnimationClip("c", tracks=[
            Track("A", TrackProperty.ROTATION, [0, 1], np.ones((2, 4))),
            Track("B", TrackProperty.ROTATION, [0, 1, 2], np.ones((3, 4))),
        ])
        with pytest.raises(ValueError):
            clip.to_rotation_tensor(skeleton)
