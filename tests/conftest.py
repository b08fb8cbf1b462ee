"""
Pytest configuration and fixtures for rigmap tests.
"""

import numpy as np
import pytest
import torch

from rigmap.animation import AnimationClip, Track, TrackProperty
from rigmap.data import Skeleton


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def num_keys():
    """Default number of keyframes per track."""
    return 5


@pytest.fixture
def mixamo_source_names():
    """Source bones of a Mixamo-style animation rig."""
    return ["mixamorig:LeftArm", "mixamorig:RightArm", "mixamorig:Head"]


@pytest.fixture
def simple_target_skeleton():
    """Small target skeleton with unprefixed names."""
    return Skeleton.from_names(["LeftArm", "RightArm", "Head", "Spine"], name="player")


@pytest.fixture
def simple_joint_tree():
    """Simple 4-joint hierarchy."""
    return {
        'Hips': {
            'parent': None,
            'rest_translation': [0.0, 1.0, 0.0],
            'rest_rotation': [1.0, 0.0, 0.0, 0.0],
            'children': ['Spine', 'LeftUpLeg']
        },
        'Spine': {
            'parent': 'Hips',
            'rest_translation': [0.0, 0.1, 0.0],
            'rest_rotation': [1.0, 0.0, 0.0, 0.0],
            'children': ['Head']
        },
        'Head': {
            'parent': 'Spine',
            'rest_translation': [0.0, 0.5, 0.0],
            'rest_rotation': [1.0, 0.0, 0.0, 0.0],
            'children': []
        },
        'LeftUpLeg': {
            'parent': 'Hips',
            'rest_translation': [0.1, -0.1, 0.0],
            'rest_rotation': [1.0, 0.0, 0.0, 0.0],
            'children': []
        },
    }


@pytest.fixture
def make_rotation_track(num_keys):
    """Factory for rotation tracks with distinct, recognisable values."""
    def _make(bone_name, offset=0.0):
        times = np.arange(num_keys, dtype=np.float32)
        values = np.zeros((num_keys, 4), dtype=np.float32)
        values[:, 0] = 1.0
        values[:, 1] = offset + times * 0.01
        return Track(bone_name, TrackProperty.ROTATION, times, values)
    return _make


@pytest.fixture
def make_clip(make_rotation_track, num_keys):
    """Factory for clips with one rotation track per bone."""
    def _make(bone_names, name='clip', from_frame=0.0, to_frame=None):
        tracks = [make_rotation_track(b, offset=float(i)) for i, b in enumerate(bone_names)]
        if to_frame is None:
            to_frame = float(num_keys - 1)
        return AnimationClip(name=name, tracks=tracks, from_frame=from_frame, to_frame=to_frame)
    return _make
