"""
Skeleton data for rigmap.

Provides the value records the mapping core reads from a loaded rig.
"""

from .skeleton import (
    Bone,
    Skeleton,
    find_head_bone,
)

__all__ = [
    "Bone",
    "Skeleton",
    "find_head_bone",
]
