"""
rigmap: bone correspondence and animation retargeting for player rigs

Maps an arbitrary source animation skeleton onto a player-character rig
and rebuilds animation clips against it.

Key Features:
- Bone name features (side + body-part keywords)
- Pairwise compatibility scoring with a left/right veto
- Greedy best-score-first auto-mapping with name fallback
- Editable mapping table persisted as flat JSON
- Mapping-driven clip retargeting that drops unmapped tracks
- Gameplay action links and export planning

API Design:
- Mapping tables are dicts of source bone name -> target bone name
- '' or a missing key means "unmapped"; both are treated alike
- Core operations never raise for data reasons

Example:
    >>> from rigmap.mapping import auto_map_bones
    >>> from rigmap.animation import retarget_clip
    >>> mapping = auto_map_bones(source_names, target_skeleton)
    >>> clip = retarget_clip(source_clip, target_skeleton, mapping)
"""

__version__ = "0.1.0"
__author__ = "rigmap Contributors"

from . import core
from . import utils
from . import mapping
from . import data
from . import animation
from . import session

__all__ = [
    "core",
    "utils",
    "mapping",
    "data",
    "animation",
    "session",
]
