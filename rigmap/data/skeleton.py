"""
Skeleton records for the bone mapping core.

Bones are plain value records indexed by position within their skeleton.
The engine scene graph that owns the real bones stays outside; only names
and hierarchy are read from it.

Joint trees use the format produced by the model loaders:

    {
        'Hips': {'parent': None, 'children': ['Spine', 'LeftUpLeg']},
        'Spine': {'parent': 'Hips', 'children': []},
        ...
    }
"""

from typing import Dict, List, Optional, Any, NamedTuple, Sequence

from ..core.constants import HEAD_BONE_HINT


class Bone(NamedTuple):
    """A named joint of a skeleton."""
    name: str
    index: int                  # Position within the skeleton
    parent: Optional[str]       # Parent bone name, None for roots


class Skeleton:
    """
    Ordered collection of uniquely named bones.

    Hierarchy is carried for completeness; the mapping core only uses names.
    """

    def __init__(self, bones: Sequence[Bone], name: str = 'skeleton'):
        """
        Args:
            bones: Bones in skeleton order
            name: Skeleton name

        Raises:
            ValueError: If two bones share a name
        """
        self.name = name
        self.bones: List[Bone] = list(bones)
        self._index: Dict[str, int] = {}

        for i, bone in enumerate(self.bones):
            if bone.name in self._index:
                raise ValueError(f"Duplicate bone name '{bone.name}' in skeleton '{name}'")
            self._index[bone.name] = i

    @classmethod
    def from_names(
        cls,
        names: Sequence[str],
        name: str = 'skeleton'
    ) -> 'Skeleton':
        """Flat skeleton of root bones, in the given order."""
        return cls([Bone(n, i, None) for i, n in enumerate(names)], name=name)

    @classmethod
    def from_joint_tree(
        cls,
        joint_tree: Dict[str, Dict[str, Any]],
        name: str = 'skeleton',
        joint_names: Optional[Sequence[str]] = None
    ) -> 'Skeleton':
        """
        Build a skeleton from a joint tree.

        Args:
            joint_tree: Joint name -> {'parent': ..., 'children': [...]}
            name: Skeleton name
            joint_names: Explicit bone order. If None, bones are ordered
                depth-first from the roots in tree order.

        Returns:
            Skeleton
        """
        if joint_names is None:
            joint_names = []
            seen = set()
            roots = [j for j, info in joint_tree.items() if info.get('parent') is None]
            stack = list(reversed(roots))
            while stack:
                joint = stack.pop()
                # Cycles and joints listed under several parents are walked once
                if joint in seen:
                    continue
                seen.add(joint)
                joint_names.append(joint)
                children = joint_tree[joint].get('children', [])
                stack.extend(reversed([c for c in children if c in joint_tree]))

            # Joints unreachable from any root keep tree order
            joint_names.extend(j for j in joint_tree if j not in seen)

        bones = [
            Bone(joint, i, joint_tree.get(joint, {}).get('parent'))
            for i, joint in enumerate(joint_names)
        ]
        return cls(bones, name=name)

    def bone_names(self) -> List[str]:
        return [bone.name for bone in self.bones]

    def find_bone(self, name: str) -> Optional[Bone]:
        """Bone with exactly this name, or None."""
        i = self._index.get(name)
        return self.bones[i] if i is not None else None

    def index_of(self, name: str) -> int:
        """Index of a bone, -1 if absent."""
        return self._index.get(name, -1)

    def children_of(self, name: str) -> List[str]:
        return [bone.name for bone in self.bones if bone.parent == name]

    def __len__(self) -> int:
        return len(self.bones)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Skeleton('{self.name}', {len(self)} bones)"


def find_head_bone(skeleton: Optional[Skeleton]) -> Optional[str]:
    """
    First bone whose name contains 'head' (case-insensitive).

    Used to pick the bone the first-person camera is mounted on.
    """
    if skeleton is None:
        return None
    for bone in skeleton.bones:
        if HEAD_BONE_HINT in bone.name.lower():
            return bone.name
    return None
