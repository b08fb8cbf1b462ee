"""
Editable bone mapping table with JSON persistence.

The persisted form is a flat JSON object, source bone name -> target bone
name, with '' for an intentionally unmapped bone:

    {
      "mixamorig:Hips": "Hips",
      "mixamorig:LeftHandThumb4": ""
    }

A missing key and an empty value mean the same thing: ``get`` returns None
for both.
"""

from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union, Any
from pathlib import Path
import json
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class MappingError(Exception):
    """Base exception for bone mapping errors."""
    pass


class MappingLoadError(MappingError):
    """Persisted mapping could not be parsed."""
    pass


# =============================================================================
# Parsing
# =============================================================================

def parse_mapping_json(text: str) -> Dict[str, str]:
    """
    Parse and validate a persisted mapping.

    JSON null values are read as unmapped ('').

    Raises:
        MappingLoadError: On malformed JSON or a shape other than a flat
            object of strings
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MappingLoadError(f"Invalid mapping JSON: {e}") from e

    if not isinstance(data, dict):
        raise MappingLoadError(
            f"Mapping JSON must be an object, got {type(data).__name__}"
        )

    entries = {}
    for source, target in data.items():
        if target is None:
            target = ''
        if not isinstance(target, str):
            raise MappingLoadError(
                f"Mapping target for '{source}' must be a string, "
                f"got {type(target).__name__}"
            )
        entries[source] = target
    return entries


# =============================================================================
# Mapping Table
# =============================================================================

class MappingTable:
    """
    Mapping from source bone names to target bone names.

    Owned by an editing session. Mutated by the auto-mapper (bulk),
    user edits (single key) and file loads (bulk). Consumers that must not
    observe later edits take a ``snapshot()``.
    """

    def __init__(self, entries: Optional[Mapping[str, Optional[str]]] = None):
        self._entries: Dict[str, str] = {}
        if entries:
            self.update(entries)

    @classmethod
    def identity(cls, bone_names: Sequence[str]) -> 'MappingTable':
        """Default 1:1 table mapping every bone to itself."""
        return cls({name: name for name in bone_names})

    @classmethod
    def from_json(cls, text: str) -> 'MappingTable':
        """Create a table from persisted JSON text."""
        return cls(parse_mapping_json(text))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, source: str) -> Optional[str]:
        """Target for a source bone, or None if absent or unmapped."""
        return self._entries.get(source) or None

    def __getitem__(self, source: str) -> str:
        return self._entries[source]

    def __contains__(self, source: object) -> bool:
        return source in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MappingTable):
            return self._entries == other._entries
        if isinstance(other, dict):
            return self._entries == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"MappingTable({len(self)} entries)"

    def items(self) -> List[Tuple[str, str]]:
        return list(self._entries.items())

    def snapshot(self) -> Dict[str, str]:
        """Plain dict copy, detached from later edits."""
        return dict(self._entries)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set(self, source: str, target: Optional[str]) -> None:
        """Overwrite a single entry. None or '' marks the bone unmapped."""
        self._entries[source] = target or ''

    def update(self, mapping: Union['MappingTable', Mapping[str, Optional[str]]]) -> None:
        """Replace the whole table."""
        if isinstance(mapping, MappingTable):
            mapping = mapping.snapshot()
        self._entries = {source: target or '' for source, target in mapping.items()}

    def clear(self) -> None:
        self._entries = {}

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def search(self, term: str) -> List[Tuple[str, str]]:
        """
        Entries whose source or target contains ``term`` (case-insensitive).

        Returns:
            (source, target) pairs sorted by source name
        """
        term = term.lower()
        matches = [
            (source, target) for source, target in self._entries.items()
            if term in source.lower() or (target and term in target.lower())
        ]
        return sorted(matches, key=lambda entry: entry[0])

    def unmapped(self) -> List[str]:
        """Source bones explicitly marked unmapped."""
        return [source for source, target in self._entries.items() if not target]

    def dangling(self, skeleton: Any) -> List[str]:
        """
        Source bones whose target is not a bone of ``skeleton``.

        Args:
            skeleton: Object with ``bone_names()``, or a sequence of names
        """
        if hasattr(skeleton, 'bone_names'):
            names = set(skeleton.bone_names())
        else:
            names = set(skeleton)
        return [
            source for source, target in self._entries.items()
            if target and target not in names
        ]

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        return json.dumps(self._entries, indent=2)

    def loads(self, text: str) -> None:
        """
        Bulk-overwrite from JSON text.

        Raises:
            MappingLoadError: If the text is not a valid mapping; the table
                is left unchanged
        """
        self.update(parse_mapping_json(text))

    def save(self, filepath: Union[str, Path]) -> None:
        """Write the table to a JSON file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            f.write(self.to_json())
        logger.info(f"Saved bone mapping ({len(self)} entries) to {filepath}")

    def load(self, filepath: Union[str, Path]) -> None:
        """
        Bulk-overwrite from a JSON file.

        Raises:
            MappingLoadError: If the file cannot be read or parsed
        """
        filepath = Path(filepath)
        try:
            with open(filepath, 'r') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise MappingLoadError(f"Cannot read mapping file {filepath}: {e}") from e

        self.loads(text)
        logger.info(f"Loaded bone mapping ({len(self)} entries) from {filepath}")
