"""
Configuration management for rigmap.

Provides the auto-mapping configuration and JSON load/save helpers.
"""

import copy
import json
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Tuple
from pathlib import Path

from ..core.constants import (
    SIDE_MATCH_BONUS,
    SIDE_CENTER_BONUS,
    KEYWORD_MATCH_BONUS,
    KEYWORD_TIE_BREAKER,
    MIN_VIABLE_SCORE,
    BONE_KEYWORD_MAP,
    LEFT_MARKERS,
    RIGHT_MARKERS,
)


@dataclass
class AutoMapConfig:
    """
    Configuration for bone feature extraction and pair scoring.

    Attributes:
        # Scoring
        side_match_bonus: Bonus when both bones are on the same side
        side_center_bonus: Bonus when exactly one bone is a center bone
        keyword_match_bonus: Bonus per shared body-part keyword
        keyword_tie_breaker: Flat bonus when both bones have keywords but share none
        min_viable_score: Pairs scoring at or below this are discarded

        # Vocabularies
        keyword_map: Body-part tag -> list of substring variants
        left_markers: Substrings marking a left-side bone (checked first)
        right_markers: Substrings marking a right-side bone
    """

    # Scoring
    side_match_bonus: int = SIDE_MATCH_BONUS
    side_center_bonus: int = SIDE_CENTER_BONUS
    keyword_match_bonus: int = KEYWORD_MATCH_BONUS
    keyword_tie_breaker: int = KEYWORD_TIE_BREAKER
    min_viable_score: int = MIN_VIABLE_SCORE

    # Vocabularies
    keyword_map: Dict[str, List[str]] = field(
        default_factory=lambda: copy.deepcopy(BONE_KEYWORD_MAP)
    )
    left_markers: Tuple[str, ...] = LEFT_MARKERS
    right_markers: Tuple[str, ...] = RIGHT_MARKERS

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        config_dict = asdict(self)
        # JSON has no tuples
        config_dict['left_markers'] = list(self.left_markers)
        config_dict['right_markers'] = list(self.right_markers)
        return config_dict

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'AutoMapConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}
        extra_kwargs.update(known_kwargs.pop('extra', None) or {})

        for key in ('left_markers', 'right_markers'):
            if key in known_kwargs:
                known_kwargs[key] = tuple(known_kwargs[key])

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'AutoMapConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return AutoMapConfig.from_dict(config_dict)


DEFAULT_CONFIG = AutoMapConfig()


def load_config(filepath: str) -> AutoMapConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        AutoMapConfig object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    return AutoMapConfig.from_dict(config_dict)


def save_config(config: AutoMapConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: AutoMapConfig object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
