"""
Configuration for semantic detection
"""
import os
from dataclasses import dataclass, field
from typing import Dict, Tuple, Any


@dataclass
class SemanticConfig:
    """Configuration for the semantic detector and pattern registry"""

    # Number of ranked alternatives returned per field
    max_alternatives: int = 3

    # Default confidence bands for every pattern
    high_threshold: float = 0.75
    medium_threshold: float = 0.50

    # Per-category (high, medium) overrides, keyed by category value
    threshold_overrides: Dict[str, Tuple[float, float]] = field(default_factory=dict)

    # Composite (array structure) detection
    composite_structure_weight: float = 0.4
    composite_min_items_penalty: float = 0.5

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Fail fast on out-of-range values"""
        if self.max_alternatives < 1:
            raise ValueError(f"max_alternatives must be >= 1, got {self.max_alternatives}")
        _check_thresholds('default', self.high_threshold, self.medium_threshold)
        for category, (high, medium) in self.threshold_overrides.items():
            _check_thresholds(category, high, medium)
        if not 0.0 <= self.composite_structure_weight <= 1.0:
            raise ValueError(f"composite_structure_weight must be in [0, 1], got {self.composite_structure_weight}")
        if not 0.0 <= self.composite_min_items_penalty <= 1.0:
            raise ValueError(f"composite_min_items_penalty must be in [0, 1], got {self.composite_min_items_penalty}")

    def thresholds_for(self, category: str) -> Tuple[float, float]:
        """(high, medium) thresholds for a category value"""
        return self.threshold_overrides.get(category, (self.high_threshold, self.medium_threshold))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SemanticConfig':
        """Build config from a plain dictionary (e.g. a JSON overrides file)"""
        overrides = {
            category: (float(values['high']), float(values['medium']))
            for category, values in data.get('threshold_overrides', {}).items()
        }
        return cls(
            max_alternatives=int(data.get('max_alternatives', 3)),
            high_threshold=float(data.get('high_threshold', 0.75)),
            medium_threshold=float(data.get('medium_threshold', 0.50)),
            threshold_overrides=overrides,
            composite_structure_weight=float(data.get('composite_structure_weight', 0.4)),
            composite_min_items_penalty=float(data.get('composite_min_items_penalty', 0.5)),
        )

    @classmethod
    def from_env(cls) -> 'SemanticConfig':
        """Create config from environment variables"""
        return cls(
            max_alternatives=int(os.getenv("SEMANTIC_MAX_ALTERNATIVES", "3")),
            high_threshold=float(os.getenv("SEMANTIC_HIGH_THRESHOLD", "0.75")),
            medium_threshold=float(os.getenv("SEMANTIC_MEDIUM_THRESHOLD", "0.50")),
            composite_structure_weight=float(os.getenv("SEMANTIC_COMPOSITE_STRUCTURE_WEIGHT", "0.4")),
            composite_min_items_penalty=float(os.getenv("SEMANTIC_COMPOSITE_MIN_ITEMS_PENALTY", "0.5")),
        )


def _check_thresholds(label: str, high: float, medium: float) -> None:
    if not (0.0 <= medium <= high <= 1.0):
        raise ValueError(
            f"Invalid thresholds for {label}: expected 0 <= medium ({medium}) <= high ({high}) <= 1"
        )
