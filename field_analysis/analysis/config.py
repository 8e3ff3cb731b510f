"""
Configuration for importance scoring and grouping analysis
"""
import os
import math
from dataclasses import dataclass, field
from typing import Dict, List, Any

from ..semantic.models import SemanticCategory

_CATEGORY_VALUES = {c.value for c in SemanticCategory}


@dataclass
class ClusterRule:
    """Semantic cluster: fields whose categories fall in the set form a section"""
    label: str
    categories: List[str]
    min_fields: int = 2


@dataclass
class ImportanceConfig:
    """Configuration for field importance scoring"""

    # Signal weights (MUST sum to 1.0)
    name_pattern_weight: float = 0.40
    visual_richness_weight: float = 0.25
    data_presence_weight: float = 0.20
    position_weight: float = 0.15

    # Tier thresholds
    primary_threshold: float = 0.80
    secondary_threshold: float = 0.50

    # Lowest score the position signal can produce
    position_floor: float = 0.2

    # Names that boost importance (product_title, user_name, ...)
    primary_indicators: List[str] = field(default_factory=lambda: [
        r'(name|title|headline|heading|label|summary)',
    ])

    # Administrative fields forced to tertiary regardless of score
    metadata_patterns: List[str] = field(default_factory=lambda: [
        r'^id$',
        r'^_',
        r'^[a-z]+_id$',
        r'^(created|updated|deleted)_at$',
        r'^(created|updated|deleted)_date$',
    ])

    # Semantic category -> visual richness
    visual_richness: Dict[str, float] = field(default_factory=lambda: {
        'image': 1.0,
        'video': 1.0,
        'thumbnail': 1.0,
        'avatar': 1.0,
        'title': 0.6,
        'name': 0.6,
        'description': 0.6,
        'uuid': 0.2,
        'timestamp': 0.2,
        'date': 0.2,
    })
    default_visual_richness: float = 0.4

    def __post_init__(self):
        self.validate()

    @property
    def weights(self) -> Dict[str, float]:
        return {
            'namePattern': self.name_pattern_weight,
            'visualRichness': self.visual_richness_weight,
            'dataPresence': self.data_presence_weight,
            'position': self.position_weight,
        }

    def validate(self) -> None:
        """Check config invariants once, at load time"""
        for name, weight in self.weights.items():
            if weight < 0:
                raise ValueError(f"Importance weight '{name}' must not be negative, got {weight}")
        total = sum(self.weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Importance weights must sum to 1.0, got {total:.4f}")

        if not (0.0 <= self.secondary_threshold <= self.primary_threshold <= 1.0):
            raise ValueError(
                f"Tier thresholds must satisfy 0 <= secondary ({self.secondary_threshold}) "
                f"<= primary ({self.primary_threshold}) <= 1"
            )
        if not 0.0 <= self.position_floor <= 1.0:
            raise ValueError(f"position_floor must be in [0, 1], got {self.position_floor}")

        for category, richness in self.visual_richness.items():
            if not 0.0 <= richness <= 1.0:
                raise ValueError(f"Visual richness for '{category}' must be in [0, 1], got {richness}")
        if not 0.0 <= self.default_visual_richness <= 1.0:
            raise ValueError(f"default_visual_richness must be in [0, 1], got {self.default_visual_richness}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ImportanceConfig':
        defaults = cls()
        weights = data.get('weights', {})
        tiers = data.get('tier_thresholds', {})
        return cls(
            name_pattern_weight=float(weights.get('name_pattern', defaults.name_pattern_weight)),
            visual_richness_weight=float(weights.get('visual_richness', defaults.visual_richness_weight)),
            data_presence_weight=float(weights.get('data_presence', defaults.data_presence_weight)),
            position_weight=float(weights.get('position', defaults.position_weight)),
            primary_threshold=float(tiers.get('primary', defaults.primary_threshold)),
            secondary_threshold=float(tiers.get('secondary', defaults.secondary_threshold)),
            position_floor=float(data.get('position_floor', defaults.position_floor)),
            primary_indicators=list(data.get('primary_indicators', defaults.primary_indicators)),
            metadata_patterns=list(data.get('metadata_patterns', defaults.metadata_patterns)),
            visual_richness={**defaults.visual_richness, **data.get('visual_richness', {})},
            default_visual_richness=float(data.get('default_visual_richness', defaults.default_visual_richness)),
        )

    @classmethod
    def from_env(cls) -> 'ImportanceConfig':
        """Create config from environment variables"""
        return cls(
            name_pattern_weight=float(os.getenv("IMPORTANCE_NAME_PATTERN_WEIGHT", "0.40")),
            visual_richness_weight=float(os.getenv("IMPORTANCE_VISUAL_RICHNESS_WEIGHT", "0.25")),
            data_presence_weight=float(os.getenv("IMPORTANCE_DATA_PRESENCE_WEIGHT", "0.20")),
            position_weight=float(os.getenv("IMPORTANCE_POSITION_WEIGHT", "0.15")),
            primary_threshold=float(os.getenv("IMPORTANCE_PRIMARY_THRESHOLD", "0.80")),
            secondary_threshold=float(os.getenv("IMPORTANCE_SECONDARY_THRESHOLD", "0.50")),
            position_floor=float(os.getenv("IMPORTANCE_POSITION_FLOOR", "0.2")),
        )


def _default_cluster_rules() -> List[ClusterRule]:
    return [
        ClusterRule(label='Contact', categories=['email', 'phone', 'address'], min_fields=2),
        ClusterRule(label='Identity', categories=['name', 'email', 'avatar'], min_fields=2),
        ClusterRule(label='Pricing', categories=['price', 'currency_code', 'quantity'], min_fields=2),
        ClusterRule(label='Temporal', categories=['date', 'timestamp'], min_fields=2),
    ]


@dataclass
class GroupingConfig:
    """Configuration for prefix grouping and semantic clustering"""

    # Grouping is skipped entirely below this many fields
    min_fields_for_grouping: int = 8
    # Smallest valid prefix group
    min_fields_per_group: int = 3

    # Trailing label words that add no meaning (contact_info_ -> "Contact")
    suffixes_to_strip: List[str] = field(default_factory=lambda: [
        'info', 'details', 'data', 'config', 'settings', 'options', 'params', 'parameters',
    ])

    cluster_rules: List[ClusterRule] = field(default_factory=_default_cluster_rules)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.min_fields_for_grouping < 1:
            raise ValueError(f"min_fields_for_grouping must be >= 1, got {self.min_fields_for_grouping}")
        if self.min_fields_per_group < 1:
            raise ValueError(f"min_fields_per_group must be >= 1, got {self.min_fields_per_group}")
        for rule in self.cluster_rules:
            if rule.min_fields < 1:
                raise ValueError(f"Cluster '{rule.label}' min_fields must be >= 1, got {rule.min_fields}")
            if not rule.categories:
                raise ValueError(f"Cluster '{rule.label}' has no categories")
            unknown = [c for c in rule.categories if c not in _CATEGORY_VALUES]
            if unknown:
                raise ValueError(f"Cluster '{rule.label}' has unknown categories: {unknown}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GroupingConfig':
        defaults = cls()
        rules = data.get('cluster_rules')
        return cls(
            min_fields_for_grouping=int(data.get('min_fields_for_grouping', defaults.min_fields_for_grouping)),
            min_fields_per_group=int(data.get('min_fields_per_group', defaults.min_fields_per_group)),
            suffixes_to_strip=list(data.get('suffixes_to_strip', defaults.suffixes_to_strip)),
            cluster_rules=[ClusterRule(**rule) for rule in rules] if rules is not None else defaults.cluster_rules,
        )

    @classmethod
    def from_env(cls) -> 'GroupingConfig':
        """Create config from environment variables"""
        return cls(
            min_fields_for_grouping=int(os.getenv("GROUPING_MIN_FIELDS", "8")),
            min_fields_per_group=int(os.getenv("GROUPING_MIN_FIELDS_PER_GROUP", "3")),
        )
