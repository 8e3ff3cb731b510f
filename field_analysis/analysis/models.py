"""
Data models for importance scoring and grouping
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from ..semantic.models import SemanticCategory


class ImportanceTier(str, Enum):
    """Visual prominence of a field"""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


@dataclass(frozen=True)
class FieldDescriptor:
    """A field as produced by the upstream schema parser"""
    path: str
    name: str
    inferred_type: str = 'string'
    sample_values: Sequence[Any] = ()
    semantic_category: Optional[SemanticCategory] = None
    position: int = 0
    total_fields: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'name': self.name,
            'inferred_type': self.inferred_type,
            'semantic_category': self.semantic_category.value if self.semantic_category else None,
            'position': self.position,
            'total_fields': self.total_fields
        }


@dataclass
class ImportanceSignalMatch:
    """One weighted signal of the importance score"""
    name: str
    matched: bool
    weight: float
    contribution: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'matched': self.matched,
            'weight': round(self.weight, 3),
            'contribution': round(self.contribution, 3)
        }


@dataclass
class ImportanceScore:
    """Importance tier with the raw score kept for diagnostics"""
    tier: ImportanceTier
    score: float
    signals: List[ImportanceSignalMatch] = field(default_factory=list)
    metadata_override: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tier': self.tier.value,
            'score': round(self.score, 3),
            'metadata_override': self.metadata_override,
            'signals': [s.to_dict() for s in self.signals]
        }


@dataclass
class PrefixGroup:
    """Fields sharing a name prefix (billing_*, user.*)"""
    prefix: str
    label: str
    fields: List[FieldDescriptor]
    type: str = 'prefix'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'prefix': self.prefix,
            'label': self.label,
            'fields': [f.path for f in self.fields]
        }


@dataclass
class SemanticCluster:
    """Fields grouped by related semantic categories (email + phone -> Contact)"""
    label: str
    categories: List[SemanticCategory]
    fields: List[FieldDescriptor]
    type: str = 'semantic'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'label': self.label,
            'categories': [c.value for c in self.categories],
            'fields': [f.path for f in self.fields]
        }


FieldGroup = Union[PrefixGroup, SemanticCluster]


@dataclass
class GroupingResult:
    """Grouped sections plus the fields left outside any group"""
    groups: List[FieldGroup] = field(default_factory=list)
    ungrouped: List[FieldDescriptor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'groups': [g.to_dict() for g in self.groups],
            'ungrouped': [f.path for f in self.ungrouped]
        }


@dataclass
class AnalysisResult:
    """Importance per field path plus grouping"""
    importance: Dict[str, ImportanceScore]
    grouping: GroupingResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'importance': {path: score.to_dict() for path, score in self.importance.items()},
            'grouping': self.grouping.to_dict()
        }
