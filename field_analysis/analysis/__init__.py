"""
Field importance and grouping analysis
"""
from .config import ClusterRule, GroupingConfig, ImportanceConfig
from .grouping import GroupingAnalyzer
from .importance import ImportanceScorer
from .models import (
    AnalysisResult,
    FieldDescriptor,
    FieldGroup,
    GroupingResult,
    ImportanceScore,
    ImportanceSignalMatch,
    ImportanceTier,
    PrefixGroup,
    SemanticCluster,
)

__all__ = [
    'ClusterRule',
    'GroupingConfig',
    'ImportanceConfig',
    'GroupingAnalyzer',
    'ImportanceScorer',
    'AnalysisResult',
    'FieldDescriptor',
    'FieldGroup',
    'GroupingResult',
    'ImportanceScore',
    'ImportanceSignalMatch',
    'ImportanceTier',
    'PrefixGroup',
    'SemanticCluster',
]
