"""
Semantic field detection
"""
from .cache import DetectionCache
from .config import SemanticConfig
from .confidence import ConfidenceScorer
from .detector import SemanticDetector, get_best_match
from .models import (
    ConfidenceLevel,
    ConfidenceResult,
    ItemField,
    SchemaHints,
    SemanticCategory,
    SemanticMetadata,
    SignalMatch,
)
from .patterns import PatternRegistry

__all__ = [
    'DetectionCache',
    'SemanticConfig',
    'ConfidenceScorer',
    'SemanticDetector',
    'get_best_match',
    'ConfidenceLevel',
    'ConfidenceResult',
    'ItemField',
    'SchemaHints',
    'SemanticCategory',
    'SemanticMetadata',
    'SignalMatch',
    'PatternRegistry',
]
