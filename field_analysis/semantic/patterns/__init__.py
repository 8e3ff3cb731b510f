"""
Semantic pattern registry
"""
from dataclasses import replace
from typing import Dict, Optional, Tuple
import logging

from ..config import SemanticConfig
from ..models import SemanticCategory
from .base import (
    NamePattern,
    TypeConstraint,
    ValueValidator,
    ValidatorOutcome,
    FormatHint,
    SemanticPattern,
    RequiredItemField,
    CompositePattern,
)
from .commerce import COMMERCE_PATTERNS
from .identity import IDENTITY_PATTERNS
from .media import MEDIA_PATTERNS
from .engagement import ENGAGEMENT_PATTERNS, ENGAGEMENT_COMPOSITE_PATTERNS
from .temporal import TEMPORAL_PATTERNS
from .spatial import SPATIAL_PATTERNS

logger = logging.getLogger(__name__)

# Iteration order breaks confidence ties in the detector
STANDARD_PATTERNS: Tuple[SemanticPattern, ...] = (
    COMMERCE_PATTERNS
    + IDENTITY_PATTERNS
    + MEDIA_PATTERNS
    + ENGAGEMENT_PATTERNS
    + TEMPORAL_PATTERNS
    + SPATIAL_PATTERNS
)

COMPOSITE_PATTERNS: Tuple[CompositePattern, ...] = ENGAGEMENT_COMPOSITE_PATTERNS


class PatternRegistry:
    """Immutable catalog of standard and composite patterns"""

    def __init__(
        self,
        config: Optional[SemanticConfig] = None,
        standard: Tuple[SemanticPattern, ...] = STANDARD_PATTERNS,
        composite: Tuple[CompositePattern, ...] = COMPOSITE_PATTERNS
    ):
        self.config = config or SemanticConfig()
        self._standard = tuple(self._apply_thresholds(p) for p in standard)
        self._composite = tuple(
            replace(c, pattern=self._apply_thresholds(c.pattern)) for c in composite
        )
        self._by_category: Dict[SemanticCategory, SemanticPattern] = {
            p.category: p for p in self._standard
        }
        self._verify_coverage()
        logger.info(f"PatternRegistry initialized with {len(self._standard)} standard and "
                    f"{len(self._composite)} composite patterns")

    def _apply_thresholds(self, pattern: SemanticPattern) -> SemanticPattern:
        high, medium = self.config.thresholds_for(pattern.category.value)
        if (high, medium) == (pattern.high_threshold, pattern.medium_threshold):
            return pattern
        return replace(pattern, high_threshold=high, medium_threshold=medium)

    def _verify_coverage(self) -> None:
        """Every category needs exactly one pattern, standard or composite"""
        standard = [p.category for p in self._standard]
        composite = [c.category for c in self._composite]
        declared = standard + composite

        duplicates = {c.value for c in declared if declared.count(c) > 1}
        if duplicates:
            raise ValueError(f"Categories registered more than once: {sorted(duplicates)}")

        missing = {c.value for c in SemanticCategory} - {c.value for c in declared}
        if missing:
            raise ValueError(f"Categories without a pattern: {sorted(missing)}")

    @property
    def standard(self) -> Tuple[SemanticPattern, ...]:
        return self._standard

    @property
    def composite(self) -> Tuple[CompositePattern, ...]:
        return self._composite

    def get(self, category: SemanticCategory) -> Optional[SemanticPattern]:
        """Standard pattern for a category (composite categories return None)"""
        return self._by_category.get(category)


__all__ = [
    'PatternRegistry',
    'STANDARD_PATTERNS',
    'COMPOSITE_PATTERNS',
    'NamePattern',
    'TypeConstraint',
    'ValueValidator',
    'ValidatorOutcome',
    'FormatHint',
    'SemanticPattern',
    'RequiredItemField',
    'CompositePattern',
]
