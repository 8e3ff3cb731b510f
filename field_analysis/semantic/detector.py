"""
SemanticDetector - ranks semantic categories for a field
"""
from typing import Any, List, Optional, Sequence, Tuple
import logging

from .cache import DetectionCache, make_cache_key
from .config import SemanticConfig
from .confidence import ConfidenceScorer
from .models import (
    ConfidenceLevel,
    ConfidenceResult,
    ItemField,
    SchemaHints,
    SemanticCategory,
    SemanticMetadata,
)
from .patterns import CompositePattern, PatternRegistry, SemanticPattern

logger = logging.getLogger(__name__)

SMART_DEFAULT = 'smart-default'
TYPE_BASED = 'type-based'


def get_best_match(results: Sequence[ConfidenceResult]) -> Optional[ConfidenceResult]:
    """
    Top result, but only when its level is exactly HIGH

    Weaker guesses never drive defaults on their own.
    """
    if not results:
        return None
    best = results[0]
    return best if best.level == ConfidenceLevel.HIGH else None


class SemanticDetector:
    """
    Runs every registered pattern over a field and keeps the best alternatives

    Responsibilities:
    - Score standard patterns and return the top-N positive results
    - Memoize results per full input tuple in an injected DetectionCache
    - Evaluate composite patterns against array item structure
    - Summarize results as SemanticMetadata for the rendering layer
    """

    def __init__(
        self,
        config: Optional[SemanticConfig] = None,
        cache: Optional[DetectionCache] = None,
        registry: Optional[PatternRegistry] = None
    ):
        """
        Initialize SemanticDetector

        Args:
            config: SemanticConfig instance (defaults to env-based config)
            cache: DetectionCache owned by the caller (a private one is created if omitted)
            registry: PatternRegistry (built from config if omitted)
        """
        self.config = config or SemanticConfig.from_env()
        self.cache = cache if cache is not None else DetectionCache()
        self.registry = registry or PatternRegistry(self.config)
        self.scorer = ConfidenceScorer(self.config)

        logger.info("SemanticDetector initialized")

    def detect(
        self,
        field_path: str,
        field_name: str,
        field_type: str,
        sample_values: Sequence[Any],
        hints: Optional[SchemaHints] = None
    ) -> List[ConfidenceResult]:
        """
        Detect semantic categories for a field

        Identical calls return the same cached list object.

        Args:
            field_path: Full path to the field (e.g. 'items[].price')
            field_name: Field name (e.g. 'price')
            field_type: Inferred type (e.g. 'number')
            sample_values: Sample values from the field
            hints: Optional external schema hints

        Returns:
            Up to max_alternatives results, confidence descending
        """
        key = make_cache_key(field_path, field_name, field_type, sample_values, hints)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        results = self._detect_uncached(field_name, field_type, sample_values, hints)
        self.cache.set(key, results)

        if results:
            logger.debug(f"Detected {field_path}: "
                         + ", ".join(f"{r.category.value}={r.confidence:.2f}" for r in results))
        return results

    def _detect_uncached(
        self,
        field_name: str,
        field_type: str,
        sample_values: Sequence[Any],
        hints: Optional[SchemaHints]
    ) -> List[ConfidenceResult]:
        results = []
        for pattern in self.registry.standard:
            result = self.scorer.score(field_name, field_type, sample_values, hints, pattern)
            if result.confidence > 0:
                results.append(result)

        # sort is stable, so ties keep registry order
        results.sort(key=lambda r: r.confidence, reverse=True)
        return results[:self.config.max_alternatives]

    def detect_composite(
        self,
        field_path: str,
        field_name: str,
        item_fields: Sequence[ItemField],
        sample_items: Sequence[Any]
    ) -> Optional[ConfidenceResult]:
        """
        Detect composite semantics for an array field from its item structure

        Args:
            field_path: Full path to the array field
            field_name: Name of the array field
            item_fields: Inferred sub-fields of the array items
            sample_items: Sample items from the array

        Returns:
            Best composite match with confidence > 0, or None
        """
        best: Optional[ConfidenceResult] = None
        for composite in self.registry.composite:
            result = self.scorer.score_composite(field_name, item_fields, sample_items, composite)
            if result.confidence > 0 and (best is None or result.confidence > best.confidence):
                best = result

        if best:
            logger.debug(f"Composite match for {field_path}: {best.category.value} "
                         f"({best.confidence:.2f}, {best.level.value})")
        return best

    def describe(self, results: Sequence[ConfidenceResult]) -> SemanticMetadata:
        """
        Summarize detector output for the rendering layer

        A HIGH best match becomes a smart default carrying up to two
        alternatives; anything weaker falls back to type-based rendering.
        """
        best = get_best_match(results)
        if best is None:
            return SemanticMetadata(
                detected_category=None,
                confidence=0.0,
                level=ConfidenceLevel.NONE,
                applied_at=TYPE_BASED,
                alternatives=[]
            )

        alternatives = [
            {'category': r.category, 'confidence': r.confidence}
            for r in results if r.category != best.category
        ][:2]
        return SemanticMetadata(
            detected_category=best.category,
            confidence=best.confidence,
            level=best.level,
            applied_at=SMART_DEFAULT,
            alternatives=alternatives
        )

    def get_pattern(self, category: SemanticCategory) -> Optional[SemanticPattern]:
        return self.registry.get(category)

    def standard_patterns(self) -> Tuple[SemanticPattern, ...]:
        """Standard patterns in evaluation (tie-break) order"""
        return self.registry.standard

    def composite_patterns(self) -> Tuple[CompositePattern, ...]:
        return self.registry.composite

    def clear_cache(self) -> int:
        """Clear memoized results (on reset or after pattern rules change)"""
        return self.cache.clear()
