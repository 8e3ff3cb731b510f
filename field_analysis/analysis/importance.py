"""
Field importance scoring
Ranks a field's visual prominence from four weighted signals
"""
from typing import Any, List, Optional, Sequence
import logging
import math
import re

from ..semantic.models import SemanticCategory
from .config import ImportanceConfig
from .models import FieldDescriptor, ImportanceScore, ImportanceSignalMatch, ImportanceTier

logger = logging.getLogger(__name__)


class ImportanceScorer:
    """Weighted-signal importance scorer with a metadata override"""

    def __init__(self, config: Optional[ImportanceConfig] = None):
        """
        Initialize importance scorer

        Args:
            config: ImportanceConfig instance (validated on construction)
        """
        self.config = config or ImportanceConfig()
        self.primary_indicators = [re.compile(p, re.IGNORECASE) for p in self.config.primary_indicators]
        self.metadata_patterns = [re.compile(p, re.IGNORECASE) for p in self.config.metadata_patterns]

    def score(self, field: FieldDescriptor) -> ImportanceScore:
        """
        Score a field's importance

        Signals (each pre-multiplied by its weight):
        1. Name pattern: 1.0 if the name matches a primary indicator
        2. Visual richness: lookup by semantic category
        3. Data presence: share of non-null, non-empty samples
        4. Position: logarithmic decay over position / total_fields

        Metadata-like names are forced to tertiary after scoring; the raw
        score is still returned.

        Args:
            field: FieldDescriptor to score

        Returns:
            ImportanceScore with tier, raw score and signal breakdown
        """
        weights = self.config.weights
        raw_scores = {
            'namePattern': self._score_name_pattern(field.name),
            'visualRichness': self._score_visual_richness(field.semantic_category),
            'dataPresence': self._score_data_presence(field.sample_values),
            'position': self._score_position(field.position, field.total_fields),
        }

        signals: List[ImportanceSignalMatch] = []
        total = 0.0
        for name, raw in raw_scores.items():
            contribution = raw * weights[name]
            signals.append(ImportanceSignalMatch(
                name=name,
                matched=raw > 0,
                weight=weights[name],
                contribution=contribution
            ))
            total += contribution

        tier = self._tier_for(total)

        metadata_override = self.is_metadata_field(field.name)
        if metadata_override and tier != ImportanceTier.TERTIARY:
            logger.debug(f"Metadata override: {field.path} forced from {tier.value} to tertiary "
                         f"(score={total:.2f})")
        if metadata_override:
            tier = ImportanceTier.TERTIARY

        return ImportanceScore(
            tier=tier,
            score=total,
            signals=signals,
            metadata_override=metadata_override
        )

    def is_metadata_field(self, field_name: str) -> bool:
        """id, _internal, user_id, created_at, deleted_date, ..."""
        return any(p.search(field_name) for p in self.metadata_patterns)

    def _tier_for(self, score: float) -> ImportanceTier:
        if score >= self.config.primary_threshold:
            return ImportanceTier.PRIMARY
        if score >= self.config.secondary_threshold:
            return ImportanceTier.SECONDARY
        return ImportanceTier.TERTIARY

    def _score_name_pattern(self, field_name: str) -> float:
        return 1.0 if any(p.search(field_name) for p in self.primary_indicators) else 0.0

    def _score_visual_richness(self, category: Optional[SemanticCategory]) -> float:
        if category is None:
            return self.config.default_visual_richness
        return self.config.visual_richness.get(category.value, self.config.default_visual_richness)

    @staticmethod
    def _score_data_presence(sample_values: Sequence[Any]) -> float:
        if not sample_values:
            return 0.0
        present = sum(1 for v in sample_values if v is not None and v != '')
        return present / len(sample_values)

    def _score_position(self, position: int, total_fields: int) -> float:
        """
        Earlier fields are slightly favored

        max(floor, 1 - log10(10 * position / total + 1) * 0.5): position 0
        scores 1.0, the middle of the list about 0.6, the end about 0.5.
        """
        if total_fields <= 1:
            return 1.0
        normalized = max(0, position) / total_fields
        return max(self.config.position_floor, 1.0 - math.log10(normalized * 10 + 1) * 0.5)
