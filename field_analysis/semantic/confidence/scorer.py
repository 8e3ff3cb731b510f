"""
Confidence scoring for semantic patterns
"""
from typing import Any, List, Optional, Sequence, Tuple
import logging

from ..config import SemanticConfig
from ..models import ConfidenceLevel, ConfidenceResult, ItemField, SchemaHints, SignalMatch
from ..patterns.base import CompositePattern, SemanticPattern

logger = logging.getLogger(__name__)


def determine_level(confidence: float, high: float, medium: float) -> ConfidenceLevel:
    """Band a continuous confidence into a level"""
    if confidence >= high:
        return ConfidenceLevel.HIGH
    if confidence >= medium:
        return ConfidenceLevel.MEDIUM
    if confidence > 0:
        return ConfidenceLevel.LOW
    return ConfidenceLevel.NONE


class ConfidenceScorer:
    """Computes a weighted, normalized confidence for one field against one pattern"""

    def __init__(self, config: Optional[SemanticConfig] = None):
        """
        Initialize confidence scorer

        Args:
            config: SemanticConfig instance
        """
        self.config = config or SemanticConfig()

    def score(
        self,
        field_name: str,
        field_type: str,
        sample_values: Sequence[Any],
        hints: Optional[SchemaHints],
        pattern: SemanticPattern
    ) -> ConfidenceResult:
        """
        Score a field against a standard pattern

        Signals:
        1. Name: weight of the best matching regex (never summed)
        2. Type: full weight if the inferred type is allowed
        3. Values: per validator, full weight if any non-null sample passes
        4. Format hints: full weight on exact format match; counted toward
           the maximum even when no hint was supplied

        Args:
            field_name: Field name (last path segment)
            field_type: Inferred primitive type ('string', 'number', 'array', ...)
            sample_values: Sample values for the field
            hints: Optional external schema hints
            pattern: Pattern to score against

        Returns:
            ConfidenceResult with normalized confidence, level and signal breakdown
        """
        signals: List[SignalMatch] = []
        achieved = 0.0
        max_possible = 0.0

        name_signal = self._name_signal(field_name, pattern)
        if name_signal is not None:
            signals.append(name_signal)
            achieved += name_signal.contribution
            max_possible += name_signal.weight

        constraint = pattern.type_constraint
        if constraint.weight > 0:
            type_matched = constraint.matches(field_type)
            signals.append(SignalMatch(
                name='typeConstraint',
                matched=type_matched,
                weight=constraint.weight,
                contribution=constraint.weight if type_matched else 0.0
            ))
            achieved += constraint.weight if type_matched else 0.0
            max_possible += constraint.weight

        for validator in pattern.value_validators:
            outcome = validator.evaluate(sample_values)
            if outcome.error:
                logger.debug(f"Validator {validator.name} errored for '{field_name}': {outcome.error}")
            signals.append(SignalMatch(
                name=f"valueValidator:{validator.name}",
                matched=outcome.matched,
                weight=validator.weight,
                contribution=validator.weight if outcome.matched else 0.0
            ))
            achieved += validator.weight if outcome.matched else 0.0
            max_possible += validator.weight

        supplied_format = hints.format if hints else None
        for hint in pattern.format_hints:
            format_matched = supplied_format is not None and supplied_format == hint.format_name
            signals.append(SignalMatch(
                name=f"formatHint:{hint.format_name}",
                matched=format_matched,
                weight=hint.weight,
                contribution=hint.weight if format_matched else 0.0
            ))
            achieved += hint.weight if format_matched else 0.0
            max_possible += hint.weight

        confidence = achieved / max_possible if max_possible > 0 else 0.0
        level = determine_level(confidence, pattern.high_threshold, pattern.medium_threshold)

        return ConfidenceResult(
            category=pattern.category,
            confidence=confidence,
            level=level,
            signals=signals
        )

    def score_composite(
        self,
        field_name: str,
        item_fields: Sequence[ItemField],
        sample_items: Sequence[Any],
        composite: CompositePattern
    ) -> ConfidenceResult:
        """
        Score an array field against a composite (item structure) pattern

        The caller guarantees the field is an array. Structure is all-or-nothing:
        every required item field must be satisfied by some item sub-field
        matching both its name regex and its type. Fewer sample items than
        min_items halves the achieved score instead of rejecting the match.
        """
        pattern = composite.pattern
        signals: List[SignalMatch] = []
        achieved = 0.0
        max_possible = 0.0

        name_signal = self._name_signal(field_name, pattern)
        if name_signal is not None:
            signals.append(name_signal)
            achieved += name_signal.contribution
            max_possible += name_signal.weight

        constraint = pattern.type_constraint
        if constraint.weight > 0:
            signals.append(SignalMatch(
                name='typeConstraint:array',
                matched=True,
                weight=constraint.weight,
                contribution=constraint.weight
            ))
            achieved += constraint.weight
            max_possible += constraint.weight

        structure_matched, matched_regexes = self._match_structure(item_fields, composite)
        structure_weight = self.config.composite_structure_weight
        signals.append(SignalMatch(
            name=f"requiredFields:{','.join(matched_regexes)}",
            matched=structure_matched,
            weight=structure_weight,
            contribution=structure_weight if structure_matched else 0.0
        ))
        achieved += structure_weight if structure_matched else 0.0
        max_possible += structure_weight

        if len(sample_items) < composite.min_items:
            achieved *= self.config.composite_min_items_penalty
            logger.debug(f"Composite {pattern.category.value} for '{field_name}' has "
                         f"{len(sample_items)} items (< {composite.min_items}), score reduced")

        confidence = achieved / max_possible if max_possible > 0 else 0.0
        level = determine_level(confidence, pattern.high_threshold, pattern.medium_threshold)

        return ConfidenceResult(
            category=pattern.category,
            confidence=confidence,
            level=level,
            signals=signals
        )

    def _name_signal(self, field_name: str, pattern: SemanticPattern) -> Optional[SignalMatch]:
        """Best matching name regex; the maximum is the highest weight in the pattern"""
        if not pattern.name_patterns:
            return None

        best_weight = 0.0
        best_regex = ''
        for name_pattern in pattern.name_patterns:
            if name_pattern.weight > best_weight and name_pattern.matches(field_name):
                best_weight = name_pattern.weight
                best_regex = name_pattern.regex.pattern

        return SignalMatch(
            name=f"namePattern:{best_regex}" if best_regex else 'namePattern',
            matched=best_weight > 0,
            weight=pattern.max_name_weight,
            contribution=best_weight
        )

    @staticmethod
    def _match_structure(
        item_fields: Sequence[ItemField],
        composite: CompositePattern
    ) -> Tuple[bool, List[str]]:
        matched_regexes = []
        all_matched = True
        for required in composite.required_item_fields:
            if any(required.matches(f.name, f.type) for f in item_fields):
                matched_regexes.append(required.name_regex.pattern)
            else:
                all_matched = False
        return all_matched, matched_regexes
