"""
Unit tests for the confidence scorer
"""

import pytest

from field_analysis.semantic import ConfidenceLevel, ConfidenceScorer, ItemField, SchemaHints, SemanticCategory
from field_analysis.semantic.confidence import determine_level
from field_analysis.semantic.patterns import (
    FormatHint,
    PatternRegistry,
    SemanticPattern,
    ValueValidator,
)
from field_analysis.semantic.patterns.base import name_pattern, type_constraint
from field_analysis.semantic.patterns.engagement import REVIEWS_PATTERN


def _explode(value):
    raise RuntimeError("predicate blew up")


class TestDetermineLevel:
    """Test cases for confidence banding"""

    def test_levels(self):
        """Test each band boundary"""
        assert determine_level(0.75, 0.75, 0.5) == ConfidenceLevel.HIGH
        assert determine_level(0.74, 0.75, 0.5) == ConfidenceLevel.MEDIUM
        assert determine_level(0.5, 0.75, 0.5) == ConfidenceLevel.MEDIUM
        assert determine_level(0.01, 0.75, 0.5) == ConfidenceLevel.LOW
        assert determine_level(0.0, 0.75, 0.5) == ConfidenceLevel.NONE


class TestConfidenceScorer:
    """Test cases for ConfidenceScorer"""

    def setup_method(self):
        """Set up test fixtures"""
        self.scorer = ConfidenceScorer()
        self.registry = PatternRegistry()

    def test_price_number_is_high(self):
        """Test price field with a numeric sample scores high"""
        pattern = self.registry.get(SemanticCategory.PRICE)

        result = self.scorer.score('price', 'number', [29.99], None, pattern)

        # 0.4 + 0.2 + 0.25 achieved out of 1.1 (format hints always count)
        assert result.category == SemanticCategory.PRICE
        assert result.confidence == pytest.approx(0.85 / 1.1)
        assert result.level == ConfidenceLevel.HIGH

    def test_format_hint_adds_confidence(self):
        """Test a matching schema format raises confidence"""
        pattern = self.registry.get(SemanticCategory.EMAIL)

        without_hint = self.scorer.score('contact', 'string', ['a@b.co'], None, pattern)
        with_hint = self.scorer.score('contact', 'string', ['a@b.co'], SchemaHints(format='email'), pattern)

        assert with_hint.confidence > without_hint.confidence
        assert with_hint.confidence == pytest.approx(0.6 / 1.0)

    def test_best_name_pattern_wins_not_sum(self):
        """Test only the best matching name regex contributes"""
        pattern = self.registry.get(SemanticCategory.UUID)

        bare_id = self.scorer.score('id', 'string', [], None, pattern)
        uuid_name = self.scorer.score('uuid', 'string', [], None, pattern)

        bare_signal = bare_id.signals[0]
        assert bare_signal.contribution == pytest.approx(0.2)
        assert bare_signal.weight == pytest.approx(0.4)
        assert uuid_name.signals[0].contribution == pytest.approx(0.4)

    def test_underscore_is_word_character(self):
        """Test word boundaries do not split on underscores"""
        pattern = self.registry.get(SemanticCategory.PRICE)

        result = self.scorer.score('priceless_item', 'string', [], None, pattern)

        assert result.signals[0].matched is False

    def test_none_samples_are_ignored(self):
        """Test null samples never satisfy a validator"""
        pattern = self.registry.get(SemanticCategory.PRICE)

        result = self.scorer.score('price', 'number', [None, None], None, pattern)

        validator_signal = next(s for s in result.signals if s.name.startswith('valueValidator'))
        assert validator_signal.matched is False

    def test_raising_validator_counts_as_no_match(self):
        """Test predicate exceptions do not escape the scorer"""
        pattern = SemanticPattern(
            category=SemanticCategory.STATUS,
            name_patterns=(name_pattern(r'\bstatus\b', 0.4),),
            type_constraint=type_constraint('string', weight=0.2),
            value_validators=(ValueValidator('explodes', _explode, 0.4),),
        )

        result = self.scorer.score('status', 'string', ['active'], None, pattern)

        assert result.confidence == pytest.approx(0.6)
        assert result.level == ConfidenceLevel.MEDIUM
        assert result.signals[-1].matched is False

    def test_validator_outcome_reports_error(self):
        """Test ValueValidator.evaluate captures the predicate error"""
        validator = ValueValidator('explodes', _explode, 0.3)

        outcome = validator.evaluate(['x'])

        assert outcome.matched is False
        assert 'RuntimeError' in outcome.error

    def test_no_signals_scores_none(self):
        """Test a field matching nothing scores zero"""
        pattern = self.registry.get(SemanticCategory.EMAIL)

        result = self.scorer.score('foo', 'boolean', [True], None, pattern)

        assert result.confidence == 0.0
        assert result.level == ConfidenceLevel.NONE

    def test_invalid_weight_rejected(self):
        """Test out-of-range weights fail at construction"""
        with pytest.raises(ValueError):
            FormatHint('email', 1.5)


class TestCompositeScoring:
    """Test cases for composite (array structure) scoring"""

    def setup_method(self):
        """Set up test fixtures"""
        self.scorer = ConfidenceScorer()
        self.item_fields = [ItemField('rating', 'number'), ItemField('comment', 'string')]

    def test_reviews_structure_match(self):
        """Test reviews array with rating and comment items scores high"""
        result = self.scorer.score_composite(
            'reviews', self.item_fields, [{'rating': 5, 'comment': 'Great'}], REVIEWS_PATTERN
        )

        assert result.category == SemanticCategory.REVIEWS
        assert result.confidence == pytest.approx(1.0)
        assert result.level == ConfidenceLevel.HIGH

    def test_structure_is_all_or_nothing(self):
        """Test a missing required item field forfeits the structure weight"""
        result = self.scorer.score_composite(
            'reviews', [ItemField('rating', 'number')], [{'rating': 5}], REVIEWS_PATTERN
        )

        assert result.confidence == pytest.approx(0.6)
        assert result.signals[-1].matched is False

    def test_type_must_match_for_structure(self):
        """Test a sub-field with the right name but wrong type does not satisfy the structure"""
        result = self.scorer.score_composite(
            'reviews',
            [ItemField('rating', 'string'), ItemField('comment', 'string')],
            [{}],
            REVIEWS_PATTERN
        )

        assert result.signals[-1].matched is False

    def test_too_few_items_halves_score(self):
        """Test fewer items than min_items halves the achieved score"""
        result = self.scorer.score_composite('reviews', self.item_fields, [], REVIEWS_PATTERN)

        assert result.confidence == pytest.approx(0.5)
        assert result.level == ConfidenceLevel.MEDIUM
