"""
Unit tests for the semantic detector, detection cache and pattern registry
"""

import pytest

from field_analysis.semantic import (
    ConfidenceLevel,
    DetectionCache,
    ItemField,
    PatternRegistry,
    SchemaHints,
    SemanticCategory,
    SemanticConfig,
    SemanticDetector,
    get_best_match,
)
from field_analysis.semantic.cache import make_cache_key
from field_analysis.semantic.detector import SMART_DEFAULT, TYPE_BASED
from field_analysis.semantic.patterns import COMPOSITE_PATTERNS, STANDARD_PATTERNS


@pytest.fixture
def cache():
    return DetectionCache()


@pytest.fixture
def detector(cache):
    return SemanticDetector(SemanticConfig(), cache=cache)


class TestSemanticDetector:
    """Test cases for SemanticDetector.detect"""

    def test_price_scenario(self, detector):
        """Test numeric price field is detected with high confidence"""
        results = detector.detect('price', 'price', 'number', [29.99])

        assert results[0].category == SemanticCategory.PRICE
        assert results[0].confidence >= 0.75
        assert results[0].level == ConfidenceLevel.HIGH

    def test_at_most_three_sorted_results(self, detector):
        """Test results are capped and sorted by confidence descending"""
        results = detector.detect('name', 'name', 'string', ['Jane Doe'])

        assert 0 < len(results) <= 3
        confidences = [r.confidence for r in results]
        assert confidences == sorted(confidences, reverse=True)
        assert all(r.confidence > 0 for r in results)

    def test_ties_keep_registry_order(self, detector):
        """Test equal confidences keep pattern registration order"""
        # Only type and a string validator match: name, address and title tie
        results = detector.detect('x', 'x', 'string', ['Plain'])

        order = [p.category for p in STANDARD_PATTERNS]
        tied = [r for r in results if r.confidence == results[0].confidence]
        assert [order.index(r.category) for r in tied] == sorted(order.index(r.category) for r in tied)

    def test_max_alternatives_from_config(self, cache):
        """Test max_alternatives limits the result count"""
        detector = SemanticDetector(SemanticConfig(max_alternatives=1), cache=cache)

        results = detector.detect('price', 'price', 'number', [29.99])

        assert len(results) == 1

    def test_nothing_matches(self, detector):
        """Test an unrecognizable field yields no results"""
        assert detector.detect('foo', 'foo', 'boolean', [True]) == []

    def test_get_pattern(self, detector):
        """Test pattern lookup by category"""
        assert detector.get_pattern(SemanticCategory.EMAIL).category == SemanticCategory.EMAIL
        assert detector.get_pattern(SemanticCategory.REVIEWS) is None

    def test_pattern_inspection(self, detector):
        """Test standard and composite patterns are exposed in registry order"""
        standard = detector.standard_patterns()
        composite = detector.composite_patterns()

        assert [p.category for p in standard] == [p.category for p in STANDARD_PATTERNS]
        assert [c.category for c in composite] == [SemanticCategory.REVIEWS]
        assert standard is detector.registry.standard


class TestBestMatch:
    """Test cases for get_best_match"""

    def test_high_top_result_is_returned(self, detector):
        """Test a HIGH top result is the best match"""
        results = detector.detect('email', 'email', 'string', ['jane@example.com'])

        best = get_best_match(results)

        assert best is results[0]
        assert best.category == SemanticCategory.EMAIL

    def test_medium_top_result_is_ignored(self, detector):
        """Test weaker top results never become the best match"""
        results = detector.detect('id', 'id', 'string', ['abc'])

        assert results[0].level != ConfidenceLevel.HIGH
        assert get_best_match(results) is None

    def test_empty_results(self):
        """Test no results means no best match"""
        assert get_best_match([]) is None


class TestDetectionCache:
    """Test cases for detection memoization"""

    def test_identical_calls_return_same_object(self, detector, cache):
        """Test repeated calls hit the cache and return the same list"""
        first = detector.detect('price', 'price', 'number', [29.99])
        second = detector.detect('price', 'price', 'number', [29.99])

        assert first is second
        assert len(cache) == 1
        assert cache.hits == 1

    def test_key_covers_all_inputs(self, detector, cache):
        """Test differing samples or hints produce separate entries"""
        detector.detect('price', 'price', 'number', [29.99])
        detector.detect('price', 'price', 'number', [10])
        detector.detect('price', 'price', 'number', [29.99], SchemaHints(format='currency'))

        assert len(cache) == 3

    def test_key_distinguishes_numbers_and_bools(self):
        """Test 1 and True produce different keys"""
        assert make_cache_key('a', 'a', 'number', [1], None) != make_cache_key('a', 'a', 'number', [True], None)

    def test_non_string_dict_keys(self, detector, cache):
        """Test dict samples with non-string keys are cached without colliding"""
        mixed = detector.detect('a', 'a', 'object', [{1: 'x', 'b': 2}])
        int_key = detector.detect('a', 'a', 'object', [{1: 'x'}])
        str_key = detector.detect('a', 'a', 'object', [{'1': 'x'}])

        assert detector.detect('a', 'a', 'object', [{1: 'x', 'b': 2}]) is mixed
        assert int_key is not str_key
        assert len(cache) == 3

    def test_unhashable_samples(self, detector):
        """Test list and dict samples can be cached"""
        results = detector.detect('tags', 'tags', 'array', [['a', 'b'], {'x': 1}])

        assert results[0].category == SemanticCategory.TAGS

    def test_clear_cache(self, detector, cache):
        """Test clearing forces recomputation"""
        first = detector.detect('price', 'price', 'number', [29.99])

        removed = detector.clear_cache()
        second = detector.detect('price', 'price', 'number', [29.99])

        assert removed == 1
        assert first is not second
        assert [r.category for r in first] == [r.category for r in second]

    def test_shared_cache_across_detectors(self, cache):
        """Test an injected cache is shared by detectors"""
        first = SemanticDetector(SemanticConfig(), cache=cache).detect('email', 'email', 'string', [])
        second = SemanticDetector(SemanticConfig(), cache=cache).detect('email', 'email', 'string', [])

        assert first is second


class TestCompositeDetection:
    """Test cases for SemanticDetector.detect_composite"""

    def test_reviews_scenario(self, detector):
        """Test reviews array with rating and comment sub-fields"""
        result = detector.detect_composite(
            'product.reviews',
            'reviews',
            [ItemField('rating', 'number'), ItemField('comment', 'string')],
            [{'rating': 4, 'comment': 'Solid'}]
        )

        assert result.category == SemanticCategory.REVIEWS
        assert result.confidence >= 0.75

    def test_unrelated_array_scores_low(self, detector):
        """Test an unrelated array only earns the (halved) array type weight"""
        result = detector.detect_composite('items', 'items', [ItemField('sku', 'string')], [])

        assert result.confidence == pytest.approx(0.1)
        assert result.level == ConfidenceLevel.LOW
        assert get_best_match([result]) is None


class TestDescribe:
    """Test cases for SemanticMetadata summaries"""

    def test_smart_default(self, detector):
        """Test a HIGH match becomes a smart default with up to two alternatives"""
        results = detector.detect('price', 'price', 'number', [29.99])

        metadata = detector.describe(results)

        assert metadata.detected_category == SemanticCategory.PRICE
        assert metadata.applied_at == SMART_DEFAULT
        assert len(metadata.alternatives) <= 2
        assert all(alt['category'] != SemanticCategory.PRICE for alt in metadata.alternatives)

    def test_type_based_fallback(self, detector):
        """Test no HIGH match falls back to type-based rendering"""
        metadata = detector.describe(detector.detect('id', 'id', 'string', ['abc']))

        assert metadata.detected_category is None
        assert metadata.level == ConfidenceLevel.NONE
        assert metadata.applied_at == TYPE_BASED
        assert metadata.to_dict()['alternatives'] == []


class TestPatternRegistry:
    """Test cases for PatternRegistry"""

    def test_every_category_covered_once(self):
        """Test the default registry covers each category exactly once"""
        registry = PatternRegistry()
        categories = [p.category for p in registry.standard] + [c.category for c in registry.composite]

        assert sorted(c.value for c in categories) == sorted(c.value for c in SemanticCategory)

    def test_missing_category_rejected(self):
        """Test a registry without a category pattern fails fast"""
        with pytest.raises(ValueError, match="without a pattern"):
            PatternRegistry(standard=STANDARD_PATTERNS[1:])

    def test_duplicate_category_rejected(self):
        """Test a category registered twice fails fast"""
        with pytest.raises(ValueError, match="more than once"):
            PatternRegistry(standard=STANDARD_PATTERNS + STANDARD_PATTERNS[:1], composite=COMPOSITE_PATTERNS)

    def test_threshold_override(self):
        """Test per-category thresholds replace the defaults"""
        config = SemanticConfig(threshold_overrides={'price': (0.9, 0.6)})
        detector = SemanticDetector(config, cache=DetectionCache())

        results = detector.detect('price', 'price', 'number', [29.99])

        assert detector.get_pattern(SemanticCategory.PRICE).high_threshold == 0.9
        assert results[0].level == ConfidenceLevel.MEDIUM
