"""
Integration tests for the field analysis pipeline
"""

import json

import pytest

from field_analysis import AnalysisConfig, FieldAnalysisPipeline, RawField
from field_analysis.analysis import FieldDescriptor, ImportanceTier
from field_analysis.semantic import DetectionCache, ItemField, SemanticCategory


@pytest.fixture
def pipeline():
    return FieldAnalysisPipeline(AnalysisConfig(), cache=DetectionCache())


def contact_fields():
    return [
        RawField('email', 'email', 'string', ['jane@example.com']),
        RawField('phone', 'phone', 'string', ['+1 555 123 4567']),
        RawField('address', 'address', 'string', ['1 Main St']),
        RawField('id', 'id', 'string', ['a']),
        RawField('flag', 'flag', 'boolean', [True]),
        RawField('enabled', 'enabled', 'boolean', [False]),
        RawField('visible', 'visible', 'boolean', [True]),
        RawField('archived', 'archived', 'boolean', [False]),
    ]


class TestFieldAnalysisPipeline:
    """Test cases for FieldAnalysisPipeline"""

    def test_detected_categories_feed_grouping(self, pipeline):
        """Test HIGH detections drive semantic clustering"""
        report = pipeline.analyze(contact_fields())

        assert report.semantics['email'].detected_category == SemanticCategory.EMAIL
        assert report.semantics['phone'].detected_category == SemanticCategory.PHONE
        assert report.semantics['address'].detected_category == SemanticCategory.ADDRESS
        assert report.semantics['flag'].detected_category is None

        labels = [g.label for g in report.grouping.groups]
        assert labels == ['Contact']
        assert len(report.grouping.ungrouped) == 5

    def test_importance_per_path(self, pipeline):
        """Test every field gets an importance score"""
        report = pipeline.analyze(contact_fields())

        assert set(report.importance) == {f.path for f in contact_fields()}
        assert report.importance['id'].tier == ImportanceTier.TERTIARY

    def test_report_is_json_serializable(self, pipeline):
        """Test to_dict output encodes as JSON"""
        report = pipeline.analyze(contact_fields())

        data = json.loads(json.dumps(report.to_dict()))

        assert data['semantics']['email']['detected_category'] == 'email'
        assert data['grouping']['groups'][0]['type'] == 'semantic'

    def test_composite_detection_for_arrays(self, pipeline):
        """Test arrays of objects are matched against composite patterns"""
        reviews = RawField(
            'product.reviews',
            'reviews',
            'array',
            [{'rating': 5, 'comment': 'Great'}],
            item_fields=[ItemField('rating', 'number'), ItemField('comment', 'string')]
        )

        report = pipeline.analyze([reviews])

        assert report.detections['product.reviews'][0].category == SemanticCategory.REVIEWS
        assert report.semantics['product.reviews'].detected_category == SemanticCategory.REVIEWS
        assert len(report.detections['product.reviews']) <= 3

    def test_composite_detection_is_not_cached(self, pipeline):
        """Test only standard detection lands in the cache for array fields"""
        reviews = RawField(
            'reviews',
            'reviews',
            'array',
            [{'rating': 5, 'comment': 'Great'}],
            item_fields=[ItemField('rating', 'number'), ItemField('comment', 'string')]
        )

        first = pipeline.analyze([reviews])
        second = pipeline.analyze([reviews])

        assert len(pipeline.detector.cache) == 1
        assert first.detections['reviews'] is not second.detections['reviews']
        assert first.detections['reviews'][0].category == second.detections['reviews'][0].category

    def test_upstream_category_wins(self, pipeline):
        """Test a category set on the raw field overrides detection for importance"""
        plain = RawField('headline_text', 'headline_text', 'string', [])
        stamped = RawField('headline_text', 'headline_text', 'string', [],
                           semantic_category=SemanticCategory.TITLE)

        plain_score = pipeline.analyze([plain]).importance['headline_text']
        stamped_score = pipeline.analyze([stamped]).importance['headline_text']

        assert stamped_score.score > plain_score.score

    def test_detection_results_are_cached(self, pipeline):
        """Test repeated analysis reuses cached detections"""
        pipeline.analyze(contact_fields())
        entries = len(pipeline.detector.cache)

        pipeline.analyze(contact_fields())

        assert len(pipeline.detector.cache) == entries
        assert pipeline.detector.cache.hits >= entries

    def test_analyze_fields_with_descriptors(self, pipeline):
        """Test importance and grouping for pre-classified descriptors"""
        names = ['billing_address', 'billing_city', 'billing_zip', 'title', 'sku', 'rating', 'status', 'tags']
        descriptors = [
            FieldDescriptor(path=n, name=n, position=i, total_fields=len(names))
            for i, n in enumerate(names)
        ]

        result = pipeline.analyze_fields(descriptors)

        assert [g.label for g in result.grouping.groups] == ['Billing']
        assert set(result.importance) == set(names)
