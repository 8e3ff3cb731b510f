"""
FieldAnalysisPipeline - semantic detection, importance and grouping in one pass
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import logging

from .analysis import (
    AnalysisResult,
    FieldDescriptor,
    GroupingAnalyzer,
    GroupingResult,
    ImportanceScore,
    ImportanceScorer,
)
from .config import AnalysisConfig
from .semantic import (
    ConfidenceResult,
    DetectionCache,
    ItemField,
    SchemaHints,
    SemanticCategory,
    SemanticDetector,
    SemanticMetadata,
)

logger = logging.getLogger(__name__)


@dataclass
class RawField:
    """Field as handed over by the schema parser, before classification"""
    path: str
    name: str
    inferred_type: str
    sample_values: List[Any] = field(default_factory=list)
    hints: Optional[SchemaHints] = None
    # Sub-fields of array items, for composite detection
    item_fields: List[ItemField] = field(default_factory=list)
    # Category chosen upstream (e.g. a user override); wins over detection
    semantic_category: Optional[SemanticCategory] = None


@dataclass
class FieldAnalysisReport:
    """Everything the rendering layer needs for one field list"""
    semantics: Dict[str, SemanticMetadata]
    detections: Dict[str, List[ConfidenceResult]]
    importance: Dict[str, ImportanceScore]
    grouping: GroupingResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'semantics': {path: meta.to_dict() for path, meta in self.semantics.items()},
            'detections': {
                path: [r.to_dict() for r in results] for path, results in self.detections.items()
            },
            'importance': {path: score.to_dict() for path, score in self.importance.items()},
            'grouping': self.grouping.to_dict()
        }


class FieldAnalysisPipeline:
    """
    Orchestrates classification of one analysis pass (one API response)

    Responsibilities:
    - Detect semantics per field (composite detection for arrays of objects)
    - Stamp the smart-default category onto each field descriptor
    - Score importance per field path
    - Group the field list into sections
    """

    def __init__(self, config: Optional[AnalysisConfig] = None, cache: Optional[DetectionCache] = None):
        """
        Initialize the pipeline

        Args:
            config: AnalysisConfig instance (defaults to env-based config)
            cache: Detection cache shared across passes of one session
        """
        self.config = config or AnalysisConfig.from_env()
        self.detector = SemanticDetector(self.config.semantic, cache=cache)
        self.importance_scorer = ImportanceScorer(self.config.importance)
        self.grouping_analyzer = GroupingAnalyzer(self.config.grouping)

        logger.info("FieldAnalysisPipeline initialized")

    def analyze(self, raw_fields: Sequence[RawField]) -> FieldAnalysisReport:
        """
        Classify a flat field list

        Args:
            raw_fields: Fields in display order

        Returns:
            FieldAnalysisReport keyed by field path
        """
        total = len(raw_fields)
        semantics: Dict[str, SemanticMetadata] = {}
        detections: Dict[str, List[ConfidenceResult]] = {}
        descriptors: List[FieldDescriptor] = []

        for position, raw in enumerate(raw_fields):
            results = self._detect(raw)
            metadata = self.detector.describe(results)
            semantics[raw.path] = metadata
            detections[raw.path] = results
            descriptors.append(FieldDescriptor(
                path=raw.path,
                name=raw.name,
                inferred_type=raw.inferred_type,
                sample_values=tuple(raw.sample_values),
                semantic_category=raw.semantic_category or metadata.detected_category,
                position=position,
                total_fields=total
            ))

        analysis = self.analyze_fields(descriptors)
        classified = sum(1 for m in semantics.values() if m.detected_category is not None)
        logger.info(f"Analysis complete: {classified}/{total} fields classified, "
                    f"{len(analysis.grouping.groups)} groups")

        return FieldAnalysisReport(
            semantics=semantics,
            detections=detections,
            importance=analysis.importance,
            grouping=analysis.grouping
        )

    def analyze_fields(self, fields: Sequence[FieldDescriptor]) -> AnalysisResult:
        """Importance and grouping for descriptors whose categories are already set"""
        importance = {f.path: self.importance_scorer.score(f) for f in fields}
        grouping = self.grouping_analyzer.analyze(fields)
        return AnalysisResult(importance=importance, grouping=grouping)

    def _detect(self, raw: RawField) -> List[ConfidenceResult]:
        """
        Standard detection, plus composite detection for arrays with item fields

        Only standard detection is memoized; composite detection reruns on
        every pass (one structural check per array field).
        """
        results = self.detector.detect(raw.path, raw.name, raw.inferred_type, raw.sample_values, raw.hints)
        if raw.inferred_type != 'array' or not raw.item_fields:
            return results

        composite = self.detector.detect_composite(raw.path, raw.name, raw.item_fields, raw.sample_values)
        if composite is None:
            return results
        # Composite match competes with the standard results; cached lists stay untouched
        merged = sorted([composite, *results], key=lambda r: r.confidence, reverse=True)
        return merged[:self.config.semantic.max_alternatives]
