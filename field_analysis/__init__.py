"""
Field Analysis - semantic classification, importance scoring and grouping
for API response fields
"""
from .config import AnalysisConfig
from .pipeline import FieldAnalysisPipeline, FieldAnalysisReport, RawField

__all__ = ['AnalysisConfig', 'FieldAnalysisPipeline', 'FieldAnalysisReport', 'RawField']
