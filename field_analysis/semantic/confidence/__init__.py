"""
Confidence scoring
"""
from .scorer import ConfidenceScorer, determine_level

__all__ = ['ConfidenceScorer', 'determine_level']
