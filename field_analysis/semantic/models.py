"""
Data models for semantic field detection
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Optional


class SemanticCategory(str, Enum):
    """Domain meaning that can be assigned to a field"""
    # Commerce
    PRICE = "price"
    CURRENCY_CODE = "currency_code"
    SKU = "sku"
    QUANTITY = "quantity"
    # Identity
    EMAIL = "email"
    PHONE = "phone"
    UUID = "uuid"
    NAME = "name"
    ADDRESS = "address"
    URL = "url"
    # Media
    IMAGE = "image"
    VIDEO = "video"
    THUMBNAIL = "thumbnail"
    AVATAR = "avatar"
    AUDIO = "audio"
    # Engagement
    RATING = "rating"
    REVIEWS = "reviews"
    TAGS = "tags"
    STATUS = "status"
    # Content
    TITLE = "title"
    DESCRIPTION = "description"
    # Temporal
    DATE = "date"
    TIMESTAMP = "timestamp"
    # Spatial
    GEO = "geo"


class ConfidenceLevel(str, Enum):
    """Discretized confidence band"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


@dataclass(frozen=True)
class SchemaHints:
    """Optional hints sourced from an external (OpenAPI) schema"""
    format: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'format': self.format, 'description': self.description}


@dataclass(frozen=True)
class ItemField:
    """An inferred sub-field of an array item object"""
    name: str
    type: str


@dataclass
class SignalMatch:
    """One piece of evidence that contributed to a confidence score"""
    name: str
    matched: bool
    weight: float  # Maximum possible contribution
    contribution: float  # Actual contribution (weight if matched, 0 if not)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'matched': self.matched,
            'weight': round(self.weight, 3),
            'contribution': round(self.contribution, 3)
        }


@dataclass
class ConfidenceResult:
    """Result of scoring a single field against a single pattern"""
    category: SemanticCategory
    confidence: float
    level: ConfidenceLevel
    signals: List[SignalMatch] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category.value,
            'confidence': round(self.confidence, 3),
            'level': self.level.value,
            'signals': [s.to_dict() for s in self.signals]
        }


@dataclass
class SemanticMetadata:
    """Per-field semantic summary handed to the rendering layer"""
    detected_category: Optional[SemanticCategory]
    confidence: float
    level: ConfidenceLevel
    applied_at: str  # 'smart-default' or 'type-based'
    alternatives: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'detected_category': self.detected_category.value if self.detected_category else None,
            'confidence': round(self.confidence, 3),
            'level': self.level.value,
            'applied_at': self.applied_at,
            'alternatives': [
                {'category': alt['category'].value, 'confidence': round(alt['confidence'], 3)}
                for alt in self.alternatives
            ]
        }
