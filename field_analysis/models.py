"""Request and response models for the Field Analysis API"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .pipeline import RawField
from .semantic import ItemField, SchemaHints, SemanticCategory


class SchemaHintsModel(BaseModel):
    """Hints sourced from an OpenAPI schema"""
    format: Optional[str] = None
    description: Optional[str] = None

    def to_hints(self) -> SchemaHints:
        return SchemaHints(format=self.format, description=self.description)


class ItemFieldModel(BaseModel):
    """Sub-field of an array item"""
    name: str
    type: str

    def to_item_field(self) -> ItemField:
        return ItemField(name=self.name, type=self.type)


class DetectRequest(BaseModel):
    """Semantic detection for a single field"""
    path: str
    name: str
    type: str = Field(..., description="Inferred type: string, number, integer, boolean, array, object")
    sampleValues: List[Any] = Field(default_factory=list)
    hints: Optional[SchemaHintsModel] = None


class CompositeRequest(BaseModel):
    """Composite detection for an array-of-objects field"""
    path: str
    name: str
    itemFields: List[ItemFieldModel] = Field(default_factory=list)
    sampleItems: List[Any] = Field(default_factory=list)


class FieldModel(BaseModel):
    """One field of a response, in display order"""
    path: str
    name: str
    type: str
    sampleValues: List[Any] = Field(default_factory=list)
    hints: Optional[SchemaHintsModel] = None
    itemFields: List[ItemFieldModel] = Field(default_factory=list)
    semanticCategory: Optional[SemanticCategory] = None

    def to_raw_field(self) -> RawField:
        return RawField(
            path=self.path,
            name=self.name,
            inferred_type=self.type,
            sample_values=list(self.sampleValues),
            hints=self.hints.to_hints() if self.hints else None,
            item_fields=[f.to_item_field() for f in self.itemFields],
            semantic_category=self.semanticCategory
        )


class AnalyzeRequest(BaseModel):
    """Full analysis of a field list"""
    fields: List[FieldModel]


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str
    timestamp: str
    cache: Dict[str, int] = Field(
        default_factory=dict,
        description="Detection cache statistics (entries, hits, misses)"
    )
