"""
Pattern building blocks
Each semantic category is described by name regexes, a type constraint,
value validators and schema format hints
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Pattern, Tuple
import logging
import re

from ..models import SemanticCategory

logger = logging.getLogger(__name__)

DEFAULT_HIGH_THRESHOLD = 0.75
DEFAULT_MEDIUM_THRESHOLD = 0.50


def _check_weight(owner: str, weight: float) -> None:
    if not 0.0 <= weight <= 1.0:
        raise ValueError(f"{owner} weight must be in [0, 1], got {weight}")


@dataclass(frozen=True)
class NamePattern:
    """Alternative regex for a field name"""
    regex: Pattern
    weight: float
    languages: Tuple[str, ...] = ('en',)

    def __post_init__(self):
        _check_weight(f"NamePattern {self.regex.pattern}", self.weight)

    def matches(self, field_name: str) -> bool:
        return self.regex.search(field_name) is not None


@dataclass(frozen=True)
class TypeConstraint:
    """Inferred types a field may have"""
    allowed_types: frozenset
    weight: float

    def __post_init__(self):
        _check_weight("TypeConstraint", self.weight)

    def matches(self, field_type: str) -> bool:
        return field_type in self.allowed_types


@dataclass(frozen=True)
class ValidatorOutcome:
    """Result of running a predicate over sample values"""
    matched: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ValueValidator:
    """Predicate run against sample values"""
    name: str
    predicate: Callable[[Any], bool]
    weight: float

    def __post_init__(self):
        _check_weight(f"ValueValidator {self.name}", self.weight)

    def evaluate(self, sample_values: Iterable[Any]) -> ValidatorOutcome:
        """
        Check whether any non-null sample satisfies the predicate

        A predicate that raises is treated as "did not match" for that value;
        the last error is reported on the outcome.
        """
        last_error = None
        for value in sample_values:
            if value is None:
                continue
            try:
                if self.predicate(value):
                    return ValidatorOutcome(matched=True, error=last_error)
            except Exception as e:
                last_error = f"{type(e).__name__}: {e}"
                logger.debug(f"Validator {self.name} raised on {value!r}: {last_error}")
        return ValidatorOutcome(matched=False, error=last_error)


@dataclass(frozen=True)
class FormatHint:
    """Schema format string that supports a category (e.g. 'email', 'date-time')"""
    format_name: str
    weight: float

    def __post_init__(self):
        _check_weight(f"FormatHint {self.format_name}", self.weight)


@dataclass(frozen=True)
class SemanticPattern:
    """Multi-signal definition of a semantic category"""
    category: SemanticCategory
    name_patterns: Tuple[NamePattern, ...]
    type_constraint: TypeConstraint
    value_validators: Tuple[ValueValidator, ...] = ()
    format_hints: Tuple[FormatHint, ...] = ()
    high_threshold: float = DEFAULT_HIGH_THRESHOLD
    medium_threshold: float = DEFAULT_MEDIUM_THRESHOLD

    def __post_init__(self):
        if not (0.0 <= self.medium_threshold <= self.high_threshold <= 1.0):
            raise ValueError(
                f"Invalid thresholds for {self.category.value}: "
                f"medium={self.medium_threshold}, high={self.high_threshold}"
            )

    @property
    def max_name_weight(self) -> float:
        return max((p.weight for p in self.name_patterns), default=0.0)


@dataclass(frozen=True)
class RequiredItemField:
    """Sub-field every matching array item structure must contain"""
    name_regex: Pattern
    type: str

    def matches(self, name: str, field_type: str) -> bool:
        return field_type == self.type and self.name_regex.search(name) is not None


@dataclass(frozen=True)
class CompositePattern:
    """Pattern matched against the structure of an array's item objects"""
    pattern: SemanticPattern
    required_item_fields: Tuple[RequiredItemField, ...] = field(default_factory=tuple)
    min_items: int = 1

    @property
    def category(self) -> SemanticCategory:
        return self.pattern.category


def name_pattern(regex: str, weight: float, languages: Tuple[str, ...] = ('en',)) -> NamePattern:
    """Compile a case-insensitive name pattern"""
    return NamePattern(regex=re.compile(regex, re.IGNORECASE), weight=weight, languages=languages)


def type_constraint(*allowed: str, weight: float) -> TypeConstraint:
    return TypeConstraint(allowed_types=frozenset(allowed), weight=weight)


def required_item_field(regex: str, field_type: str) -> RequiredItemField:
    return RequiredItemField(name_regex=re.compile(regex, re.IGNORECASE), type=field_type)
