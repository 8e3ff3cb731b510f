"""
Temporal patterns: date, timestamp
"""
from ..models import SemanticCategory
from .base import SemanticPattern, ValueValidator, FormatHint, name_pattern, type_constraint
from . import validators


DATE_PATTERN = SemanticPattern(
    category=SemanticCategory.DATE,
    name_patterns=(
        name_pattern(
            r'\b(date|fecha|datum|created_at|updated_at|created_date|birth_date|start_date|end_date|due_date)\b',
            0.4, ('en', 'es', 'fr', 'de')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isDateFormat', validators.is_date_format, 0.25),
    ),
    format_hints=(
        FormatHint('date', 0.15),
    ),
)

TIMESTAMP_PATTERN = SemanticPattern(
    category=SemanticCategory.TIMESTAMP,
    name_patterns=(
        name_pattern(
            r'\b(timestamp|datetime|time|created_at|updated_at|modified_at|last_modified|expires_at|published_at)\b',
            0.4
        ),
    ),
    type_constraint=type_constraint('string', 'number', weight=0.2),
    value_validators=(
        ValueValidator('isTimestampFormat', validators.is_timestamp_format, 0.25),
    ),
    format_hints=(
        FormatHint('date-time', 0.15),
    ),
)

TEMPORAL_PATTERNS = (
    DATE_PATTERN,
    TIMESTAMP_PATTERN,
)
