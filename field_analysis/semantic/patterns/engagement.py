"""
Engagement and content patterns: rating, reviews (composite), tags, status,
title, description
"""
from ..models import SemanticCategory
from .base import (
    SemanticPattern,
    CompositePattern,
    ValueValidator,
    FormatHint,
    name_pattern,
    type_constraint,
    required_item_field,
)
from . import validators


RATING_PATTERN = SemanticPattern(
    category=SemanticCategory.RATING,
    name_patterns=(
        name_pattern(
            r'\b(rating|score|stars|puntuacion|note|bewertung|rate|average_rating)\b',
            0.4, ('en', 'es', 'fr', 'de')
        ),
    ),
    type_constraint=type_constraint('number', weight=0.2),
    value_validators=(
        ValueValidator('isValidRating', validators.is_valid_rating, 0.25),
    ),
    format_hints=(
        FormatHint('float', 0.1),
        FormatHint('double', 0.1),
    ),
)

# Arrays of objects that each carry a rating-like and a comment-like field
REVIEWS_PATTERN = CompositePattern(
    pattern=SemanticPattern(
        category=SemanticCategory.REVIEWS,
        name_patterns=(
            name_pattern(
                r'\b(reviews?|comments?|feedback|opiniones|avis|bewertungen|testimonials?)\b',
                0.4, ('en', 'es', 'fr', 'de')
            ),
        ),
        type_constraint=type_constraint('array', weight=0.2),
    ),
    required_item_fields=(
        required_item_field(r'\b(rating|score|stars)\b', 'number'),
        required_item_field(r'\b(comment|text|body|content|review|message)\b', 'string'),
    ),
    min_items=1,
)

TAGS_PATTERN = SemanticPattern(
    category=SemanticCategory.TAGS,
    name_patterns=(
        name_pattern(r'\b(tags?|labels?|categories?|keywords?|etiquetas?|topics?)\b', 0.4, ('en', 'es')),
    ),
    type_constraint=type_constraint('array', weight=0.2),
    value_validators=(
        ValueValidator('isStringArray', validators.is_string_list, 0.3),
    ),
)

STATUS_PATTERN = SemanticPattern(
    category=SemanticCategory.STATUS,
    name_patterns=(
        name_pattern(
            r'\b(status|state|stage|estado|statut|zustand|condition)\b',
            0.4, ('en', 'es', 'fr', 'de')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isStatusValue', validators.is_status_value, 0.3),
    ),
)

TITLE_PATTERN = SemanticPattern(
    category=SemanticCategory.TITLE,
    name_patterns=(
        name_pattern(
            r'\b(title|headline|subject|heading|titulo|titre|titel|name)\b',
            0.4, ('en', 'es', 'fr', 'de')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isNonEmptyString', validators.is_non_empty_string, 0.3),
    ),
)

DESCRIPTION_PATTERN = SemanticPattern(
    category=SemanticCategory.DESCRIPTION,
    name_patterns=(
        name_pattern(
            r'\b(description|desc|summary|content|body|text|descripcion|beschreibung|abstract|details)\b',
            0.4, ('en', 'es', 'de')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isLongerString', validators.is_long_string, 0.3),
    ),
)

ENGAGEMENT_PATTERNS = (
    RATING_PATTERN,
    TAGS_PATTERN,
    STATUS_PATTERN,
    TITLE_PATTERN,
    DESCRIPTION_PATTERN,
)

ENGAGEMENT_COMPOSITE_PATTERNS = (
    REVIEWS_PATTERN,
)
