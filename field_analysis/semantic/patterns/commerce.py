"""
Commerce patterns: price, currency code, SKU, quantity
"""
from ..models import SemanticCategory
from .base import SemanticPattern, ValueValidator, FormatHint, name_pattern, type_constraint
from . import validators


PRICE_PATTERN = SemanticPattern(
    category=SemanticCategory.PRICE,
    name_patterns=(
        name_pattern(
            r'\b(price|cost|amount|fee|total|subtotal|precio|costo|importe|prix|cout|montant|preis|kosten|betrag)\b',
            0.4, ('en', 'es', 'fr', 'de')
        ),
    ),
    # 19.99 or "$19.99"
    type_constraint=type_constraint('number', 'string', weight=0.2),
    value_validators=(
        ValueValidator('isPositiveNumber', validators.is_positive_number, 0.25),
    ),
    format_hints=(
        FormatHint('currency', 0.15),
        FormatHint('decimal', 0.1),
    ),
)

CURRENCY_CODE_PATTERN = SemanticPattern(
    category=SemanticCategory.CURRENCY_CODE,
    name_patterns=(
        name_pattern(r'\b(currency|curr|currency_code|currency_id)\b', 0.4),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isISOCurrencyCode', validators.is_iso_currency_code, 0.3),
    ),
    format_hints=(
        FormatHint('currency', 0.1),
    ),
)

SKU_PATTERN = SemanticPattern(
    category=SemanticCategory.SKU,
    name_patterns=(
        name_pattern(r'\b(sku|product_code|item_code|article|upc|ean|part_number|item_id)\b', 0.4),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isProductCode', validators.is_product_code, 0.3),
    ),
)

QUANTITY_PATTERN = SemanticPattern(
    category=SemanticCategory.QUANTITY,
    name_patterns=(
        name_pattern(r'\b(quantity|qty|count|stock|inventory|amount|num|number_of)\b', 0.4),
    ),
    type_constraint=type_constraint('number', 'integer', weight=0.2),
    value_validators=(
        ValueValidator('isNonNegativeInteger', validators.is_non_negative_integer, 0.3),
    ),
    format_hints=(
        FormatHint('int32', 0.1),
        FormatHint('int64', 0.1),
    ),
)

COMMERCE_PATTERNS = (
    PRICE_PATTERN,
    CURRENCY_CODE_PATTERN,
    SKU_PATTERN,
    QUANTITY_PATTERN,
)
