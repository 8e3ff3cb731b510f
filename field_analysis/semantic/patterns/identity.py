"""
Identity patterns: email, phone, UUID, name, address, URL
"""
from ..models import SemanticCategory
from .base import SemanticPattern, ValueValidator, FormatHint, name_pattern, type_constraint
from . import validators


EMAIL_PATTERN = SemanticPattern(
    category=SemanticCategory.EMAIL,
    name_patterns=(
        name_pattern(r'\b(email|e_mail|email_address|correo|courriel|mail)\b', 0.4, ('en', 'es', 'fr')),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isEmailFormat', validators.is_email_format, 0.25),
    ),
    format_hints=(
        FormatHint('email', 0.15),
    ),
)

PHONE_PATTERN = SemanticPattern(
    category=SemanticCategory.PHONE,
    name_patterns=(
        name_pattern(
            r'\b(phone|tel|telephone|mobile|cell|telefono|telefon|phone_number|cellphone)\b',
            0.4, ('en', 'es', 'de')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isPhoneFormat', validators.is_phone_format, 0.25),
    ),
    format_hints=(
        FormatHint('phone', 0.15),
    ),
)

UUID_PATTERN = SemanticPattern(
    category=SemanticCategory.UUID,
    name_patterns=(
        name_pattern(r'\b(uuid|guid|unique_id)\b', 0.4),
        # bare 'id' relies on value validation to reach high confidence
        name_pattern(r'\bid\b', 0.2),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isUUIDv4Format', validators.is_uuid_v4, 0.3),
    ),
    format_hints=(
        FormatHint('uuid', 0.1),
    ),
)

NAME_PATTERN = SemanticPattern(
    category=SemanticCategory.NAME,
    name_patterns=(
        name_pattern(
            r'\b(name|nombre|nom|fullname|full_name|username|first_name|last_name|firstname|lastname|display_name)\b',
            0.4, ('en', 'es', 'fr')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isNonEmptyString', validators.is_name_value, 0.3),
    ),
)

ADDRESS_PATTERN = SemanticPattern(
    category=SemanticCategory.ADDRESS,
    name_patterns=(
        name_pattern(
            r'\b(address|street|city|zip|postal|direccion|adresse|location|addr|street_address|postal_code|zip_code)\b',
            0.4, ('en', 'es', 'fr', 'de')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isString', validators.is_non_empty_string, 0.3),
    ),
)

URL_PATTERN = SemanticPattern(
    category=SemanticCategory.URL,
    name_patterns=(
        name_pattern(r'\b(url|link|href|website|webpage|uri|homepage|web_url)\b', 0.4),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isURLFormat', validators.is_url, 0.25),
    ),
    format_hints=(
        FormatHint('uri', 0.1),
        FormatHint('url', 0.1),
    ),
)

IDENTITY_PATTERNS = (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    UUID_PATTERN,
    NAME_PATTERN,
    ADDRESS_PATTERN,
    URL_PATTERN,
)
