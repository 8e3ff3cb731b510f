"""
Spatial patterns: geographic coordinates
"""
from ..models import SemanticCategory
from .base import SemanticPattern, ValueValidator, name_pattern, type_constraint
from . import validators


GEO_PATTERN = SemanticPattern(
    category=SemanticCategory.GEO,
    name_patterns=(
        name_pattern(
            r'\b(lat|lng|lon|latitude|longitude|coords?|coordinates?|geo|geolocation|geopoint|latlng|position|'
            r'ubicacion|koordinaten|coordenadas|coordonnees|breitengrad|laengengrad|localizacao)\b',
            0.4, ('en', 'es', 'fr', 'de', 'pt')
        ),
    ),
    type_constraint=type_constraint('number', 'string', 'object', weight=0.2),
    value_validators=(
        ValueValidator('isCoordinateValue', validators.is_coordinate_value, 0.25),
    ),
)

SPATIAL_PATTERNS = (
    GEO_PATTERN,
)
