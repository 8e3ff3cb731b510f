"""
Media patterns: image, video, thumbnail, avatar, audio
"""
from ..models import SemanticCategory
from .base import SemanticPattern, ValueValidator, FormatHint, name_pattern, type_constraint
from . import validators


def _uri_hint() -> tuple:
    return (FormatHint('uri', 0.15),)


IMAGE_PATTERN = SemanticPattern(
    category=SemanticCategory.IMAGE,
    name_patterns=(
        name_pattern(r'\b(image|img|photo|picture|imagen|bild|pic|icon|logo)\b', 0.4, ('en', 'es', 'de')),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isImageURL', validators.is_image_url, 0.25),
    ),
    format_hints=_uri_hint(),
)

VIDEO_PATTERN = SemanticPattern(
    category=SemanticCategory.VIDEO,
    name_patterns=(
        name_pattern(r'\b(video|movie|clip|film|media_url|video_url)\b', 0.4),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isVideoURL', validators.is_video_url, 0.25),
    ),
    format_hints=_uri_hint(),
)

THUMBNAIL_PATTERN = SemanticPattern(
    category=SemanticCategory.THUMBNAIL,
    name_patterns=(
        name_pattern(
            r'\b(thumb|thumbnail|preview|miniatura|thumb_url|thumbnail_url|preview_image)\b',
            0.4, ('en', 'es')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isImageURL', validators.is_image_url, 0.25),
    ),
    format_hints=_uri_hint(),
)

AVATAR_PATTERN = SemanticPattern(
    category=SemanticCategory.AVATAR,
    name_patterns=(
        name_pattern(
            r'\b(avatar|profile_pic|profile_image|user_image|foto_perfil|profile_photo|user_avatar)\b',
            0.4, ('en', 'es')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isImageURL', validators.is_image_url, 0.25),
    ),
    format_hints=_uri_hint(),
)

AUDIO_PATTERN = SemanticPattern(
    category=SemanticCategory.AUDIO,
    name_patterns=(
        name_pattern(
            r'\b(audio|sound|podcast|recording|voice|track|song|music|sonido|son|klang|som|'
            r'audio_url|audio_file|audio_link)\b',
            0.4, ('en', 'es', 'fr', 'de', 'pt')
        ),
    ),
    type_constraint=type_constraint('string', weight=0.2),
    value_validators=(
        ValueValidator('isAudioURL', validators.is_audio_url, 0.25),
    ),
    format_hints=_uri_hint(),
)

MEDIA_PATTERNS = (
    IMAGE_PATTERN,
    VIDEO_PATTERN,
    THUMBNAIL_PATTERN,
    AVATAR_PATTERN,
    AUDIO_PATTERN,
)
