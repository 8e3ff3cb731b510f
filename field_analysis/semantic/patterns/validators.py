"""
Value predicates shared by the semantic patterns
Each predicate takes a single (non-null) sample value and returns a bool
"""
from typing import Any
import re

CURRENCY_AMOUNT = re.compile(r'\$?[\d,]+(\.\d{1,2})?')
ISO_CURRENCY_CODE = re.compile(r'[A-Z]{3}')
PRODUCT_CODE = re.compile(r'[A-Za-z0-9\-_]{4,20}')
EMAIL = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
PHONE = re.compile(r'\+?[\d\s\-()]{7,20}')
UUID_V4 = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}', re.IGNORECASE)

ISO_DATE = re.compile(r'\d{4}-\d{2}-\d{2}')
US_DATE = re.compile(r'\d{1,2}/\d{1,2}/\d{4}')
EU_DATE = re.compile(r'\d{1,2}\.\d{1,2}\.\d{4}')
ISO_TIMESTAMP = re.compile(r'\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(:\d{2})?(\.\d{1,6})?(Z|[+-]\d{2}:?\d{2})?')

STATUS_VALUES = re.compile(
    r'(active|inactive|pending|completed|draft|published|archived|deleted|approved|rejected|'
    r'processing|cancelled|shipped|delivered|paid|unpaid|open|closed|enabled|disabled)',
    re.IGNORECASE
)

IMAGE_EXTENSIONS = re.compile(r'\.(jpg|jpeg|png|gif|webp|svg|bmp|ico)(\?.*)?$', re.IGNORECASE)
IMAGE_HOSTS = re.compile(
    r'\b(cloudinary|imgix|unsplash|imgur|flickr|staticflickr|googleusercontent|amazonaws|cloudfront|cdn)\b',
    re.IGNORECASE
)
VIDEO_EXTENSIONS = re.compile(r'\.(mp4|webm|mov|avi|mkv|m4v|flv)(\?.*)?$', re.IGNORECASE)
VIDEO_HOSTS = re.compile(r'\b(youtube|vimeo|youtu\.be|wistia|dailymotion|vidyard)\b', re.IGNORECASE)
AUDIO_EXTENSIONS = re.compile(r'\.(mp3|wav|ogg|flac|aac|m4a|wma|opus)(\?.*)?$', re.IGNORECASE)
AUDIO_HOSTS = re.compile(
    r'\b(soundcloud|spotify|anchor|castbox|podbean|buzzsprout|transistor)\b',
    re.IGNORECASE
)


def is_number(value: Any) -> bool:
    """JSON number check (bool is not a number here)"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_http_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return trimmed.startswith('http://') or trimmed.startswith('https://')


# Commerce

def is_positive_number(value: Any) -> bool:
    """19.99, "$19.99", "1,234.56" """
    if is_number(value):
        return value >= 0
    if isinstance(value, str):
        return CURRENCY_AMOUNT.fullmatch(value.strip()) is not None
    return False


def is_iso_currency_code(value: Any) -> bool:
    return isinstance(value, str) and ISO_CURRENCY_CODE.fullmatch(value.strip()) is not None


def is_product_code(value: Any) -> bool:
    """Alphanumeric code mixing letters and digits, or segmented with - / _"""
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    if PRODUCT_CODE.fullmatch(trimmed) is None:
        return False
    has_letter = re.search(r'[a-zA-Z]', trimmed) is not None
    has_digit = re.search(r'\d', trimmed) is not None
    has_separator = re.search(r'[-_]', trimmed) is not None
    return (has_letter and has_digit) or (has_separator and (has_letter or has_digit))


def is_non_negative_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return value >= 0


# Identity

def is_email_format(value: Any) -> bool:
    return isinstance(value, str) and EMAIL.fullmatch(value.strip()) is not None


def is_phone_format(value: Any) -> bool:
    return isinstance(value, str) and PHONE.fullmatch(value.strip()) is not None


def is_uuid_v4(value: Any) -> bool:
    return isinstance(value, str) and UUID_V4.fullmatch(value.strip()) is not None


def is_name_value(value: Any) -> bool:
    """Non-empty string of reasonable name length"""
    if not isinstance(value, str):
        return False
    return 0 < len(value.strip()) <= 100


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_url(value: Any) -> bool:
    return _is_http_url(value)


# Media

def is_image_url(value: Any) -> bool:
    if not _is_http_url(value):
        return False
    trimmed = value.strip()
    return IMAGE_EXTENSIONS.search(trimmed) is not None or IMAGE_HOSTS.search(trimmed) is not None


def is_video_url(value: Any) -> bool:
    if not _is_http_url(value):
        return False
    trimmed = value.strip()
    return VIDEO_EXTENSIONS.search(trimmed) is not None or VIDEO_HOSTS.search(trimmed) is not None


def is_audio_url(value: Any) -> bool:
    if not _is_http_url(value):
        return False
    trimmed = value.strip()
    return AUDIO_EXTENSIONS.search(trimmed) is not None or AUDIO_HOSTS.search(trimmed) is not None


# Engagement / content

def is_valid_rating(value: Any) -> bool:
    """Common scales: 0-5, 0-10, 0-100"""
    return is_number(value) and 0 <= value <= 100


def is_string_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0 and all(isinstance(item, str) for item in value)


def is_status_value(value: Any) -> bool:
    return isinstance(value, str) and STATUS_VALUES.fullmatch(value.strip()) is not None


def is_long_string(value: Any) -> bool:
    """Descriptions are typically longer than 20 characters"""
    return isinstance(value, str) and len(value.strip()) > 20


# Temporal

def is_date_format(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return any(p.fullmatch(trimmed) is not None for p in (ISO_DATE, US_DATE, EU_DATE))


def is_timestamp_format(value: Any) -> bool:
    """ISO 8601 string or a 10/13 digit unix timestamp"""
    if isinstance(value, str):
        return ISO_TIMESTAMP.fullmatch(value.strip()) is not None
    if is_number(value):
        if isinstance(value, float):
            if not value.is_integer():
                return False
            value = int(value)
        return len(str(value)) in (10, 13)
    return False


# Spatial

def is_coordinate_value(value: Any) -> bool:
    """Single lat/lng number or a "lat,lng" string"""
    if is_number(value):
        return -180 <= value <= 180
    if isinstance(value, str):
        parts = value.split(',')
        if len(parts) != 2:
            return False
        try:
            lat, lng = (float(p.strip()) for p in parts)
        except ValueError:
            return False
        return -90 <= lat <= 90 and -180 <= lng <= 180
    return False
