"""
Memoization cache for semantic detection results
"""
from typing import Any, Dict, List, Optional, Sequence
import json
import logging

from .models import ConfidenceResult, SchemaHints

logger = logging.getLogger(__name__)


def make_cache_key(
    field_path: str,
    field_name: str,
    field_type: str,
    sample_values: Sequence[Any],
    hints: Optional[SchemaHints]
) -> str:
    """
    Build a stable key from the full detection input

    Sample values may be unhashable (lists, dicts), so the key is a canonical
    JSON encoding. JSON keeps 1, 1.0 and true distinct. Dicts with
    non-string keys cannot always be key-sorted and would collide with their
    stringified twins, so those inputs are keyed by repr instead.
    """
    payload = [
        field_path,
        field_name,
        field_type,
        list(sample_values),
        hints.to_dict() if hints else None,
    ]
    if _has_non_string_keys(payload):
        return 'repr:' + repr(payload)
    return json.dumps(payload, sort_keys=True, default=repr)


def _has_non_string_keys(value: Any) -> bool:
    if isinstance(value, dict):
        return any(not isinstance(k, str) or _has_non_string_keys(v) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return any(_has_non_string_keys(v) for v in value)
    return False


class DetectionCache:
    """
    Session-scoped detection cache

    Unbounded within a session: field counts per API response are small, so
    entries are only dropped by clear().
    """

    def __init__(self):
        self._entries: Dict[str, List[ConfidenceResult]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[List[ConfidenceResult]]:
        results = self._entries.get(key)
        if results is None:
            self.misses += 1
        else:
            self.hits += 1
        return results

    def set(self, key: str, results: List[ConfidenceResult]) -> None:
        self._entries[key] = results

    def clear(self) -> int:
        """Drop every entry, returning how many were removed"""
        removed = len(self._entries)
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        logger.info(f"Detection cache cleared ({removed} entries)")
        return removed

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
