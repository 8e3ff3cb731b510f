"""
Field grouping
Prefix-based groups and semantic clusters with orphan prevention
"""
from typing import Dict, List, Optional, Sequence, Set
import logging
import re

from ..semantic.models import SemanticCategory
from .config import GroupingConfig
from .models import FieldDescriptor, FieldGroup, GroupingResult, PrefixGroup, SemanticCluster

logger = logging.getLogger(__name__)

SEPARATORS = re.compile(r'[_.]')


class GroupingAnalyzer:
    """Groups a flat field list into logical sections"""

    def __init__(self, config: Optional[GroupingConfig] = None):
        self.config = config or GroupingConfig()
        self._suffixes = {s.lower() for s in self.config.suffixes_to_strip}

    def analyze(self, fields: Sequence[FieldDescriptor]) -> GroupingResult:
        """
        Group fields into prefix groups and semantic clusters

        Algorithm:
        1. Below min_fields_for_grouping: no groups
        2. Prefix pass over all fields
        3. Semantic pass over fields not claimed by a prefix group
        4. Orphan check: if groups formed but only 1-2 fields remain
           ungrouped, drop all grouping

        Args:
            fields: All fields of one analysis pass

        Returns:
            GroupingResult with groups and ungrouped fields
        """
        fields = list(fields)
        if len(fields) < self.config.min_fields_for_grouping:
            return GroupingResult(groups=[], ungrouped=fields)

        prefix_groups = self.detect_prefix_groups(fields)
        claimed = _paths(prefix_groups)

        remaining = [f for f in fields if f.path not in claimed]
        clusters = self._cluster(remaining)
        claimed |= _paths(clusters)

        ungrouped = [f for f in fields if f.path not in claimed]
        groups: List[FieldGroup] = [*prefix_groups, *clusters]

        if groups and len(ungrouped) in (1, 2):
            logger.info(f"Skipping grouping: {len(groups)} groups would orphan {len(ungrouped)} fields")
            return GroupingResult(groups=[], ungrouped=fields)

        if groups:
            logger.info(f"Grouped {len(fields) - len(ungrouped)}/{len(fields)} fields into "
                        f"{len(prefix_groups)} prefix groups and {len(clusters)} semantic clusters")
        return GroupingResult(groups=groups, ungrouped=ungrouped)

    def detect_prefix_groups(self, fields: Sequence[FieldDescriptor]) -> List[PrefixGroup]:
        """Buckets of >= min_fields_per_group fields sharing a name prefix"""
        if len(fields) < self.config.min_fields_for_grouping:
            return []

        buckets: Dict[str, List[FieldDescriptor]] = {}
        for field in fields:
            prefix = extract_prefix(field.name)
            if prefix:
                buckets.setdefault(prefix, []).append(field)

        return [
            PrefixGroup(prefix=prefix, label=self.format_label(prefix), fields=members)
            for prefix, members in buckets.items()
            if len(members) >= self.config.min_fields_per_group
        ]

    def detect_semantic_clusters(self, fields: Sequence[FieldDescriptor]) -> List[SemanticCluster]:
        """Clusters of fields whose semantic categories match a cluster rule"""
        if len(fields) < self.config.min_fields_for_grouping:
            return []
        return self._cluster(fields)

    def _cluster(self, fields: Sequence[FieldDescriptor]) -> List[SemanticCluster]:
        clusters = []
        claimed: Set[str] = set()
        for rule in self.config.cluster_rules:
            categories = set(rule.categories)
            members = [
                f for f in fields
                if f.semantic_category is not None
                and f.semantic_category.value in categories
                and f.path not in claimed
            ]
            if len(members) >= rule.min_fields:
                clusters.append(SemanticCluster(
                    label=rule.label,
                    categories=[SemanticCategory(c) for c in rule.categories],
                    fields=members
                ))
                claimed.update(f.path for f in members)
        return clusters

    def format_label(self, prefix: str) -> str:
        """
        Human label for a prefix

        billing_ -> "Billing", shipping_address_ -> "Shipping Address",
        contact_info_ -> "Contact"
        """
        words = SEPARATORS.split(prefix.rstrip('_.'))
        if len(words) > 1 and words[-1].lower() in self._suffixes:
            words.pop()
        return ' '.join(w[:1].upper() + w[1:].lower() for w in words if w)


def extract_prefix(name: str) -> Optional[str]:
    """Name up to and including its last '_' or '.' separator"""
    index = max(name.rfind('_'), name.rfind('.'))
    if index <= 0:
        return None
    return name[:index + 1]


def _paths(groups: Sequence[FieldGroup]) -> Set[str]:
    return {f.path for g in groups for f in g.fields}
