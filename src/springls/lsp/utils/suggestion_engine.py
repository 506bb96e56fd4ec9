"""
Schema driven suggestion filtering.

Given where the cursor sits (parent path and typed fragment) and which paths
the document already declares, pick the catalog keys that can be written
next. Deeper catalog entries that share the same next segment collapse into
one candidate, so typing under ``spring`` offers ``datasource`` once rather
than once per datasource property.
"""

import logging
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence

from springls.config.catalog import PropertyCatalog, PropertyEntry

from .models import Candidate

logger = logging.getLogger(__name__)


def _sort_key(candidate: Candidate):
    # Directly settable properties first, then categories.
    return (0 if candidate.is_leaf else 1, candidate.key)


def suggest(
    catalog_keys: Iterable[str],
    parent_path: str,
    partial_text: str,
    existing_paths: AbstractSet[str],
    flat: bool = False,
    catalog: Optional[PropertyCatalog] = None,
) -> List[Candidate]:
    """
    Compute the next-level candidates below ``parent_path``.

    Args:
        catalog_keys: Every documented dotted property name
        parent_path: Dotted ancestor path ("" at the root)
        partial_text: Fragment already typed; matched as a case-insensitive prefix
        existing_paths: Paths already declared in the document
        flat: Offer whole remaining property names instead of one segment
            (used by the flat properties dialect)
        catalog: Catalog used to attach entries to leaf candidates

    Returns:
        Candidates ordered leaves first, then lexicographically by key
    """
    keys: Sequence[str] = tuple(catalog_keys)
    key_set = frozenset(keys)
    prefix = f"{parent_path}." if parent_path else ""
    typed = partial_text.lower()

    grouped: Dict[str, Candidate] = {}
    for key in keys:
        if prefix and not key.startswith(prefix):
            continue

        remainder = key[len(prefix):]
        segment = remainder if flat else remainder.split(".", 1)[0]
        if not segment or segment in grouped:
            continue

        full_path = prefix + segment
        if full_path in existing_paths:
            continue
        if typed and not segment.lower().startswith(typed):
            continue

        group_prefix = full_path + "."
        is_leaf = full_path in key_set
        grouped[segment] = Candidate(
            key=segment,
            full_path=full_path,
            is_leaf=is_leaf,
            has_group_children=any(other.startswith(group_prefix) for other in keys),
            entry=catalog.get(full_path) if catalog is not None and is_leaf else None,
        )

    candidates = sorted(grouped.values(), key=_sort_key)
    logger.debug(
        f"Suggested {len(candidates)} candidates under '{parent_path}' for '{partial_text}'"
    )
    return candidates


def suggest_values(entry: Optional[PropertyEntry], partial_value: str) -> List[str]:
    """
    Enum literals allowed for a property, filtered by the typed value.

    Args:
        entry: Catalog entry of the property being assigned, if documented
        partial_value: Value fragment typed so far

    Returns:
        Matching literals in catalog order; empty when the property has no enum
    """
    if entry is None or not entry.enum:
        return []
    typed = partial_value.strip().strip("'\"").lower()
    return [value for value in entry.enum if value.lower().startswith(typed)]
