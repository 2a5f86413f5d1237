"""Domain enums for condition tagging.

Responsibilities:
  - Define ConditionTag identifiers reported when a tagged condition triggers.
  - Provide stable tag messages for audit output.

Invariants:
  - Enum values must remain stable; callers persist and return them to clients.
  - TAG_METADATA must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


# Stable identifiers for validation reasons; value is the persisted code.
class ConditionTag(Enum):
    LASTNAME_DELETED = "LASTNAME_DELETED"
    FIRSTNAME_DELETED = "FIRSTNAME_DELETED"


# UI/audit metadata keyed by tag.
TAG_METADATA: dict[ConditionTag, dict[str, object]] = {
    ConditionTag.LASTNAME_DELETED: {
        "message": "The last name was removed from a writer that had one.",
    },
    ConditionTag.FIRSTNAME_DELETED: {
        "message": "The first name was removed from a writer that had one.",
    },
}


def tag_to_persisted(tag: ConditionTag) -> str:
    return tag.value


def tag_from_persisted(label: str) -> ConditionTag | None:
    if not label:
        return None
    try:
        return ConditionTag(label)
    except ValueError:
        return None


_missing = [tag for tag in ConditionTag if tag not in TAG_METADATA]
if _missing:
    raise RuntimeError(f"Missing TAG_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in TAG_METADATA.keys() if k not in set(ConditionTag)]
if _extra:
    raise RuntimeError(f"Extra TAG_METADATA keys: {[e.value for e in _extra]}")
