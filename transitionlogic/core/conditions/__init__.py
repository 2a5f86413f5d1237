"""Condition construction API.

Responsibilities:
  - Leaf predicates, logical combinators and the tagging wrapper.
  - Conditions are plain callables; building one never evaluates it.
"""

from .combinators import and_, if_then_else, not_, or_
from .leaves import (
    changed,
    is_empty,
    is_equal_to,
    is_false,
    is_true,
    present,
    was_empty,
    was_equal_to,
    was_false,
    was_present,
    was_set,
    was_true,
)
from .tagging import logic, merge_tags, writer_logic
from .types import Accessor, Condition, ConditionConfigError

__all__ = [
    "Accessor",
    "Condition",
    "ConditionConfigError",
    "and_",
    "changed",
    "if_then_else",
    "is_empty",
    "is_equal_to",
    "is_false",
    "is_true",
    "logic",
    "merge_tags",
    "not_",
    "or_",
    "present",
    "was_empty",
    "was_equal_to",
    "was_false",
    "was_present",
    "was_set",
    "was_true",
    "writer_logic",
]
