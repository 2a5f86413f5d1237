"""Condition evaluation for a single transition.

Responsibilities:
  - Apply a composed condition to a transition and return the root Result.
  - Emit an optional debug line per evaluation for audit tracing.

Inputs/Outputs:
  - Inputs: a Condition built from leaves/combinators and a Transition.
  - Outputs: a fresh Result tree; the condition itself is never mutated.

Invariants:
  - Deterministic: identical inputs yield structurally identical Results.
  - Accessor failures propagate to the caller unmodified.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from ..conditions.types import Condition
from ..domain.enums import tag_to_persisted
from ..domain.models import Result, Transition

T = TypeVar("T")

_DEBUG_FN: Callable[[str], None] | None = None


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def evaluate(condition: Condition[T], transition: Transition[T]) -> Result:
    result = condition(transition)

    if _DEBUG_FN is not None:
        tags = ",".join(sorted(tag_to_persisted(tag) for tag in result.matched_tags))
        _DEBUG_FN(
            "EVALUATE "
            f"triggered={result.triggered} tags={tags} description={result.description}"
        )

    return result


def evaluate_update(condition: Condition[T], old: Optional[T], new: T) -> Result:
    return evaluate(condition, Transition(old=old, new=new))
