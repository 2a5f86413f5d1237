"""Shared type definitions for conditions.

Responsibilities:
  - Define the Condition and Accessor callable shapes.
  - Define the construction-time configuration error.
Must not:
  - Implement logic; type-only definitions for condition construction.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from transitionlogic.core.domain.models import Result, Transition

T = TypeVar("T")

Condition = Callable[[Transition[T]], Result]
Accessor = Callable[[T], Any]


class ConditionConfigError(ValueError):
    pass


def require_callable(value: object, what: str) -> None:
    if not callable(value):
        raise ConditionConfigError(f"{what} must be callable, got {type(value).__name__}")
