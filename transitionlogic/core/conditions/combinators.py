"""Logical combinators over child conditions.

Responsibilities:
  - Compose child Results into a parent verdict with boolean semantics.
  - Propagate child tags only where the parent outcome allows it.

Invariants:
  - and_/or_ evaluate every child, so every child description is always present.
  - if_then_else evaluates the guard and exactly one branch.
  - and_/or_ reject an empty child list at construction time.
"""

from __future__ import annotations

from typing import TypeVar

from transitionlogic.core.domain.models import Result, Transition
from .tagging import merge_tags
from .types import Condition, ConditionConfigError, require_callable

T = TypeVar("T")


def _require_children(name: str, conditions: tuple[Condition[T], ...]) -> None:
    if not conditions:
        raise ConditionConfigError(f"{name} requires at least one condition")
    for index, child in enumerate(conditions):
        require_callable(child, f"{name} condition #{index}")


def not_(condition: Condition[T]) -> Condition[T]:
    require_callable(condition, "not condition")

    def negated(transition: Transition[T]) -> Result:
        result = condition(transition)
        # Inner tags surface when the negation triggers, i.e. the inner did not.
        triggered = not result.triggered
        return Result(
            "not",
            triggered,
            (result,),
            result.matched_tags if triggered else frozenset(),
        )

    return negated


def and_(*conditions: Condition[T]) -> Condition[T]:
    _require_children("and", conditions)

    def conjunction(transition: Transition[T]) -> Result:
        results = tuple(condition(transition) for condition in conditions)
        triggered = all(result.triggered for result in results)
        return Result(
            "and",
            triggered,
            results,
            merge_tags(results) if triggered else frozenset(),
        )

    return conjunction


def or_(*conditions: Condition[T]) -> Condition[T]:
    _require_children("or", conditions)

    def disjunction(transition: Transition[T]) -> Result:
        results = tuple(condition(transition) for condition in conditions)
        return Result(
            "or",
            any(result.triggered for result in results),
            results,
            merge_tags(result for result in results if result.triggered),
        )

    return disjunction


def if_then_else(
    condition: Condition[T], then: Condition[T], otherwise: Condition[T]
) -> Condition[T]:
    require_callable(condition, "ifThenElse condition")
    require_callable(then, "ifThenElse then")
    require_callable(otherwise, "ifThenElse otherwise")

    def branch(transition: Transition[T]) -> Result:
        guard = condition(transition)
        if guard.triggered:
            actual = then(transition)
        else:
            actual = otherwise(transition)
        return Result(
            f"ifThenElse(result={guard.triggered})",
            actual.triggered,
            (actual,),
            actual.matched_tags,
        )

    return branch
