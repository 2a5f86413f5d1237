"""Leaf predicates over a single extracted field.

Each leaf applies a caller-supplied accessor to the new value and/or the old
value and records the observed values in its description. An absent old value
is never handed to the accessor; its extraction is None. Leaves carry no
children and no tags.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from transitionlogic.core.domain.models import Result, Transition
from .types import Accessor, Condition, require_callable

T = TypeVar("T")


def _old_value(accessor: Accessor[T], transition: Transition[T]) -> Optional[Any]:
    if transition.old is None:
        return None
    return accessor(transition.old)


def changed(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        new_value = accessor(transition.new)
        return Result(f"changed (old: {old_value}, new: {new_value})", old_value != new_value)

    return condition


def is_true(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        new_value = accessor(transition.new)
        return Result(f"isTrue (new: {new_value})", new_value is True)

    return condition


def was_true(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        return Result(f"wasTrue (old: {old_value})", old_value is True)

    return condition


def is_false(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        new_value = accessor(transition.new)
        return Result(f"isFalse (new: {new_value})", new_value is False)

    return condition


def was_false(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        return Result(f"wasFalse (old: {old_value})", old_value is False)

    return condition


def is_empty(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        new_value = accessor(transition.new)
        return Result(f"isEmpty (new: {new_value})", new_value is None)

    return condition


def was_empty(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        return Result(f"wasEmpty (old: {old_value})", old_value is None)

    return condition


def present(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        new_value = accessor(transition.new)
        return Result(f"isPresent (new: {new_value})", new_value is not None)

    return condition


def was_present(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        return Result(f"wasPresent (old: {old_value})", old_value is not None)

    return condition


def was_set(accessor: Accessor[T]) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        new_value = accessor(transition.new)
        return Result(
            f"wasSet (old: {old_value}, new: {new_value})",
            old_value is None and new_value is not None,
        )

    return condition


def is_equal_to(accessor: Accessor[T], value: Any) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        new_value = accessor(transition.new)
        return Result(f"isEqualTo (new: {new_value}, desired: {value})", new_value == value)

    return condition


def was_equal_to(accessor: Accessor[T], value: Any) -> Condition[T]:
    require_callable(accessor, "accessor")

    def condition(transition: Transition[T]) -> Result:
        old_value = _old_value(accessor, transition)
        return Result(f"wasEqualTo (old: {old_value}, desired: {value})", old_value == value)

    return condition
