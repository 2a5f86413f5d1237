"""Tagging wrappers that attach ConditionTags to triggered conditions."""

from __future__ import annotations

from typing import Iterable, TypeVar

from transitionlogic.core.domain.enums import ConditionTag
from transitionlogic.core.domain.models import Result, Transition, Writer
from .types import Condition, ConditionConfigError, require_callable

T = TypeVar("T")


def merge_tags(results: Iterable[Result]) -> frozenset[ConditionTag]:
    merged: set[ConditionTag] = set()
    for result in results:
        merged.update(result.matched_tags)
    return frozenset(merged)


def logic(description: str, condition: Condition[T], *tags: ConditionTag) -> Condition[T]:
    """Wrap a condition under a description, adding tags when it triggers.

    The inner Result becomes the single child. Tags are unioned with the
    inner Result's tags only on trigger; an untriggered wrapper carries none.
    """
    require_callable(condition, "logic condition")
    for tag in tags:
        if not isinstance(tag, ConditionTag):
            raise ConditionConfigError(f"logic tags must be ConditionTag, got {tag!r}")
    own_tags = frozenset(tags)

    def tagged(transition: Transition[T]) -> Result:
        result = condition(transition)
        return Result(
            description,
            result.triggered,
            (result,),
            result.matched_tags | own_tags if result.triggered else frozenset(),
        )

    return tagged


def writer_logic(description: str, condition: Condition[Writer]) -> Condition[Writer]:
    return logic(description, condition)
