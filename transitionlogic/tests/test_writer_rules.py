"""Tests for the Writer update rule set."""

from __future__ import annotations

import pytest

from transitionlogic.core.conditions.leaves import changed
from transitionlogic.core.conditions.tagging import logic
from transitionlogic.core.domain.enums import ConditionTag
from transitionlogic.core.domain.models import Writer
from transitionlogic.core.policy.writer_rules import first_name, validate_writer_update


@pytest.mark.parametrize(
    "old,new,expected",
    [
        (Writer("Ann", "Lee"), Writer(None, "Lee"), {ConditionTag.FIRSTNAME_DELETED}),
        (Writer("Ann", "Lee"), Writer("Ann", None), {ConditionTag.LASTNAME_DELETED}),
        (
            Writer("Ann", "Lee"),
            Writer(None, None),
            {ConditionTag.FIRSTNAME_DELETED, ConditionTag.LASTNAME_DELETED},
        ),
    ],
)
def test_deleting_names_is_rejected(old: Writer, new: Writer, expected: set[ConditionTag]) -> None:
    result = validate_writer_update(old, new)
    assert result.triggered is True
    assert result.matched_tags == expected


@pytest.mark.parametrize(
    "old,new",
    [
        (None, Writer(None, None)),
        (None, Writer("Ann", "Lee")),
        (Writer("Ann", "Lee"), Writer("Bob", "Lee")),
        (Writer(None, "Lee"), Writer(None, "Lee")),
        (Writer(None, None), Writer("Ann", "Lee")),
    ],
)
def test_allowed_updates_carry_no_tags(old: Writer | None, new: Writer) -> None:
    result = validate_writer_update(old, new)
    assert result.triggered is False
    assert result.matched_tags == frozenset()


def test_custom_condition_overrides_default() -> None:
    renamed = logic("firstname changed", changed(first_name), ConditionTag.FIRSTNAME_DELETED)
    result = validate_writer_update(Writer("Ann", "Lee"), Writer("Bob", "Lee"), renamed)
    assert result.matched_tags == {ConditionTag.FIRSTNAME_DELETED}


class _EmptyRuleSet:
    """Callable condition whose truthiness is False."""

    def __len__(self) -> int:
        return 0

    def __call__(self, transition):
        return logic("always", changed(first_name), ConditionTag.FIRSTNAME_DELETED)(transition)


def test_falsy_callable_condition_is_used() -> None:
    result = validate_writer_update(None, Writer("Ann", "Lee"), _EmptyRuleSet())
    assert result.description == "always"
    assert result.matched_tags == {ConditionTag.FIRSTNAME_DELETED}
