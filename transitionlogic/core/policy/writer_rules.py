"""Update rules for the Writer entity.

Responsibilities:
  - Build the tagged conditions that reject deleting a writer's names.
  - Provide a single validation entry point for the web layer.
"""

from __future__ import annotations

from typing import Optional

from transitionlogic.core.conditions.combinators import and_, or_
from transitionlogic.core.conditions.leaves import is_empty, was_present
from transitionlogic.core.conditions.tagging import logic, writer_logic
from transitionlogic.core.conditions.types import Condition
from transitionlogic.core.domain.enums import ConditionTag
from transitionlogic.core.domain.models import Result, Writer
from transitionlogic.core.engine.evaluator import evaluate_update


def first_name(writer: Writer) -> Optional[str]:
    return writer.first_name


def last_name(writer: Writer) -> Optional[str]:
    return writer.last_name


def rule_first_name_deleted() -> Condition[Writer]:
    return logic(
        "firstname deleted",
        and_(was_present(first_name), is_empty(first_name)),
        ConditionTag.FIRSTNAME_DELETED,
    )


def rule_last_name_deleted() -> Condition[Writer]:
    return logic(
        "lastname deleted",
        and_(was_present(last_name), is_empty(last_name)),
        ConditionTag.LASTNAME_DELETED,
    )


def build_writer_update_condition() -> Condition[Writer]:
    return writer_logic("writer update", or_(rule_first_name_deleted(), rule_last_name_deleted()))


WRITER_UPDATE_CONDITION = build_writer_update_condition()


def validate_writer_update(
    old: Optional[Writer], new: Writer, condition: Optional[Condition[Writer]] = None
) -> Result:
    if condition is None:
        condition = WRITER_UPDATE_CONDITION
    return evaluate_update(condition, old, new)
