"""Named, versioned condition builders.

Builders run on create(), so a rule file is read when a caller asks for it.
Whatever a builder returns must be a condition; anything else is a wiring
error reported as ConditionConfigError.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from transitionlogic.core.conditions.types import Condition, ConditionConfigError, require_callable
from transitionlogic.core.policy.rule_config import load_rule_config
from transitionlogic.core.policy.writer_rules import build_writer_update_condition


class ConditionFactory:
    def __init__(self) -> None:
        self._builders: Dict[Tuple[str, str], Callable[[], Condition[Any]]] = {}

    def register(
        self, condition_id: str, version: str, builder: Callable[[], Condition[Any]]
    ) -> None:
        require_callable(builder, f"builder for {condition_id}:{version}")
        key = (condition_id, version)
        if key in self._builders:
            raise ConditionConfigError(f"Condition already registered: {condition_id}:{version}")
        self._builders[key] = builder

    def create(self, condition_id: str, version: str) -> Condition[Any]:
        key = (condition_id, version)
        if key not in self._builders:
            raise ValueError(f"Unknown condition_id/version: {condition_id}:{version}")
        condition = self._builders[key]()
        require_callable(condition, f"condition built for {condition_id}:{version}")
        return condition

    def versions(self, condition_id: str) -> list[str]:
        return sorted(version for cid, version in self._builders if cid == condition_id)


default_condition_factory = ConditionFactory()
default_condition_factory.register("writer_update", "dev", build_writer_update_condition)
default_condition_factory.register(
    "writer_update", "v1", lambda: load_rule_config("writer_update_v1").condition
)

__all__ = ["ConditionFactory", "default_condition_factory"]
