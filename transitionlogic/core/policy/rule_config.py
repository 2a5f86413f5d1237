"""Declarative rule files compiled into conditions.

Responsibilities:
  - Load JSON rule definitions from the bundled rules directory or a path.
  - Validate every node eagerly and compile it into a Condition.

Invariants:
  - All configuration errors surface while loading, never during evaluation.
  - Error messages name the JSON path of the offending node.
  - Leaf fields must name dataclass fields of the target entity (Writer by default).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, is_dataclass
from operator import attrgetter
from pathlib import Path
from typing import Any, Callable, Mapping

from transitionlogic.core.conditions import combinators, leaves
from transitionlogic.core.conditions.tagging import logic
from transitionlogic.core.conditions.types import Accessor, Condition, ConditionConfigError
from transitionlogic.core.domain.enums import ConditionTag, tag_from_persisted
from transitionlogic.core.domain.models import Writer


class RuleConfigUnavailableError(ValueError):
    pass


@dataclass(frozen=True)
class RuleConfig:
    rule_id: str
    description: str
    condition: Condition[Any]


_FIELD_LEAVES: dict[str, Callable[[Accessor[Any]], Condition[Any]]] = {
    "changed": leaves.changed,
    "is_true": leaves.is_true,
    "was_true": leaves.was_true,
    "is_false": leaves.is_false,
    "was_false": leaves.was_false,
    "is_empty": leaves.is_empty,
    "was_empty": leaves.was_empty,
    "present": leaves.present,
    "was_present": leaves.was_present,
    "was_set": leaves.was_set,
}

_VALUE_LEAVES: dict[str, Callable[[Accessor[Any], Any], Condition[Any]]] = {
    "is_equal_to": leaves.is_equal_to,
    "was_equal_to": leaves.was_equal_to,
}


def _rules_dir() -> Path:
    return Path(__file__).resolve().parent / "rules"


def _require_object(payload: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise ConditionConfigError(f"Missing or invalid object field '{path}.{key}'")
    return value


def _require_str(payload: Mapping[str, Any], key: str, path: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConditionConfigError(f"Missing or invalid string field '{path}.{key}'")
    return value


def _require_list(payload: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = payload.get(key)
    if not isinstance(value, list):
        raise ConditionConfigError(f"Missing or invalid list field '{path}.{key}'")
    return value


def _require_tags(payload: Mapping[str, Any], path: str) -> list[ConditionTag]:
    tags: list[ConditionTag] = []
    for index, label in enumerate(_require_list(payload, "tags", path)):
        tag = tag_from_persisted(label) if isinstance(label, str) else None
        if tag is None:
            raise ConditionConfigError(f"Unknown tag at '{path}.tags[{index}]': {label!r}")
        tags.append(tag)
    return tags


def _require_field(node: Mapping[str, Any], path: str, entity: type) -> Accessor[Any]:
    name = _require_str(node, "field", path)
    if name not in {f.name for f in fields(entity)}:
        raise ConditionConfigError(
            f"Unknown field at '{path}.field': '{name}' is not a field of {entity.__name__}"
        )
    return attrgetter(name)


def _build_children(node: Mapping[str, Any], path: str, entity: type) -> list[Condition[Any]]:
    children = _require_list(node, "children", path)
    if not children:
        raise ConditionConfigError(f"Field '{path}.children' must not be empty")
    out: list[Condition[Any]] = []
    for index, child in enumerate(children):
        child_path = f"{path}.children[{index}]"
        if not isinstance(child, Mapping):
            raise ConditionConfigError(f"Missing or invalid object field '{child_path}'")
        out.append(_build_node(child, child_path, entity))
    return out


def _build_node(node: Mapping[str, Any], path: str, entity: type) -> Condition[Any]:
    op = _require_str(node, "op", path)

    if op in _FIELD_LEAVES:
        return _FIELD_LEAVES[op](_require_field(node, path, entity))
    if op in _VALUE_LEAVES:
        if "value" not in node:
            raise ConditionConfigError(f"Missing required field '{path}.value'")
        return _VALUE_LEAVES[op](_require_field(node, path, entity), node["value"])
    if op == "not":
        return combinators.not_(
            _build_node(_require_object(node, "child", path), f"{path}.child", entity)
        )
    if op == "and":
        return combinators.and_(*_build_children(node, path, entity))
    if op == "or":
        return combinators.or_(*_build_children(node, path, entity))
    if op == "if_then_else":
        return combinators.if_then_else(
            _build_node(_require_object(node, "if", path), f"{path}.if", entity),
            _build_node(_require_object(node, "then", path), f"{path}.then", entity),
            _build_node(_require_object(node, "else", path), f"{path}.else", entity),
        )
    if op == "logic":
        return logic(
            _require_str(node, "description", path),
            _build_node(_require_object(node, "child", path), f"{path}.child", entity),
            *_require_tags(node, path),
        )
    raise ConditionConfigError(f"Unknown op at '{path}.op': '{op}'")


def build_condition(
    node: Mapping[str, Any], path: str = "condition", entity: type = Writer
) -> Condition[Any]:
    """Compile a rule node for values of the dataclass ``entity``.

    Every ``field`` must name one of the entity's dataclass fields.
    """
    if not is_dataclass(entity):
        raise ConditionConfigError(f"Rule entity must be a dataclass, got {entity!r}")
    return _build_node(node, path, entity)


def validate_rule_payload(payload: Mapping[str, Any], entity: type = Writer) -> RuleConfig:
    rule_id = _require_str(payload, "rule_id", "rule")
    description = _require_str(payload, "description", "rule")
    condition = build_condition(_require_object(payload, "condition", "rule"), entity=entity)
    return RuleConfig(rule_id=rule_id, description=description, condition=condition)


def load_rule_config_file(path: str | Path, entity: type = Writer) -> RuleConfig:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuleConfigUnavailableError(str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ConditionConfigError(f"Rule file must be valid JSON: {exc}") from exc

    if not isinstance(payload, Mapping):
        raise ConditionConfigError("Rule file must be a JSON object")
    return validate_rule_payload(payload, entity)


def load_rule_config(rule_id: str, entity: type = Writer) -> RuleConfig:
    rule_path = _rules_dir() / f"{rule_id}.json"
    if not rule_path.exists():
        raise RuleConfigUnavailableError(f"Unknown rule_id: {rule_id}")

    config = load_rule_config_file(rule_path, entity)
    if config.rule_id != rule_id:
        raise ConditionConfigError(
            f"rule_id mismatch: requested '{rule_id}', config has '{config.rule_id}'"
        )
    return config
