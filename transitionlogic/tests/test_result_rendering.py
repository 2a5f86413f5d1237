"""Tests for Result traversal, text formatting and JSON serialization."""

from __future__ import annotations

import json

from transitionlogic.core.domain.enums import TAG_METADATA, ConditionTag
from transitionlogic.core.domain.models import Writer
from transitionlogic.core.engine.result import (
    format_result,
    iter_results,
    result_to_dict,
    result_to_json,
)
from transitionlogic.core.policy.writer_rules import validate_writer_update


def _last_name_deleted():
    return validate_writer_update(Writer("Ann", "Lee"), Writer("Ann", None))


def test_iter_results_pre_order() -> None:
    descriptions = [node.description for node in iter_results(_last_name_deleted())]
    assert descriptions[:3] == ["writer update", "or", "firstname deleted"]
    assert descriptions.count("and") == 2
    assert len(descriptions) == 10


def test_format_result_marks_triggered_nodes_and_tags() -> None:
    lines = format_result(_last_name_deleted()).splitlines()

    assert lines[0] == "[x] writer update tags=LASTNAME_DELETED"
    assert lines[1] == "  [x] or tags=LASTNAME_DELETED"
    assert lines[2] == "    [ ] firstname deleted"
    assert "    [x] lastname deleted tags=LASTNAME_DELETED" in lines
    assert "        [x] isEmpty (new: None)" in lines


def test_result_to_dict_nests_children() -> None:
    payload = result_to_dict(_last_name_deleted())

    assert payload["triggered"] is True
    assert payload["matched_tags"] == ["LASTNAME_DELETED"]
    or_node = payload["children"][0]
    assert [child["description"] for child in or_node["children"]] == [
        "firstname deleted",
        "lastname deleted",
    ]
    assert or_node["children"][0]["matched_tags"] == []


def test_result_to_json_is_compact_and_loadable() -> None:
    text = result_to_json(_last_name_deleted())
    assert "\": " not in text
    assert "\", \"" not in text
    assert json.loads(text) == result_to_dict(_last_name_deleted())


def test_result_to_dict_includes_tag_messages() -> None:
    payload = result_to_dict(_last_name_deleted())

    assert payload["messages"] == [TAG_METADATA[ConditionTag.LASTNAME_DELETED]["message"]]
    assert payload["children"][0]["children"][0]["messages"] == []


def test_messages_follow_sorted_tag_order() -> None:
    payload = result_to_dict(validate_writer_update(Writer("Ann", "Lee"), Writer(None, None)))

    assert payload["matched_tags"] == ["FIRSTNAME_DELETED", "LASTNAME_DELETED"]
    assert payload["messages"] == [
        TAG_METADATA[ConditionTag.FIRSTNAME_DELETED]["message"],
        TAG_METADATA[ConditionTag.LASTNAME_DELETED]["message"],
    ]
