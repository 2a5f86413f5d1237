"""Rendering helpers for Result trees.

Responsibilities:
  - Flatten, format and serialize Results for logs and API responses.

Inputs/Outputs:
  - Inputs: a Result produced by evaluator.evaluate.
  - Outputs: text lines, plain dicts or compact JSON.
"""

from __future__ import annotations

import json
from typing import Any, Iterator

from ..domain.enums import TAG_METADATA, tag_to_persisted
from ..domain.models import Result


def iter_results(result: Result) -> Iterator[Result]:
    """Yield the tree in pre-order, root first."""
    yield result
    for child in result.children:
        yield from iter_results(child)


def _tag_labels(result: Result) -> list[str]:
    return sorted(tag_to_persisted(tag) for tag in result.matched_tags)


def _tag_messages(result: Result) -> list[str]:
    ordered = sorted(result.matched_tags, key=tag_to_persisted)
    return [str(TAG_METADATA[tag]["message"]) for tag in ordered]


def format_result(result: Result, indent: str = "  ") -> str:
    lines: list[str] = []

    def _walk(node: Result, depth: int) -> None:
        marker = "x" if node.triggered else " "
        line = f"{indent * depth}[{marker}] {node.description}"
        labels = _tag_labels(node)
        if labels:
            line += f" tags={','.join(labels)}"
        lines.append(line)
        for child in node.children:
            _walk(child, depth + 1)

    _walk(result, 0)
    return "\n".join(lines)


def result_to_dict(result: Result) -> dict[str, Any]:
    return {
        "description": result.description,
        "triggered": result.triggered,
        "matched_tags": _tag_labels(result),
        "messages": _tag_messages(result),
        "children": [result_to_dict(child) for child in result.children],
    }


def result_to_json(result: Result) -> str:
    return json.dumps(result_to_dict(result), separators=(",", ":"), ensure_ascii=False)
