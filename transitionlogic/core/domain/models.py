"""Domain models for transitions and evaluation verdicts.

Responsibilities:
  - Define immutable carriers for a proposed change and its Result tree.

Invariants:
  - Models are deterministic containers; Result nodes never share mutable state.
  - A Result may carry matched tags only when it is triggered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .enums import ConditionTag

T = TypeVar("T")


@dataclass(frozen=True)
class Transition(Generic[T]):
    """Proposed change of a value; old is None on first validation."""
    old: Optional[T]
    new: T


@dataclass(frozen=True)
class Result:
    description: str
    triggered: bool
    children: tuple[Result, ...] = ()
    matched_tags: frozenset[ConditionTag] = frozenset()

    def __post_init__(self) -> None:
        if self.matched_tags and not self.triggered:
            raise ValueError(
                f"Result '{self.description}' carries tags but is not triggered"
            )


@dataclass(frozen=True)
class Writer:
    first_name: Optional[str]
    last_name: Optional[str]
    id: Optional[int] = None
