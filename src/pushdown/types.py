from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

Symbol = TypeVar("Symbol")

# lower wins
RANK_EXACT = 0
RANK_WILDCARD = 1
RANK_EMPTY_STACK = 2


class Action(Enum):
    PUSH = "push"
    POP = "pop"
    REPLACE = "replace"


class TransitionLabel(BaseModel, Generic[Symbol]):
    """
    Payload stored on an edge of the transition graph.

    A label matches an input when its `symbol` equals the input and its
    `guard` is satisfied by the stack top. An unset guard is a wildcard.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    guard: Optional[Symbol] = None
    symbol: Symbol
    action: Action

    @property
    def key(self) -> Tuple[Optional[Symbol], Symbol]:
        return (self.guard, self.symbol)

    @property
    def is_wildcard(self) -> bool:
        return self.guard is None

    def rank(self, symbol: Symbol, stack: Sequence[Symbol]) -> int | None:
        """
        Priority of this label for one step, or None if it does not match.

        An exact guard hit beats a wildcard, and a wildcard beats a guard
        that only holds because the stack is empty.
        """
        if self.symbol != symbol:
            return None
        if self.is_wildcard:
            return RANK_WILDCARD
        if not stack:
            return RANK_EMPTY_STACK
        if self.guard == stack[-1]:
            return RANK_EXACT
        return None


class Transition(BaseModel, Generic[Symbol]):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    guard: Optional[Symbol] = None
    symbol: Symbol
    action: Action
    target: str

    @classmethod
    def of(cls, value: Transition[Any] | Tuple[Any, Any, Any, str]) -> Transition[Any]:
        if isinstance(value, Transition):
            return value
        if not isinstance(value, tuple) or len(value) != 4:
            raise TypeError(
                f"Transition must be a Transition or a (guard, symbol, action, target) tuple, got {value!r}."
            )
        guard, symbol, action, target = value
        return cls(guard=guard, symbol=symbol, action=action, target=target)

    @property
    def label(self) -> TransitionLabel[Symbol]:
        return TransitionLabel(guard=self.guard, symbol=self.symbol, action=self.action)
