from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Iterable, List, Optional, Tuple

from pushdown.error import NoTransitionError
from pushdown.graph import Edge
from pushdown.types import Action, Symbol, TransitionLabel

if TYPE_CHECKING:
    from pushdown.automaton import Automaton

logger = logging.getLogger(__name__)


class Runner(Generic[Symbol]):
    """
    Execution context over a built `Automaton`.

    Each runner owns its position and its stack. Several runners may share
    one automaton as long as nobody declares new states meanwhile.
    """

    def __init__(self, automaton: Automaton, accept_by_empty_stack: bool = False) -> None:
        self._automaton = automaton
        self._accept_by_empty_stack = accept_by_empty_stack
        self._stack: List[Symbol] = []
        self._current: int = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self.state!r}, stack={self._stack!r})"

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    @property
    def accept_by_empty_stack(self) -> bool:
        return self._accept_by_empty_stack

    @property
    def state(self) -> str:
        return self._automaton.graph.vertex(self._current).label

    @property
    def stack(self) -> List[Symbol]:
        return list(self._stack)

    @property
    def top(self) -> Optional[Symbol]:
        if not self._stack:
            return None
        return self._stack[-1]

    def _push(self, symbol: Symbol) -> None:
        self._stack.append(symbol)

    def _pop(self) -> Optional[Symbol]:
        # popping an empty stack is a no-op
        if not self._stack:
            return None
        return self._stack.pop()

    def reset(self) -> None:
        self._stack.clear()
        self._current = 0

    def next(self, symbol: Symbol) -> Optional[Symbol]:
        edge = self._select(symbol)
        if edge is None:
            raise NoTransitionError(symbol, self.state, self._stack)

        label = edge.payload
        logger.debug(
            "%s --(%r, %s)--> %s with top %r",
            self.state,
            symbol,
            label.action.value,
            self._automaton.graph.vertex(edge.target).label,
            self.top,
        )
        self._current = edge.target

        if label.action is Action.PUSH:
            self._push(symbol)
            return None
        if label.action is Action.POP:
            return self._pop()
        popped = self._pop()
        self._push(symbol)
        return popped

    def run(self, symbols: Iterable[Symbol]) -> Tuple[List[Optional[Symbol]], bool]:
        popped = [self.next(symbol) for symbol in symbols]
        return popped, self.check()

    def check(self) -> bool:
        if self._accept_by_empty_stack and not self._stack:
            return True
        return self._automaton.is_accepting(self.state)

    def _select(self, symbol: Symbol) -> Optional[Edge[TransitionLabel[Any]]]:
        best: Optional[Edge[TransitionLabel[Any]]] = None
        best_rank: Optional[int] = None
        for edge in self._automaton.graph.edges(self._current):
            rank = edge.payload.rank(symbol, self._stack)
            if rank is None:
                continue
            if best_rank is None or rank < best_rank:
                best, best_rank = edge, rank
        return best
