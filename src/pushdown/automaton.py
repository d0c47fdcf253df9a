from __future__ import annotations

import logging
from typing import Any, FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from pushdown.error import AmbiguousTransitionError, EmptyAutomatonError
from pushdown.graph import DiGraph, Edge
from pushdown.pda import Runner
from pushdown.types import Transition, TransitionLabel

logger = logging.getLogger(__name__)

TransitionLike = Union[Transition[Any], Tuple[Any, Any, Any, str]]
Key = Tuple[Optional[Any], Any]


class Automaton:
    """
    Builder and container for a deterministic pushdown automaton.

    States are vertices of a `DiGraph` keyed by label, transitions are edges
    carrying a `TransitionLabel`. The first state ever created is the start
    state. Once runners have been spawned the automaton should be treated as
    read-only.
    """

    def __init__(self, strict: bool = False) -> None:
        self._graph: DiGraph[str, TransitionLabel[Any]] = DiGraph()
        self._accepting: Set[str] = set()
        self._strict = strict

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self._graph.find_vertex(label) is not None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(states={self.states}, "
            f"accepting={sorted(self._accepting)}, transitions={self._graph.edge_count})"
        )

    @property
    def graph(self) -> DiGraph[str, TransitionLabel[Any]]:
        return self._graph

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def start(self) -> str:
        if not len(self._graph):
            raise EmptyAutomatonError("declare a state before asking for the start state")
        return self._graph.vertex(0).label

    @property
    def states(self) -> List[str]:
        return [vertex.label for vertex in self._graph.vertices()]

    @property
    def accepting(self) -> FrozenSet[str]:
        return frozenset(self._accepting)

    def is_accepting(self, label: str) -> bool:
        return label in self._accepting

    def accept(self, labels: Iterable[str]) -> Automaton:
        if isinstance(labels, str):
            labels = [labels]
        self._accepting.update(labels)
        return self

    def declare_state(
        self,
        label: str,
        transitions: Iterable[TransitionLike] = (),
    ) -> Automaton:
        declared = [Transition.of(t) for t in transitions]
        if self._strict:
            self._check_ambiguity(label, declared)

        source = self._graph.find_or_create_vertex(label)
        for transition in declared:
            target = self._graph.find_or_create_vertex(transition.target)
            payload = transition.label
            self._graph.replace_edge(
                source,
                payload,
                target,
                lambda edge, key=payload.key: edge.source == source
                and edge.payload.key == key,
            )
            logger.debug(
                "Declared %s --(%r, %r, %s)--> %s",
                label,
                payload.guard,
                payload.symbol,
                payload.action.value,
                transition.target,
            )

        if not self._strict:
            self._check_ambiguity(label, declared)
        return self

    def transitions(self, label: str) -> List[Transition[Any]]:
        """Transitions of `label`, guarded ones first, each group in declaration order."""
        source = self._graph.find_vertex(label)
        if source is None:
            return []
        edges = sorted(
            self._graph.edges(source),
            key=lambda edge: edge.payload.is_wildcard,
        )
        return [self._to_transition(edge) for edge in edges]

    def runner(self, accept_by_empty_stack: bool = False) -> Runner:
        if not len(self._graph):
            raise EmptyAutomatonError("declare a state before creating a runner")
        return Runner(self, accept_by_empty_stack)

    def _to_transition(self, edge: Edge[TransitionLabel[Any]]) -> Transition[Any]:
        return Transition(
            guard=edge.payload.guard,
            symbol=edge.payload.symbol,
            action=edge.payload.action,
            target=self._graph.vertex(edge.target).label,
        )

    def _keys(self, label: str) -> List[Key]:
        source = self._graph.find_vertex(label)
        if source is None:
            return []
        return [edge.payload.key for edge in self._graph.edges(source)]

    def _check_ambiguity(self, label: str, declared: List[Transition[Any]]) -> None:
        keys = self._keys(label)
        symbols: List[Any] = []
        for transition in declared:
            key = (transition.guard, transition.symbol)
            if key not in keys:
                keys.append(key)
            if transition.symbol not in symbols:
                symbols.append(transition.symbol)

        for symbol in symbols:
            if (None, symbol) in keys:
                continue
            guards = [g for g, s in keys if s == symbol and g is not None]
            if len(guards) < 2:
                continue
            if self._strict:
                raise AmbiguousTransitionError(label, symbol, guards)
            logger.warning(
                "State '%s' has guarded transitions on %r for guards %r without a wildcard; "
                "the first declared one is taken when the stack is empty.",
                label,
                symbol,
                guards,
            )
