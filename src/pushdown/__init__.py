from pushdown.automaton import Automaton
from pushdown.error import (
    AmbiguousTransitionError,
    EmptyAutomatonError,
    NoTransitionError,
)
from pushdown.pda import Runner
from pushdown.types import Action, Transition, TransitionLabel

__all__ = [
    "Action",
    "AmbiguousTransitionError",
    "Automaton",
    "EmptyAutomatonError",
    "NoTransitionError",
    "Runner",
    "Transition",
    "TransitionLabel",
]
