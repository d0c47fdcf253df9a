from typing import Any, Sequence


class NoTransitionError(Exception):
    def __init__(
        self,
        symbol: Any,
        state: str,
        stack: Sequence[Any],
        message: str | None = None,
    ) -> None:
        super().__init__(
            f"No transition for symbol {symbol!r} in state '{state}' with stack {list(stack)}"
            + (f": {message}" if message else "")
        )
        self.symbol = symbol
        self.state = state
        self.stack = list(stack)


class AmbiguousTransitionError(Exception):
    def __init__(self, state: str, symbol: Any, guards: Sequence[Any]) -> None:
        super().__init__(
            f"State '{state}' has guarded transitions on symbol {symbol!r} for guards {list(guards)} "
            "without a wildcard. They all match when the stack is empty."
        )
        self.state = state
        self.symbol = symbol
        self.guards = list(guards)


class EmptyAutomatonError(Exception):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Automaton has no states" + (f": {message}" if message else "")
        )
        self.message = message
