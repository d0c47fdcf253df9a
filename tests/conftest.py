import pytest

from pushdown import Action, Automaton


@pytest.fixture
def balanced() -> Automaton:
    """Accepts 0^n 1^n for n >= 1."""
    return (
        Automaton()
        .accept(["end"])
        .declare_state(
            "start",
            [
                (None, "0", Action.PUSH, "start"),
                ("0", "1", Action.POP, "end"),
            ],
        )
        .declare_state(
            "end",
            [
                (None, "0", Action.POP, "end"),
                (None, "1", Action.POP, "end"),
            ],
        )
    )
