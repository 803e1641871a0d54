"""Test helpers shared across test modules."""

from holdem_engine.core.rules import GamePhase


class ScriptedRandom:
    """
    Random source that replays fixed values.

    ``random()`` returns the scripted values in order. ``randint`` always
    returns its upper bound, which makes a Fisher-Yates shuffle a no-op.
    """

    def __init__(self, values=()):
        self.values = list(values)

    def random(self):
        if not self.values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self.values.pop(0)

    def randint(self, a, b):
        return b


def advance_to(engine, phase: GamePhase, max_actions: int = 100) -> None:
    """Call or check with whoever is to act until ``phase`` is reached."""
    for _ in range(max_actions):
        state = engine.state
        if state.phase == phase:
            return
        player = state.current_player
        assert player is not None, f"No one to act before reaching {phase}"
        if player.bet < state.current_bet:
            engine.call()
        else:
            engine.check()
    raise AssertionError(f"Did not reach {phase} in {max_actions} actions")
