from __future__ import annotations

from ai.ai_controller import FighterSnapshot


class ScriptedRandom:
    """Uniform source that replays queued draws, then a fixed default.

    The default of 0.99 fails every probability roll in the cascade, so an
    empty queue always ends in a plain ``Idle`` or a forced move.
    """

    def __init__(self, values=(), default: float = 0.99):
        self._values = list(values)
        self.default = default
        self.draws = 0

    def extend(self, values) -> None:
        self._values.extend(values)

    @property
    def pending(self) -> int:
        return len(self._values)

    def random(self) -> float:
        self.draws += 1
        if self._values:
            return self._values.pop(0)
        return self.default


def fighter(x: float, width: float = 40, **kwargs) -> FighterSnapshot:
    return FighterSnapshot(x=x, y=0.0, width=width, **kwargs)
