"""
actions.py – The closed set of action intents an AI (or player) can emit.

Exactly one intent is produced per frame:

    Attack()            start a swing
    Jump(direction)     leave the ground, drifting left or right
    Move(direction)     walk left or right
    Idle()              stand still

Intents are immutable values; the host game translates them into motion,
hit detection and animation.  Nothing here touches a fighter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return Direction.RIGHT if self is Direction.LEFT else Direction.LEFT

    @property
    def sign(self) -> int:
        """-1 for left, +1 for right (screen x axis)."""
        return -1 if self is Direction.LEFT else 1

    @classmethod
    def toward(cls, from_x: float, to_x: float) -> Direction:
        """Direction pointing from *from_x* toward *to_x*."""
        return cls.LEFT if to_x < from_x else cls.RIGHT


# ══════════════════════════════════════════════════════════
#  Intent variants
# ══════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Attack:
    kind = "attack"


@dataclass(frozen=True)
class Jump:
    direction: Direction
    kind = "jump"


@dataclass(frozen=True)
class Move:
    direction: Direction
    kind = "move"


@dataclass(frozen=True)
class Idle:
    kind = "idle"


ActionIntent = Union[Attack, Jump, Move, Idle]
INTENT_TYPES = (Attack, Jump, Move, Idle)
INTENT_KINDS = ("attack", "jump", "move", "idle")

ATTACK = Attack()
IDLE = Idle()

# Uniformly sampled when the AI "blunders"
MISTAKE_ACTIONS: tuple[ActionIntent, ...] = (
    IDLE,
    Move(Direction.LEFT),
    Move(Direction.RIGHT),
    ATTACK,
    Jump(Direction.LEFT),
    Jump(Direction.RIGHT),
)


def is_intent(obj) -> bool:
    return isinstance(obj, INTENT_TYPES)


def describe(intent: ActionIntent) -> str:
    """Short human label, e.g. ``"jump left"`` (HUD / logs)."""
    direction = getattr(intent, "direction", None)
    if direction is None:
        return intent.kind
    return f"{intent.kind} {direction.value}"
