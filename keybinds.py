"""
keybinds.py – Player controls expressed as AI-style action intents.

SOLO_KEYS maps action names → pygame key constants.  Actions:
    move_left, move_right, jump, attack

The player's key state is turned into the same ``ActionIntent`` values the
AI emits, so both fighters run through identical Fighter code.

Usage:
    from keybinds import intent_from_keys
    intent = intent_from_keys(pygame.key.get_pressed())
"""

from __future__ import annotations

import pygame

from ai.actions import ActionIntent, Direction, Jump, Move, ATTACK, IDLE

SOLO_KEYS: dict[str, int] = {
    "move_left": pygame.K_LEFT,
    "move_right": pygame.K_RIGHT,
    "jump": pygame.K_UP,
    "attack": pygame.K_SPACE,
}

# Human-friendly labels for the HUD hint line
ACTION_LABELS: dict[str, str] = {
    "move_left": "Left",
    "move_right": "Right",
    "jump": "Jump",
    "attack": "Attack",
}


def controls_hint(keys: dict[str, int] | None = None) -> str:
    keys = keys or SOLO_KEYS
    return "  ".join(
        f"{pygame.key.name(key).upper()}={ACTION_LABELS[action]}"
        for action, key in keys.items()
    )


def intent_from_keys(pressed, facing: int = 1,
                     keys: dict[str, int] | None = None) -> ActionIntent:
    """Collapse held keys into one intent (attack > jump > move > idle).

    A jump with no direction held drifts the way the fighter faces.

    *pressed* is anything indexable by key constant, e.g. the sequence
    returned by ``pygame.key.get_pressed()`` or a plain dict.
    """
    keys = keys or SOLO_KEYS
    left = bool(pressed[keys["move_left"]])
    right = bool(pressed[keys["move_right"]])

    direction = None
    if left != right:
        direction = Direction.LEFT if left else Direction.RIGHT

    if pressed[keys["attack"]]:
        return ATTACK
    if pressed[keys["jump"]]:
        if direction is None:
            direction = Direction.RIGHT if facing > 0 else Direction.LEFT
        return Jump(direction)
    if direction is not None:
        return Move(direction)
    return IDLE
