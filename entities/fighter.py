"""
fighter.py – Side-view fighter entity shared by the player and the AI.

The fighter is the host half of the AI contract: it exposes the fields the
decision engine reads (``x``, ``y``, ``width``, ``dead``, ``is_attacking``)
and turns the engine's ``ActionIntent`` into motion and animation.

Physics run in frames (the game ticks at ``FPS``):
    Move   – walk at FIGHTER_SPEED
    Jump   – only from the ground; upward JUMP_VELOCITY + sideways drift
    Attack – ATTACK_DURATION_FRAMES swing, can connect inside the active window
    Idle   – stop walking
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

import pygame
from settings import (
    CHAR_WIDTH, CHAR_HEIGHT, ARENA_FLOOR_Y, ARENA_LEFT, ARENA_RIGHT,
    FIGHTER_SPEED, JUMP_VELOCITY, JUMP_DRIFT_SPEED, GRAVITY, FIGHTER_MAX_HP,
    ATTACK_DURATION_FRAMES, ATTACK_ACTIVE_START, ATTACK_ACTIVE_END,
    WHITE, YELLOW,
)
from ai.actions import ActionIntent, Attack, Jump, Move, Idle, is_intent


class Fighter:
    """One combatant.  Position is the top-left corner, in pixels."""

    def __init__(self, name: str, x: float, color: tuple,
                 facing: int = 1, max_hp: int = FIGHTER_MAX_HP):
        self.name = name
        self.color = color
        self.width = CHAR_WIDTH
        self.height = CHAR_HEIGHT
        self.max_hp = max_hp
        self.reset(x, facing)

    def reset(self, x: float, facing: int = 1):
        """Restore a fresh, grounded, full-health fighter at *x*."""
        self.x = float(x)
        self.y = float(ARENA_FLOOR_Y - self.height)
        self.vx = 0.0
        self.vy = 0.0
        self.facing = facing           # 1 = right, -1 = left
        self.hp = self.max_hp
        self.dead = False

        # Combat state
        self.is_attacking = False
        self.attack_frame = 0
        self.swing_id = 0              # bumps every new swing (one hit per swing)

    # ── Properties ────────────────────────────────────────

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def on_ground(self) -> bool:
        return self.y >= ARENA_FLOOR_Y - self.height

    @property
    def attack_active(self) -> bool:
        """True while the swing is inside its hit window."""
        return (self.is_attacking
                and ATTACK_ACTIVE_START <= self.attack_frame <= ATTACK_ACTIVE_END)

    # ── Intents ───────────────────────────────────────────

    def apply_intent(self, intent: ActionIntent):
        """Translate one intent into this frame's motion / animation."""
        if not is_intent(intent):
            raise TypeError(f"not an ActionIntent: {intent!r}")
        if self.dead:
            self.vx = 0.0
            return

        if isinstance(intent, Attack):
            self.start_attack()
        elif isinstance(intent, Jump):
            if self.on_ground:
                self.vy = -JUMP_VELOCITY
                self.vx = JUMP_DRIFT_SPEED * intent.direction.sign
        elif isinstance(intent, Move):
            # Airborne fighters keep their jump arc
            if self.on_ground:
                self.vx = FIGHTER_SPEED * intent.direction.sign
        elif isinstance(intent, Idle):
            if self.on_ground:
                self.vx = 0.0

    def start_attack(self):
        if self.is_attacking or self.dead:
            return
        self.is_attacking = True
        self.attack_frame = 0
        self.swing_id += 1
        if self.on_ground:
            self.vx = 0.0

    def take_damage(self, amount: int) -> int:
        """Reduce HP; marks the fighter dead at zero.  Returns damage dealt."""
        if self.dead:
            return 0
        actual = min(self.hp, max(0, int(amount)))
        self.hp -= actual
        logger.debug("%s health reduced to %d (took %d)", self.name, self.hp, actual)
        if self.hp <= 0:
            self.dead = True
            self.is_attacking = False
            self.vx = 0.0
            logger.info("%s is down", self.name)
        return actual

    def face_toward(self, target_x: float):
        self.facing = 1 if target_x > self.center_x else -1

    # ── Per-frame update ──────────────────────────────────

    def update(self):
        """Advance one frame of gravity, motion and attack animation."""
        self.x += self.vx

        self.vy += GRAVITY
        self.y += self.vy
        floor_y = ARENA_FLOOR_Y - self.height
        if self.y >= floor_y:
            self.y = float(floor_y)
            self.vy = 0.0

        # Clamp to arena
        self.x = max(float(ARENA_LEFT), min(self.x, float(ARENA_RIGHT - self.width)))

        if self.is_attacking:
            self.attack_frame += 1
            if self.attack_frame >= ATTACK_DURATION_FRAMES:
                self.is_attacking = False
                self.attack_frame = 0

    # ── Drawing ───────────────────────────────────────────

    def draw(self, surface: pygame.Surface):
        body = self.rect
        color = (90, 90, 90) if self.dead else self.color
        pygame.draw.rect(surface, color, body)
        pygame.draw.rect(surface, WHITE, body, width=2)

        if self.is_attacking:
            reach = 70 if self.attack_active else 35
            arm_x = body.right if self.facing > 0 else body.left - reach
            arm = pygame.Rect(arm_x, body.top + 30, reach, 16)
            pygame.draw.rect(surface, YELLOW if self.attack_active else WHITE, arm)

    def get_state_snapshot(self) -> dict:
        """Compact state for match-end logs."""
        return {
            "name": self.name,
            "hp": self.hp,
            "x": round(self.x, 1),
            "airborne": not self.on_ground,
            "facing": "right" if self.facing > 0 else "left",
            "dead": self.dead,
        }
