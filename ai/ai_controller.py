"""
ai_controller.py – Per-frame decision engine for the AI fighter.

The controller is called once per frame with both fighters and the game
clock (ms) and returns exactly one ``ActionIntent``.

Per frame:
    1. tick attack / jump cooldowns (frames, never below zero)
    2. either fighter dead          → Idle
    3. own attack animation running → repeat last action
    4. inside reaction-time window  → repeat last action
    5. otherwise run the decision cascade:

       mistake → attack → jump → positioning → strafe / idle

Difficulty only changes constants, plus one easy-tier rule: every third
strike is a deliberate whiff.  All randomness comes from the injected
``rng`` (anything with a ``random()`` method), so a scripted source makes
every decision reproducible.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from settings import (
    DEFAULT_DIFFICULTY,
    AI_DEFENSIVE_JUMP_DISTANCE, AI_OFFENSIVE_JUMP_MIN, AI_OFFENSIVE_JUMP_MAX,
    AI_JUMP_COOLDOWN, AI_COMFORT_BAND, AI_STRAFE_CHANCE, AI_EASY_MISS_EVERY,
)
from ai.actions import (
    ActionIntent, Direction, Jump, Move, ATTACK, IDLE, MISTAKE_ACTIONS,
    describe,
)
from ai.difficulty import Difficulty, DifficultyProfile, get_profile

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Fighter view (what the AI is allowed to read)
# ══════════════════════════════════════════════════════════

class FighterView(Protocol):
    x: float
    y: float
    width: float
    dead: bool
    is_attacking: bool


@dataclass(frozen=True)
class FighterSnapshot:
    """Plain read-only fighter state for callers without an entity."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    dead: bool = False
    is_attacking: bool = False


def horizontal_distance(a: FighterView, b: FighterView) -> float:
    """Center-to-center distance along the x axis."""
    return abs((a.x + a.width / 2) - (b.x + b.width / 2))


# ══════════════════════════════════════════════════════════
#  Engine state
# ══════════════════════════════════════════════════════════

@dataclass
class EngineState:
    """Mutable memory owned by exactly one controller."""
    profile: DifficultyProfile
    last_decision_time: float = 0.0
    current_action: ActionIntent | None = None
    attack_cooldown: int = 0
    jump_cooldown: int = 0
    strike_count: int = 0


# ══════════════════════════════════════════════════════════
#  AI Controller
# ══════════════════════════════════════════════════════════

class AIController:
    """Difficulty-tiered decision engine.  One instance per AI fighter."""

    def __init__(self, difficulty=DEFAULT_DIFFICULTY, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.state = EngineState(profile=get_profile(difficulty))

    # ── Read-only views ───────────────────────────────────

    @property
    def difficulty(self) -> Difficulty:
        return self.state.profile.tier

    @property
    def reaction_time(self) -> float:
        return self.state.profile.reaction_time

    @property
    def params(self) -> DifficultyProfile:
        return self.state.profile

    @property
    def attack_cooldown(self) -> int:
        return self.state.attack_cooldown

    @property
    def jump_cooldown(self) -> int:
        return self.state.jump_cooldown

    @property
    def strike_count(self) -> int:
        return self.state.strike_count

    @property
    def current_action(self) -> ActionIntent | None:
        return self.state.current_action

    @property
    def last_decision_time(self) -> float:
        return self.state.last_decision_time

    # ── Configuration ─────────────────────────────────────

    def configure(self, difficulty) -> None:
        """Switch tier.  Applies from the next fresh decision on.

        Cooldowns, strike count and the remembered action are kept.
        """
        profile = get_profile(difficulty)
        self.state.profile = profile
        logger.info("AI difficulty set to %s (reaction %dms)",
                    profile.tier.value, profile.reaction_time)

    def reset(self) -> None:
        """Forget everything but the tier (new round)."""
        self.state = EngineState(profile=self.state.profile)
        logger.info("AI state reset (%s)", self.difficulty.value)

    # ══════════════════════════════════════════════════════
    #  Main Update
    # ══════════════════════════════════════════════════════

    def step(self, me: FighterView, opponent: FighterView,
             now: float) -> ActionIntent:
        """One frame of AI logic.  Always returns an intent."""
        st = self.state

        if st.attack_cooldown > 0:
            st.attack_cooldown -= 1
        if st.jump_cooldown > 0:
            st.jump_cooldown -= 1

        if me.dead or opponent.dead:
            return IDLE

        # No new decision while our own swing is in flight
        if me.is_attacking:
            return self._continue_current_action()

        if now - st.last_decision_time < st.profile.reaction_time:
            return self._continue_current_action()

        st.last_decision_time = now
        distance = horizontal_distance(me, opponent)
        toward = Direction.toward(me.x, opponent.x)

        action = self._decide(distance, toward)
        st.current_action = action
        logger.debug("[%s] t=%.0f dist=%.1f → %s",
                     st.profile.tier.value, now, distance, describe(action))
        return action

    def _continue_current_action(self) -> ActionIntent:
        if self.state.current_action is not None:
            return self.state.current_action
        return IDLE

    # ══════════════════════════════════════════════════════
    #  Decision cascade
    # ══════════════════════════════════════════════════════

    def _decide(self, distance: float, toward: Direction) -> ActionIntent:
        st = self.state
        p = st.profile
        roll = self.rng.random
        away = toward.opposite

        # Blunder: ignores range and every cooldown
        if roll() < p.mistakes:
            index = int(roll() * len(MISTAKE_ACTIONS))
            return MISTAKE_ACTIONS[min(index, len(MISTAKE_ACTIONS) - 1)]

        # Priority 1: attack.  A failed roll falls through to jump/move.
        if distance < p.attack_range and st.attack_cooldown == 0:
            if roll() < p.aggressiveness:
                if p.tier is Difficulty.EASY:
                    st.strike_count += 1
                    if st.strike_count % AI_EASY_MISS_EVERY == 0:
                        st.attack_cooldown = p.attack_cooldown_min
                        logger.debug("Easy strike #%d whiffed on purpose",
                                     st.strike_count)
                        return IDLE

                spread = p.attack_cooldown_max - p.attack_cooldown_min
                st.attack_cooldown = round(p.attack_cooldown_min + roll() * spread)
                return ATTACK

        # Priority 2: jump
        if st.jump_cooldown == 0:
            if distance < AI_DEFENSIVE_JUMP_DISTANCE and roll() < p.defensiveness:
                st.jump_cooldown = AI_JUMP_COOLDOWN
                return Jump(away)

            if (AI_OFFENSIVE_JUMP_MIN < distance < AI_OFFENSIVE_JUMP_MAX
                    and roll() < p.jump_chance):
                st.jump_cooldown = AI_JUMP_COOLDOWN
                return Jump(toward)

        # Priority 3: spacing
        if distance > p.comfort_distance + AI_COMFORT_BAND:
            return Move(toward)

        if distance < p.comfort_distance - AI_COMFORT_BAND and roll() < p.defensiveness:
            return Move(away)

        # Good distance – strafe or wait
        if roll() < AI_STRAFE_CHANCE:
            return Move(Direction.LEFT if roll() < 0.5 else Direction.RIGHT)

        return IDLE
