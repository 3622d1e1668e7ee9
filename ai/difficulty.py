"""
difficulty.py – Difficulty tiers and their immutable tuning profiles.

Each tier (easy / medium / hard) maps to one ``DifficultyProfile`` built
from the raw tables in ``settings.py``.  Profiles are frozen so the AI can
swap one in with a single assignment; there is never a moment where the
reaction time belongs to one tier and the cascade constants to another.

Unknown tier names fall back to ``medium``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from settings import (
    DEFAULT_DIFFICULTY, REACTION_TIMES,
    DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD,
)

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyProfile:
    """All tunable knobs for one tier – no magic numbers in the cascade."""

    tier: Difficulty
    reaction_time: float          # ms between fresh decisions

    aggressiveness: float         # chance to swing when in range
    defensiveness: float          # chance to back off / jump away
    attack_range: float           # center distance that allows a swing
    comfort_distance: float       # preferred spacing
    jump_chance: float            # chance of an approach jump
    mistakes: float               # chance of a random blunder

    attack_cooldown_min: int      # frames
    attack_cooldown_max: int

    def __post_init__(self):
        if self.attack_cooldown_min > self.attack_cooldown_max:
            raise ValueError(
                f"{self.tier.value}: attack_cooldown_min > attack_cooldown_max"
            )

    @classmethod
    def from_table(cls, tier: Difficulty, reaction_time: float,
                   params: dict) -> DifficultyProfile:
        return cls(tier=tier, reaction_time=reaction_time, **params)


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile.from_table(
        Difficulty.EASY, REACTION_TIMES["easy"], DIFFICULTY_EASY),
    Difficulty.MEDIUM: DifficultyProfile.from_table(
        Difficulty.MEDIUM, REACTION_TIMES["medium"], DIFFICULTY_MEDIUM),
    Difficulty.HARD: DifficultyProfile.from_table(
        Difficulty.HARD, REACTION_TIMES["hard"], DIFFICULTY_HARD),
}


def resolve_difficulty(value) -> Difficulty:
    """Map a tier name (or ``Difficulty``) onto a known tier.

    Matching is case-insensitive and ignores surrounding whitespace.
    Anything unrecognised resolves to ``DEFAULT_DIFFICULTY``.
    """
    if isinstance(value, Difficulty):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for tier in Difficulty:
            if tier.value == key:
                return tier
    logger.warning("Unknown difficulty %r – falling back to %s",
                   value, DEFAULT_DIFFICULTY)
    return Difficulty(DEFAULT_DIFFICULTY)


def get_profile(value) -> DifficultyProfile:
    return DIFFICULTY_PROFILES[resolve_difficulty(value)]
