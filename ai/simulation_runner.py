"""
simulation_runner.py – Headless AI-vs-AI matches.

Runs N matches where an AIController drives each fighter.  Nothing is
rendered and no wall clock is read: the game clock is virtual
(``frame * FRAME_MS``), so a seeded run is fully reproducible.

Usage (from CLI):
    python main.py --simulate 50 --difficulty hard --opponent-difficulty easy

Architecture:
    SimulationRunner owns two Fighters, two AIControllers and a
    CombatSystem, and replays the same per-frame order the game loop
    uses: decide → apply intent → physics → hit resolution.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

import numpy as np

from settings import (
    FRAME_MS, SIM_MAX_MATCH_FRAMES,
    PLAYER_START_X, AI_START_X, BLUE, RED,
)
from ai.ai_controller import AIController
from ai.stats import DecisionStats
from entities.fighter import Fighter
from systems.combat_system import CombatSystem

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════
#  Per-match result
# ══════════════════════════════════════════════════════════

@dataclass
class MatchResult:
    """Lightweight record for one simulated match."""
    match_number: int = 0
    winner: str = ""               # "left", "right" or "draw"
    frames: int = 0
    duration_ms: float = 0.0
    left_hp: int = 0
    right_hp: int = 0
    left_stats: DecisionStats | None = field(default=None, repr=False)
    right_stats: DecisionStats | None = field(default=None, repr=False)


# ══════════════════════════════════════════════════════════
#  Simulation Runner
# ══════════════════════════════════════════════════════════

class SimulationRunner:
    """Run *n_matches* headless matches between two AI fighters.

    Parameters
    ----------
    n_matches : int
        How many matches to run (at least one).
    left_difficulty, right_difficulty : str
        Tier for each side.
    seed : int | None
        Seeds both controllers' random sources.
    max_frames : int
        Round timer; a match that reaches it is a draw.
    """

    def __init__(self, n_matches: int = 10,
                 left_difficulty: str = "medium",
                 right_difficulty: str = "medium",
                 seed: int | None = None,
                 max_frames: int = SIM_MAX_MATCH_FRAMES) -> None:
        self._n_matches = max(1, n_matches)
        self._max_frames = max(1, max_frames)
        self._results: list[MatchResult] = []

        seeder = random.Random(seed)
        self.left_ai = AIController(left_difficulty,
                                    rng=random.Random(seeder.getrandbits(32)))
        self.right_ai = AIController(right_difficulty,
                                     rng=random.Random(seeder.getrandbits(32)))

        self.left = Fighter("left", PLAYER_START_X, BLUE, facing=1)
        self.right = Fighter("right", AI_START_X, RED, facing=-1)
        self.combat = CombatSystem()

    @property
    def results(self) -> list[MatchResult]:
        return list(self._results)

    # ── Public entry point ────────────────────────────────

    def run(self) -> list[MatchResult]:
        """Execute all N matches, then log and return results."""
        for i in range(1, self._n_matches + 1):
            logger.info("=== Simulation match %d / %d ===", i, self._n_matches)
            result = self._run_one_match(i)
            self._results.append(result)
            logger.info(
                "Match %d: winner=%s  frames=%d  hp=%d/%d",
                i, result.winner, result.frames, result.left_hp, result.right_hp,
            )
        self._log_summary()
        return self.results

    # ── Single match ──────────────────────────────────────

    def _setup_match(self):
        self.left.reset(PLAYER_START_X, facing=1)
        self.right.reset(AI_START_X, facing=-1)
        self.left_ai.reset()
        self.right_ai.reset()
        self.combat.reset()

    def _run_one_match(self, match_number: int) -> MatchResult:
        self._setup_match()
        left, right = self.left, self.right
        left_stats = DecisionStats(f"{self.left_ai.difficulty.value} AI (left)")
        right_stats = DecisionStats(f"{self.right_ai.difficulty.value} AI (right)")

        frame = 0
        while frame < self._max_frames and not (left.dead or right.dead):
            frame += 1
            now = frame * FRAME_MS
            self.step_frame(now, left_stats, right_stats)

        if left.dead and right.dead:
            winner = "draw"
        elif right.dead:
            winner = "left"
        elif left.dead:
            winner = "right"
        else:
            winner = "draw"

        logger.debug("Match %d final state: %s | %s", match_number,
                     left.get_state_snapshot(), right.get_state_snapshot())
        return MatchResult(
            match_number=match_number,
            winner=winner,
            frames=frame,
            duration_ms=frame * FRAME_MS,
            left_hp=left.hp,
            right_hp=right.hp,
            left_stats=left_stats,
            right_stats=right_stats,
        )

    def step_frame(self, now: float, left_stats: DecisionStats | None = None,
                   right_stats: DecisionStats | None = None):
        """One frame: both sides decide, act, move, then hits resolve."""
        left, right = self.left, self.right

        # Decide on the same snapshot of the world
        left_intent = self.left_ai.step(left, right, now)
        right_intent = self.right_ai.step(right, left, now)
        if left_stats is not None:
            left_stats.record(left_intent)
        if right_stats is not None:
            right_stats.record(right_intent)

        left.face_toward(right.center_x)
        right.face_toward(left.center_x)
        left.apply_intent(left_intent)
        right.apply_intent(right_intent)
        left.update()
        right.update()

        self.combat.resolve(left, right)
        self.combat.resolve(right, left)

    # ── Reporting ─────────────────────────────────────────

    def summary(self) -> dict:
        """Win counts and mean match length over all finished matches."""
        wins = {"left": 0, "right": 0, "draw": 0}
        for r in self._results:
            wins[r.winner] += 1
        frames = np.array([r.frames for r in self._results], dtype=np.float64)
        return {
            "matches": len(self._results),
            "left": self.left_ai.difficulty.value,
            "right": self.right_ai.difficulty.value,
            "wins": wins,
            "mean_frames": float(frames.mean()) if frames.size else 0.0,
        }

    def _log_summary(self):
        s = self.summary()
        logger.info(
            "Simulation done: %d matches | %s(left) %d – %d %s(right) | "
            "draws %d | mean %.0f frames",
            s["matches"], s["left"], s["wins"]["left"], s["wins"]["right"],
            s["right"], s["wins"]["draw"], s["mean_frames"],
        )
