"""
combat_system.py – Hit resolution between two fighters.

Responsibilities:
- Land a swing when it is in its active frames and the target is in reach
- One hit per swing (tracked by the attacker's swing id)
- Apply damage and report the outcome to the game loop
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

from settings import ATTACK_HIT_RANGE, ATTACK_DAMAGE


class CombatResult:
    """Encapsulates the result of a combat check for the game loop to react."""

    __slots__ = ("hit", "damage", "knockout")

    def __init__(self):
        self.hit = False
        self.damage = 0
        self.knockout = False


class CombatSystem:
    """Central combat resolver."""

    def __init__(self, hit_range: float = ATTACK_HIT_RANGE,
                 damage: int = ATTACK_DAMAGE):
        self.hit_range = hit_range
        self.damage = damage
        # id(attacker) → swing id that already connected
        self._landed_swings: dict[int, int] = {}

    def resolve(self, attacker, defender) -> CombatResult:
        """Check *attacker*'s swing against *defender* for this frame."""
        result = CombatResult()

        if not attacker.attack_active or attacker.dead or defender.dead:
            return result

        # Prevent multi-hit on same swing
        if self._landed_swings.get(id(attacker)) == attacker.swing_id:
            return result

        if abs(attacker.center_x - defender.center_x) > self.hit_range:
            return result

        self._landed_swings[id(attacker)] = attacker.swing_id
        result.hit = True
        result.damage = defender.take_damage(self.damage)
        result.knockout = defender.dead
        logger.debug("%s hits %s for %d", attacker.name, defender.name, result.damage)
        return result

    def reset(self):
        self._landed_swings.clear()
