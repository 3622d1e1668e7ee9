"""systems package – Combat resolution."""

from .combat_system import CombatSystem, CombatResult
