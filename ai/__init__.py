"""
ai package – Difficulty-tiered decision engine for the AI fighter.

Modules:
    actions            – ActionIntent variants (Attack / Jump / Move / Idle)
    difficulty         – Tier enum and immutable DifficultyProfile table
    ai_controller      – AIController: per-frame decision cascade
    stats              – Per-match decision statistics + action-mix chart
    simulation_runner  – Headless AI-vs-AI matches
"""
