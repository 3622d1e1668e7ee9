import random

import pytest

from ai.actions import ATTACK, IDLE, Direction, Jump, Move
from ai.ai_controller import AIController, horizontal_distance
from ai.difficulty import Difficulty
from settings import AI_JUMP_COOLDOWN
from tests.helpers import ScriptedRandom, fighter


# ── Per-frame gating ──────────────────────────────────────


def test_first_frames_wait_for_reaction_time(make_ai, scripted):
    ai = make_ai("medium")

    assert ai.step(fighter(0), fighter(150), now=100) == IDLE
    assert scripted.draws == 0
    assert ai.last_decision_time == 0
    assert ai.current_action is None


def test_attack_when_in_range_and_roll_succeeds(make_ai, scripted):
    ai = make_ai("medium")
    me, opponent = fighter(0), fighter(150)
    # mistake fails, aggressiveness succeeds, cooldown roll mid-range
    scripted.extend([0.9, 0.1, 0.5])

    assert horizontal_distance(me, opponent) == 150
    assert ai.step(me, opponent, now=400) == ATTACK
    assert ai.attack_cooldown == 210
    assert 180 <= ai.attack_cooldown <= 240
    assert ai.current_action == ATTACK
    assert ai.last_decision_time == 400


def test_attack_range_threshold_medium(make_ai, scripted):
    ai = make_ai("medium")
    scripted.extend([0.9, 0.1, 0.0])
    assert ai.step(fighter(0), fighter(194), now=400) == ATTACK
    assert ai.attack_cooldown == 180

    ai = make_ai("medium")
    scripted.extend([0.9, 0.1, 0.0])
    result = ai.step(fighter(0), fighter(196), now=400)
    assert result != ATTACK
    assert ai.attack_cooldown == 0
    # 0.1 was spent on the strafe roll instead, 0.0 picks left
    assert result == Move(Direction.LEFT)


def test_reaction_gate_repeats_previous_action(make_ai, scripted):
    ai = make_ai("medium")
    scripted.extend([0.9, 0.1, 0.5])
    first = ai.step(fighter(0), fighter(150), now=400)
    draws = scripted.draws

    assert ai.step(fighter(0), fighter(600), now=500) == first
    assert ai.step(fighter(0), fighter(600), now=799) == first
    assert scripted.draws == draws
    assert ai.last_decision_time == 400

    # Window elapsed: far away now, so it walks in
    assert ai.step(fighter(0), fighter(600), now=800) == Move(Direction.RIGHT)
    assert ai.last_decision_time == 800


def test_clock_going_backwards_does_not_decide(make_ai, scripted):
    ai = make_ai("hard")
    ai.step(fighter(0), fighter(600), now=1000)
    draws = scripted.draws

    assert ai.step(fighter(0), fighter(600), now=500) == ai.current_action
    assert scripted.draws == draws
    assert ai.last_decision_time == 1000


def test_dead_fighter_short_circuits_to_idle(make_ai, scripted):
    ai = make_ai("medium")
    scripted.extend([0.9, 0.1, 0.5])
    ai.step(fighter(0), fighter(150), now=400)
    cooldown = ai.attack_cooldown

    assert ai.step(fighter(0), fighter(150, dead=True), now=5000) == IDLE
    assert ai.step(fighter(0, dead=True), fighter(150), now=6000) == IDLE
    assert ai.last_decision_time == 400
    assert ai.current_action == ATTACK
    assert ai.attack_cooldown == cooldown - 2


def test_attacking_lockout(make_ai, scripted):
    ai = make_ai("medium")
    assert ai.step(fighter(0, is_attacking=True), fighter(150), now=5000) == IDLE
    assert scripted.draws == 0

    scripted.extend([0.9, 0.1, 0.5])
    ai.step(fighter(0), fighter(150), now=5000)
    draws = scripted.draws

    assert ai.step(fighter(0, is_attacking=True), fighter(900), now=9000) == ATTACK
    assert scripted.draws == draws
    assert ai.last_decision_time == 5000


def test_cooldowns_tick_down_by_one_and_stop_at_zero(make_ai):
    ai = make_ai("medium")
    ai.state.attack_cooldown = 3
    ai.state.jump_cooldown = 2

    seen = []
    for _ in range(5):
        ai.step(fighter(0, dead=True), fighter(150), now=0)
        seen.append((ai.attack_cooldown, ai.jump_cooldown))

    assert seen == [(2, 1), (1, 0), (0, 0), (0, 0), (0, 0)]


# ── Decision cascade ──────────────────────────────────────


def test_mistake_ignores_cooldowns(make_ai, scripted):
    ai = make_ai("medium")
    ai.state.attack_cooldown = 50
    # mistake roll hits, 0.55 * 6 → index 3 (Attack)
    scripted.extend([0.1, 0.55])

    assert ai.step(fighter(0), fighter(900), now=400) == ATTACK
    assert ai.attack_cooldown == 49


def test_mistake_set_covers_every_action(make_ai, scripted):
    ai = make_ai("hard")
    picks = []
    for i in range(6):
        scripted.extend([0.0, (i + 0.5) / 6])
        picks.append(ai.step(fighter(0), fighter(150), now=150 * (i + 1)))

    assert picks == [
        IDLE,
        Move(Direction.LEFT),
        Move(Direction.RIGHT),
        ATTACK,
        Jump(Direction.LEFT),
        Jump(Direction.RIGHT),
    ]


def test_failed_aggression_roll_falls_through_to_defensive_jump(make_ai, scripted):
    ai = make_ai("medium")
    scripted.extend([0.9, 0.5, 0.1])

    assert ai.step(fighter(100), fighter(150), now=400) == Jump(Direction.LEFT)
    assert ai.jump_cooldown == 120
    assert ai.attack_cooldown == 0


def test_defensive_jump_goes_away_from_left_opponent(make_ai, scripted):
    ai = make_ai("hard")
    scripted.extend([0.99, 0.99, 0.1])

    assert ai.step(fighter(200), fighter(150), now=150) == Jump(Direction.RIGHT)


def test_offensive_jump_goes_toward_opponent(make_ai, scripted):
    ai = make_ai("medium")
    scripted.extend([0.9, 0.1])

    assert ai.step(fighter(0), fighter(300), now=400) == Jump(Direction.RIGHT)
    assert ai.jump_cooldown == 120


def test_jump_cooldown_blocks_jumping(make_ai, scripted):
    ai = make_ai("medium")
    ai.state.jump_cooldown = 10
    scripted.extend([0.9, 0.0])

    # Too far for comfort, so it walks instead of jumping
    assert ai.step(fighter(0), fighter(300), now=400) == Move(Direction.RIGHT)
    assert ai.jump_cooldown == 9


def test_moves_toward_distant_opponent(make_ai):
    ai = make_ai("hard")
    assert ai.step(fighter(600), fighter(100), now=150) == Move(Direction.LEFT)


def test_retreats_when_too_close(make_ai, scripted):
    ai = make_ai("hard")
    # mistake fails, aggressiveness fails, retreat roll succeeds
    scripted.extend([0.99, 0.99, 0.1])

    assert ai.step(fighter(0), fighter(110), now=150) == Move(Direction.LEFT)


def test_strafe_or_idle_at_comfort_distance(make_ai, scripted):
    ai = make_ai("medium")
    scripted.extend([0.9, 0.2, 0.7])
    assert ai.step(fighter(0), fighter(200), now=400) == Move(Direction.RIGHT)

    scripted.extend([0.9, 0.5])
    assert ai.step(fighter(0), fighter(200), now=800) == IDLE


def test_retreat_and_approach_follow_opponent_side(make_ai, scripted):
    ai = make_ai("hard")
    scripted.extend([0.99, 0.99, 0.1])
    assert ai.step(fighter(300), fighter(190), now=150) == Move(Direction.RIGHT)
    assert ai.step(fighter(300), fighter(900), now=300) == Move(Direction.RIGHT)


# ── Exact threshold values ────────────────────────────────


@pytest.mark.parametrize("distance, expected", [
    (99.999, Jump(Direction.LEFT)),     # defensive jump, strictly below 100
    (100, Move(Direction.LEFT)),        # no jump, retreat roll
    (250, Move(Direction.LEFT)),        # offensive window is open at 250, strafe
    (250.5, Jump(Direction.RIGHT)),
    (399.5, Jump(Direction.RIGHT)),
    (400, Move(Direction.RIGHT)),       # window closed, approach
])
def test_medium_jump_window_edges(make_ai, scripted, distance, expected):
    ai = make_ai("medium")
    ai.state.attack_cooldown = 50
    # mistake fails, every later roll succeeds
    scripted.extend([0.9, 0.0, 0.0])

    assert ai.step(fighter(0), fighter(distance), now=400) == expected
    if isinstance(expected, Jump):
        assert ai.jump_cooldown == AI_JUMP_COOLDOWN
    else:
        assert ai.jump_cooldown == 0


@pytest.mark.parametrize("distance, expected", [
    (220, IDLE),                        # comfort 170 + band 50, inclusive
    (220.5, Move(Direction.RIGHT)),
    (120, IDLE),                        # comfort 170 - band 50, inclusive
    (119.5, Move(Direction.LEFT)),
])
def test_hard_comfort_band_edges(make_ai, scripted, distance, expected):
    ai = make_ai("hard")
    ai.state.attack_cooldown = 50
    # mistake fails, retreat roll succeeds, strafe roll fails
    scripted.extend([0.99, 0.4])

    assert ai.step(fighter(0), fighter(distance), now=150) == expected
    assert ai.jump_cooldown == 0


def test_easy_every_third_strike_whiffs(make_ai, scripted):
    ai = make_ai("easy")
    results = []
    for attempt in range(1, 10):
        ai.state.attack_cooldown = 0
        if attempt % 3 == 0:
            scripted.extend([0.99, 0.0])
        else:
            scripted.extend([0.99, 0.0, 0.5])
        results.append(ai.step(fighter(0), fighter(100), now=1200 * attempt))
        assert ai.attack_cooldown == 120
        assert scripted.pending == 0

    assert [i for i, r in enumerate(results, start=1) if r == IDLE] == [3, 6, 9]
    assert all(r == ATTACK for i, r in enumerate(results, start=1) if i % 3)
    assert ai.strike_count == 9


def test_strike_count_only_moves_on_easy_attack_attempts(make_ai, scripted):
    ai = make_ai("easy")
    scripted.extend([0.99, 0.95])  # aggressiveness roll fails
    ai.step(fighter(0), fighter(100), now=1200)
    assert ai.strike_count == 0

    ai = make_ai("hard")
    scripted.extend([0.99, 0.0, 0.0])
    assert ai.step(fighter(0), fighter(100), now=150) == ATTACK
    assert ai.strike_count == 0


# ── Configuration ─────────────────────────────────────────


def test_configure_swaps_profile_but_keeps_memory(make_ai, scripted):
    ai = make_ai("easy")
    scripted.extend([0.99, 0.0, 0.0])
    ai.step(fighter(0), fighter(100), now=1200)
    ai.state.jump_cooldown = 30

    ai.configure("hard")

    assert ai.difficulty is Difficulty.HARD
    assert ai.reaction_time == 150
    assert ai.params.attack_range == 220
    assert ai.attack_cooldown == 120
    assert ai.jump_cooldown == 30
    assert ai.strike_count == 1
    assert ai.current_action == ATTACK
    assert ai.last_decision_time == 1200


def test_configure_unknown_tier_falls_back_to_medium(make_ai):
    ai = make_ai("hard")
    ai.configure("nightmare")
    assert ai.difficulty is Difficulty.MEDIUM
    assert ai.reaction_time == 400

    ai.configure(" Easy ")
    assert ai.difficulty is Difficulty.EASY


def test_reset_clears_round_state_and_keeps_tier(make_ai, scripted):
    ai = make_ai("easy")
    scripted.extend([0.99, 0.0, 0.0])
    ai.step(fighter(0), fighter(100), now=1200)
    ai.state.jump_cooldown = 40

    ai.reset()

    assert ai.difficulty is Difficulty.EASY
    assert ai.attack_cooldown == 0
    assert ai.jump_cooldown == 0
    assert ai.strike_count == 0
    assert ai.current_action is None
    assert ai.last_decision_time == 0


# ── Determinism ───────────────────────────────────────────


def _replay(seed: int) -> list:
    ai = AIController("hard", rng=random.Random(seed))
    out = []
    for frame in range(600):
        me = fighter(100 + (frame * 7) % 500, is_attacking=frame % 50 < 5)
        opponent = fighter(400 + (frame * 3) % 300)
        out.append(ai.step(me, opponent, now=frame * 1000 / 60))
    return out


def test_same_seed_same_decisions():
    assert _replay(7) == _replay(7)


def test_default_rng_is_private():
    a, b = AIController("hard"), AIController("hard")
    assert a.rng is not b.rng
    assert isinstance(a.rng, random.Random)


def test_scripted_source_is_enough_to_drive_the_cascade():
    ai = AIController("medium", rng=ScriptedRandom([0.9, 0.1, 1.0]))
    assert ai.step(fighter(0), fighter(150), now=400) == ATTACK
    assert ai.attack_cooldown == 240
