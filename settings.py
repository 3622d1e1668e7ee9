"""
settings.py - Game constants for Arena Duel.

All configurable values live here so they're easy to tweak
and easy to reference from any module.
"""

# ── Screen ────────────────────────────────────────────────
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 576
FPS = 60
FRAME_MS = 1000.0 / FPS        # virtual clock step used by headless runs
TITLE = "Arena Duel – Difficulty-Tiered AI"
BG_COLOR = (30, 30, 30)

# ── Arena ─────────────────────────────────────────────────
ARENA_FLOOR_Y = 480            # Y where characters stand
ARENA_LEFT = 0
ARENA_RIGHT = SCREEN_WIDTH

# ── Colors (R, G, B) ─────────────────────────────────────
WHITE = (255, 255, 255)
BLUE = (50, 100, 255)          # Player
RED = (220, 50, 50)            # AI fighter
GREEN = (50, 200, 50)          # Health bar fill
GRAY = (60, 60, 60)            # Health bar background
YELLOW = (255, 220, 60)

# ── Fighter dimensions / physics (per frame) ─────────────
CHAR_WIDTH = 50
CHAR_HEIGHT = 150
FIGHTER_SPEED = 5.0            # horizontal pixels per frame
JUMP_VELOCITY = 20.0           # initial upward pixels per frame
JUMP_DRIFT_SPEED = 6.0         # horizontal pixels per frame while jumping
GRAVITY = 0.7                  # pixels per frame²
FIGHTER_MAX_HP = 100

PLAYER_START_X = 200
AI_START_X = SCREEN_WIDTH - 200 - CHAR_WIDTH

# ── Combat settings ───────────────────────────────────────
ATTACK_DURATION_FRAMES = 24    # full swing animation
ATTACK_ACTIVE_START = 8        # first frame the swing can connect
ATTACK_ACTIVE_END = 16         # last frame the swing can connect
ATTACK_HIT_RANGE = 180         # center-to-center pixels
ATTACK_DAMAGE = 10

# ── AI difficulty tiers ───────────────────────────────────
DEFAULT_DIFFICULTY = "medium"

# Reaction time (ms) between fresh decisions
REACTION_TIMES = {
    "easy": 1200,              # very slow
    "medium": 400,
    "hard": 150,
}

DIFFICULTY_EASY = {
    "aggressiveness": 0.9,     # high so the scripted miss pattern shows
    "defensiveness": 0.6,
    "attack_range": 190,
    "comfort_distance": 320,   # stays very far away
    "jump_chance": 0.12,
    "mistakes": 0.5,
    "attack_cooldown_min": 120,  # frames, fixed 2 s between attacks
    "attack_cooldown_max": 120,
}
DIFFICULTY_MEDIUM = {
    "aggressiveness": 0.28,
    "defensiveness": 0.35,
    "attack_range": 195,
    "comfort_distance": 200,
    "jump_chance": 0.22,
    "mistakes": 0.25,
    "attack_cooldown_min": 180,  # 3 s
    "attack_cooldown_max": 240,  # 4 s
}
DIFFICULTY_HARD = {
    "aggressiveness": 0.38,
    "defensiveness": 0.45,
    "attack_range": 220,
    "comfort_distance": 170,
    "jump_chance": 0.3,
    "mistakes": 0.12,
    "attack_cooldown_min": 90,   # 1.5 s
    "attack_cooldown_max": 150,  # 2.5 s
}

# ── AI decision cascade thresholds ────────────────────────
AI_DEFENSIVE_JUMP_DISTANCE = 100     # jump away when closer than this
AI_OFFENSIVE_JUMP_MIN = 250          # jump toward inside (min, max)
AI_OFFENSIVE_JUMP_MAX = 400
AI_JUMP_COOLDOWN = 120               # frames
AI_COMFORT_BAND = 50                 # slack around comfort distance
AI_STRAFE_CHANCE = 0.3
AI_EASY_MISS_EVERY = 3               # every Nth easy strike whiffs on purpose

# ── Headless simulation ───────────────────────────────────
SIM_MAX_MATCH_FRAMES = FPS * 99      # 99 second round timer
SIM_CHART_PATH = "action_mix.png"

# ── Health bar display ────────────────────────────────────
HEALTHBAR_WIDTH = 300
HEALTHBAR_HEIGHT = 20
HEALTHBAR_Y = 20
PLAYER_HB_X = 20
AI_HB_X = SCREEN_WIDTH - HEALTHBAR_WIDTH - 20

# ── Font ──────────────────────────────────────────────────
FONT_SIZE = 22
SMALL_FONT_SIZE = 18
