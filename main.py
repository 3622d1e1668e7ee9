"""
main.py - Entry point for Arena Duel.

Integrates all systems:
- Fighter entities (entities/fighter.py)
- Difficulty-tiered AI decision engine (ai/ai_controller.py)
- Hit resolution (systems/combat_system.py)
- Decision statistics (ai/stats.py)
- Headless AI-vs-AI simulation (ai/simulation_runner.py)

Run:  python main.py [--difficulty hard]
      python main.py --simulate 50 --difficulty hard --opponent-difficulty easy
"""
VERSION = "1.0.0"

import argparse
import logging
import random
import sys

import pygame

logger = logging.getLogger(__name__)

# ── Project imports ───────────────────────────────────────
from settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE, BG_COLOR, WHITE, BLUE, RED,
    ARENA_FLOOR_Y, PLAYER_START_X, AI_START_X, PLAYER_HB_X, AI_HB_X,
    DEFAULT_DIFFICULTY, SIM_CHART_PATH, SMALL_FONT_SIZE,
)
from ai.actions import describe
from ai.ai_controller import AIController
from ai.difficulty import Difficulty
from ai.simulation_runner import SimulationRunner
from ai.stats import DecisionStats
from entities import Fighter
from systems import CombatSystem
from keybinds import intent_from_keys, controls_hint
from utils import draw_text, draw_health_bar, draw_end_screen

# Number keys on the select screen, F-keys for live reconfiguration
_SELECT_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
}
_LIVE_KEYS = {
    pygame.K_F1: Difficulty.EASY,
    pygame.K_F2: Difficulty.MEDIUM,
    pygame.K_F3: Difficulty.HARD,
}


class Game:
    """Top-level game controller.  Owns the loop, events, and rendering."""

    def __init__(self, difficulty: str = DEFAULT_DIFFICULTY,
                 seed: int | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.player = Fighter("Player", PLAYER_START_X, BLUE, facing=1)
        self.enemy = Fighter("AI", AI_START_X, RED, facing=-1)
        self.ai = AIController(difficulty, rng=random.Random(seed))
        self.combat = CombatSystem()
        self.match_stats: DecisionStats | None = None

        # State
        self.game_state = "MENU"   # "MENU" | "PLAYING" | "GAME_OVER"
        self.running = True
        self.winner_text = ""
        self._last_ai_intent = None

    # ── Main loop ─────────────────────────────────────────

    def run(self):
        """Start the game loop."""
        while self.running:
            self.clock.tick(FPS)

            if self.game_state == "MENU":
                self._handle_menu_events()
                self._draw_menu()
            elif self.game_state == "PLAYING":
                self._handle_events()
                self._update()
                self._draw()
            elif self.game_state == "GAME_OVER":
                self._handle_game_over_events()
                self._draw()
                draw_end_screen(self.screen, self.winner_text,
                                self.ai.difficulty.value)
                pygame.display.flip()

        pygame.quit()
        sys.exit()

    # ── Difficulty select (MENU state) ────────────────────

    def _handle_menu_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in _SELECT_KEYS:
                    self.ai.configure(_SELECT_KEYS[event.key])
                    self._start_match()
                elif event.key == pygame.K_RETURN:
                    self._start_match()

    def _draw_menu(self):
        self.screen.fill(BG_COLOR)
        cx = SCREEN_WIDTH // 2
        title_font = pygame.font.SysFont(None, 54)
        opt_font = pygame.font.SysFont(None, 36)

        title = title_font.render("Arena Duel", True, WHITE)
        self.screen.blit(title, (cx - title.get_width() // 2, 100))

        y = 220
        for i, tier in enumerate(Difficulty, start=1):
            marker = "  <" if tier is self.ai.difficulty else ""
            surf = opt_font.render(f"{i}.  {tier.value.title()}{marker}", True, WHITE)
            self.screen.blit(surf, (cx - surf.get_width() // 2, y))
            y += 50

        draw_text(self.screen, "Press 1-3 to pick  |  ENTER keeps current  |  ESC quits",
                  cx, SCREEN_HEIGHT - 50, (140, 140, 140), SMALL_FONT_SIZE, center=True)
        pygame.display.flip()

    # ── Match lifecycle ───────────────────────────────────

    def _start_match(self):
        self.player.reset(PLAYER_START_X, facing=1)
        self.enemy.reset(AI_START_X, facing=-1)
        self.ai.reset()
        self.combat.reset()
        self.match_stats = DecisionStats(f"{self.ai.difficulty.value} AI")
        self.winner_text = ""
        self._last_ai_intent = None
        self.game_state = "PLAYING"
        logger.info("Match started vs %s AI", self.ai.difficulty.value)

    def _back_to_menu(self):
        self.winner_text = ""
        self.game_state = "MENU"
        logger.info("Back to difficulty select")

    def _on_match_end(self, text: str):
        self.winner_text = text
        self.game_state = "GAME_OVER"
        logger.info("Match over: %s | %s | %s", text,
                    self.player.get_state_snapshot(),
                    self.enemy.get_state_snapshot())
        if self.match_stats is not None:
            self.match_stats.log_summary()

    # ── Solo match (PLAYING state) ────────────────────────

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in _LIVE_KEYS:
                    self.ai.configure(_LIVE_KEYS[event.key])

    def _update(self):
        now = pygame.time.get_ticks()

        player_intent = intent_from_keys(pygame.key.get_pressed(),
                                         facing=self.player.facing)
        ai_intent = self.ai.step(self.enemy, self.player, now)
        self._last_ai_intent = ai_intent
        if self.match_stats is not None:
            self.match_stats.record(ai_intent)

        self.player.face_toward(self.enemy.center_x)
        self.enemy.face_toward(self.player.center_x)
        self.player.apply_intent(player_intent)
        self.enemy.apply_intent(ai_intent)
        self.player.update()
        self.enemy.update()

        self.combat.resolve(self.player, self.enemy)
        self.combat.resolve(self.enemy, self.player)

        if self.enemy.dead:
            self._on_match_end("You Win!")
        elif self.player.dead:
            self._on_match_end("AI Wins")

    def _handle_game_over_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self._start_match()
                elif event.key == pygame.K_m:
                    self._back_to_menu()

    # ── Drawing ───────────────────────────────────────────

    def _draw(self):
        self.screen.fill(BG_COLOR)
        pygame.draw.line(self.screen, (80, 80, 80),
                         (0, ARENA_FLOOR_Y), (SCREEN_WIDTH, ARENA_FLOOR_Y), 2)
        self.player.draw(self.screen)
        self.enemy.draw(self.screen)

        draw_health_bar(self.screen, PLAYER_HB_X, self.player, "Player")
        draw_health_bar(self.screen, AI_HB_X, self.enemy,
                        f"AI ({self.ai.difficulty.value})")

        # Debug HUD
        intent_label = describe(self._last_ai_intent) if self._last_ai_intent else "-"
        state_label = (
            f"AI: {intent_label}  |  atk cd {self.ai.attack_cooldown}"
            f"  |  jump cd {self.ai.jump_cooldown}"
        )
        draw_text(self.screen, state_label, SCREEN_WIDTH // 2 - 150, 70, WHITE, 18)
        draw_text(self.screen, controls_hint() + "  F1-F3=Difficulty",
                  SCREEN_WIDTH // 2 - 250, SCREEN_HEIGHT - 28, WHITE, 18)
        if self.game_state == "PLAYING":
            pygame.display.flip()


# ══════════════════════════════════════════════════════════
#  CLI
# ══════════════════════════════════════════════════════════

def build_arg_parser() -> argparse.ArgumentParser:
    tiers = [t.value for t in Difficulty]
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--difficulty", choices=tiers, default=DEFAULT_DIFFICULTY,
                        help="AI tier (in --simulate: the left fighter)")
    parser.add_argument("--opponent-difficulty", choices=tiers, default=None,
                        help="right fighter tier for --simulate (default: same)")
    parser.add_argument("--simulate", type=int, metavar="N", default=0,
                        help="run N headless AI-vs-AI matches and exit")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--chart", metavar="PATH", default=None,
                        help=f"save the left AI's action mix (e.g. {SIM_CHART_PATH})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def run_simulation(args) -> dict:
    runner = SimulationRunner(
        n_matches=args.simulate,
        left_difficulty=args.difficulty,
        right_difficulty=args.opponent_difficulty or args.difficulty,
        seed=args.seed,
    )
    results = runner.run()
    if args.chart and results:
        results[-1].left_stats.plot_action_mix(args.chart)
    return runner.summary()


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Arena Duel %s", VERSION)
    if args.simulate > 0:
        run_simulation(args)
        return
    Game(difficulty=args.difficulty, seed=args.seed).run()


# ── Run ───────────────────────────────────────────────────
if __name__ == "__main__":
    main()
