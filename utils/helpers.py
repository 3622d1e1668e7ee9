"""helpers.py - HUD and overlay drawing for the arena."""

import pygame
from settings import (
    WHITE, GREEN, GRAY, SCREEN_WIDTH, SCREEN_HEIGHT, FONT_SIZE,
    HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT, HEALTHBAR_Y, SMALL_FONT_SIZE,
)

END_HINT = "R = Rematch  |  M = Difficulty menu  |  ESC = Quit"


def draw_text(surface, text, x, y, color=WHITE, size=FONT_SIZE, center=False):
    """Render one line of text.  With *center*, x is the line's midpoint."""
    font = pygame.font.SysFont(None, size)
    rendered = font.render(text, True, color)
    if center:
        x -= rendered.get_width() // 2
    surface.blit(rendered, (x, y))


def draw_health_bar(surface, x, fighter, label):
    """Draw one fighter's health bar with its label above it."""
    frac = fighter.hp / max(1, fighter.max_hp)
    pygame.draw.rect(surface, GRAY, (x, HEALTHBAR_Y, HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT))
    fill_w = int(HEALTHBAR_WIDTH * max(0.0, min(1.0, frac)))
    pygame.draw.rect(surface, GREEN, (x, HEALTHBAR_Y, fill_w, HEALTHBAR_HEIGHT))
    pygame.draw.rect(surface, WHITE, (x, HEALTHBAR_Y, HEALTHBAR_WIDTH, HEALTHBAR_HEIGHT), 2)
    draw_text(surface, label, x, HEALTHBAR_Y + HEALTHBAR_HEIGHT + 4, WHITE, SMALL_FONT_SIZE)


def end_screen_lines(message, tier):
    """(text, font size, y offset from screen middle) for the result overlay."""
    return [
        (message, 72, -60),
        (f"vs {tier} AI", 36, 0),
        (END_HINT, 28, 50),
    ]


def draw_end_screen(surface, message, tier):
    """Dim the arena and show the result, the AI tier and the key hints."""
    overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    overlay.set_alpha(180)
    overlay.fill((0, 0, 0))
    surface.blit(overlay, (0, 0))

    for text, size, dy in end_screen_lines(message, tier):
        draw_text(surface, text, SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + dy,
                  WHITE, size, center=True)
