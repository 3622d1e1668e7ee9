"""utils package – HUD and overlay drawing."""

from .helpers import draw_text, draw_health_bar, draw_end_screen, end_screen_lines
