"""entities package – The Fighter shared by player and AI."""

from .fighter import Fighter
