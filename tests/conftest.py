from __future__ import annotations

import pytest

from ai.ai_controller import AIController
from tests.helpers import ScriptedRandom


@pytest.fixture
def scripted() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def make_ai(scripted):
    def _make(difficulty: str = "medium") -> AIController:
        return AIController(difficulty, rng=scripted)
    return _make
