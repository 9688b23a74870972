"""
Shared pytest fixtures for shift game tests.

This module provides:
- fixed_shift / sequence_shift: deterministic shift source factories
- engine / controller: core objects with a known shift
- game_text / demo_script: bundled YAML text
- fake_console: scripted console input with captured output
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from shiftgame.engine.cipher import EncryptionEngine  # noqa: E402
from shiftgame.engine.round import RoundController  # noqa: E402
from shiftgame.text_loader import TextLoader  # noqa: E402
from tests.mocks.shift import (  # noqa: E402
    FakeConsole,
    FixedShiftSource,
    SequenceShiftSource,
)


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# Shift Source Fixtures
# =============================================================================


@pytest.fixture
def fixed_shift() -> callable:
    """Factory fixture for shift sources that always return one value.

    Usage:
        def test_something(fixed_shift):
            engine = EncryptionEngine(shift_source=fixed_shift(3))
    """

    def _factory(shift: int) -> FixedShiftSource:
        return FixedShiftSource(shift)

    return _factory


@pytest.fixture
def sequence_shift() -> callable:
    """Factory fixture for shift sources that walk through a list."""

    def _factory(shifts: list[int]) -> SequenceShiftSource:
        return SequenceShiftSource(shifts)

    return _factory


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def engine() -> EncryptionEngine:
    """Engine on the default word with shift 3."""
    return EncryptionEngine(shift_source=FixedShiftSource(3))


@pytest.fixture
def controller() -> RoundController:
    """Controller whose engine always picks shift 5."""
    return RoundController(EncryptionEngine(shift_source=FixedShiftSource(5)))


# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def game_text() -> dict[str, Any]:
    """Bundled player-facing text."""
    return TextLoader().game_text()


@pytest.fixture
def demo_script() -> dict[str, Any]:
    """Bundled demonstration script."""
    return TextLoader().demo_script()


@pytest.fixture
def fake_console() -> callable:
    """Factory fixture for a console with scripted input."""

    def _factory(inputs: list[str] | None = None) -> FakeConsole:
        return FakeConsole(inputs)

    return _factory
