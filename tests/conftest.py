"""
Pytest configuration and shared fixtures for the nano_jason tests.
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from nano_jason.sdk import NanoJasonSDK


FIXED_MOMENT = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


class FirstPicker:
    """Always returns the first option."""

    def __init__(self):
        self.calls = []

    def pick(self, options):
        self.calls.append(list(options))
        return options[0]


class ScriptedPicker:
    """Returns the given choices in order, then falls back to the first option."""

    def __init__(self, *choices):
        self.choices = list(choices)

    def pick(self, options):
        if self.choices:
            choice = self.choices.pop(0)
            assert choice in options, f"{choice!r} not in {list(options)!r}"
            return choice
        return options[0]


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def first_picker():
    return FirstPicker()


@pytest.fixture
def scripted_picker():
    """Factory: scripted_picker("a", "b") picks "a" then "b"."""
    return ScriptedPicker


@pytest.fixture
def sdk(first_picker, fixed_clock):
    """SDK with pinned phrase selection and time."""
    return NanoJasonSDK(picker=first_picker, clock=fixed_clock)
