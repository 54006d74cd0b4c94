"""
Pytest fixtures and configuration for the test suite.
"""

import random

import pytest


@pytest.fixture
def config_dirs(tmp_path, monkeypatch):
    """Point every config lookup location at empty temporary directories."""
    config_home = tmp_path / "config_home"
    system_dir = tmp_path / "xdg_system"
    work_dir = tmp_path / "cwd"
    work_dir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(system_dir))
    monkeypatch.chdir(work_dir)

    return {"home": config_home, "system": system_dir, "cwd": work_dir}


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


class FixedRandom:
    """Random source stub that always returns the same value."""

    def __init__(self, value: int):
        self.value = value
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def fixed_rng():
    """Factory for random sources that always return a given value."""
    return FixedRandom
