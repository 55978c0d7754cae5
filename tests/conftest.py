"""Pytest configuration - ensure consistent CWD and provide fixtures.

Qt objects (controllers, signals) need an application instance; tests run
against the offscreen platform so no display is required.
"""
from __future__ import annotations

import os
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for the whole session."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def preset_dir(tmp_path, monkeypatch):
    """Isolated preset directory."""
    directory = tmp_path / "presets"
    monkeypatch.setenv("FOURIER_SYNTH_PRESET_DIR", str(directory))
    return directory


@pytest.fixture
def classic():
    from fourier_synth.config import PROFILES
    return PROFILES['classic']
