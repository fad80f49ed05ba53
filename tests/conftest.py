from __future__ import annotations

import importlib.util
import os
import warnings

import pytest

from tests.helpers import CHENNAI, LinearSky

if importlib.util.find_spec("swisseph") is None:
    warnings.warn(
        "pyswisseph not installed; Swiss-marked tests will be skipped.",
        RuntimeWarning,
        stacklevel=1,
    )


def _flag_enabled(name: str) -> bool:
    """Return True when the boolean-like environment flag is enabled."""

    value = os.getenv(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _have_pyswisseph() -> bool:
    return importlib.util.find_spec("swisseph") is not None


def pytest_collection_modifyitems(config, items):
    """Skip Swiss-marked tests when pyswisseph is missing or disabled."""

    reason = None
    if not _have_pyswisseph():
        reason = "pyswisseph not installed"
    elif _flag_enabled("PANCHANGA_SKIP_SWISS_TESTS"):
        reason = "Swiss tests disabled via PANCHANGA_SKIP_SWISS_TESTS"
    if reason is None:
        return
    skip_swiss = pytest.mark.skip(reason=reason)
    for item in items:
        if "swiss" in item.keywords:
            item.add_marker(skip_swiss)


@pytest.fixture
def sky() -> LinearSky:
    return LinearSky()


@pytest.fixture
def chennai():
    return CHENNAI


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path, monkeypatch):
    monkeypatch.setenv("PANCHANGA_HOME", str(tmp_path / "home"))
