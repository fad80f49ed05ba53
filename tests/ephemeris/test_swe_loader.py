from __future__ import annotations

from types import SimpleNamespace

import pytest

from panchanga.ephemeris import swe as swe_module
from panchanga.exceptions import EphemerisUnavailableError


@pytest.fixture(autouse=True)
def _fresh_loader():
    swe_module.reset_swe()
    yield
    swe_module.reset_swe()


def test_missing_library_raises_domain_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(name: str):
        raise ImportError(f"No module named '{name}'")

    monkeypatch.setattr(swe_module, "importlib", SimpleNamespace(import_module=fail))
    with pytest.raises(EphemerisUnavailableError, match="pyswisseph"):
        swe_module.swe()
    assert not swe_module.swe.loaded


def test_module_imported_once_and_forwarded(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = SimpleNamespace(SUN=0, MOON=1, version="2.10.03")
    imports: list[str] = []

    def load(name: str):
        imports.append(name)
        return fake

    monkeypatch.setattr(swe_module, "importlib", SimpleNamespace(import_module=load))
    assert swe_module.swe() is fake
    assert swe_module.swe.MOON == 1
    assert swe_module.has_swe()
    assert swe_module.backend_version() == "2.10.03"
    assert imports == ["swisseph"]

    swe_module.reset_swe()
    assert not swe_module.swe.loaded
