"""Shared fixtures."""

from pathlib import Path

import pytest

from baseline_coach.core import catalog as catalog_module


FIXTURES = Path(__file__).parent / "fixtures"


def _unavailable_source():
    raise LookupError("dataset not installed")


@pytest.fixture(autouse=True)
def fallback_catalog(monkeypatch):
    """Give every test a fresh shared catalog backed by the built-in data."""
    for name in ("BASELINE_COACH_FEATURES_PATH", "BASELINE_COACH_FEATURES_URL"):
        monkeypatch.delenv(name, raising=False)
    catalog = catalog_module.FeatureCatalog(source=_unavailable_source)
    catalog_module.set_default_catalog(catalog)
    yield catalog
    catalog_module.reset_default_catalog()


@pytest.fixture
def site_dir() -> Path:
    return FIXTURES / "site"
