"""Mock models exposing deterministic fixtures for tests."""

from .client import MockLanguageModel, load_fixture_catalog

__all__ = ["MockLanguageModel", "load_fixture_catalog"]
