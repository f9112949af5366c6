"""Fixture (demo) mode adapters."""

from .fixture_generator import FixtureModelGenerator
from .fixture_index import KeywordFixtureIndex

__all__ = ["FixtureModelGenerator", "KeywordFixtureIndex"]
