"""A terminal monster-collecting game with a Perlin-noise world map and SQLite storage."""

__version__ = "0.1.0"