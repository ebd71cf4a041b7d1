"""Configuration and step pipeline assembly for stylish-haskell."""

__version__ = "0.1.0"
