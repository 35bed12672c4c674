"""Diagram-layout helpers: slot dictionary, word splitting, separator lists, link maps and curves."""

__version__ = "0.1.0"