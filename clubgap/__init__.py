"""Club distance-gapping and shot-suggestion engine."""

__version__ = "0.1.0"
