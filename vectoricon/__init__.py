"""vectoricon — SVG shapes to the line-oriented vector icon command format."""

__version__ = "0.1.0"
