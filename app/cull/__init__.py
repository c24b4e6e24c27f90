"""cull - pattern-driven file and folder deletion."""

__version__ = "1.0.0"
