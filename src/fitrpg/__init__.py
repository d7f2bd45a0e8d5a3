"""Character progression and equipment scoring engine."""

__version__ = "0.1.0"
