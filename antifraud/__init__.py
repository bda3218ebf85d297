"""Real-time transaction fraud scoring."""

__version__ = "1.0.0"
