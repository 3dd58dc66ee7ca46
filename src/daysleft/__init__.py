"""daysleft: countdown to a fixed deadline, rendered as "N days"."""

__version__ = "0.1.0"
