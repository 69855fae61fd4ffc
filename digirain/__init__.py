"""Digital rain screensaver for the terminal."""

__version__ = "0.3.0"
