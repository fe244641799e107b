"""placefinder - nearby place search anchored to a saved or live location."""

__version__ = "0.1.0"
