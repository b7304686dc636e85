"""Version information for gwt."""

__version__ = "0.1.0"
