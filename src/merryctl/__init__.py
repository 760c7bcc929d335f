"""merryctl — group-based control of a local compose development environment."""

__version__ = "0.3.0"
