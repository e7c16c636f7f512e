"""DataYoinker - a minimal publish/retrieve data relay."""

__version__ = "0.1.0"
