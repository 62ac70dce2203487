"""Role classification for XML prolog and DTD tokens, with name-character and UTF-8 byte tables."""

__version__ = "0.1.0"
__all__ = ["tokens", "namechars", "bytetypes", "declarations", "prolog"]