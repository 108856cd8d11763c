"""Character-grid widgets, rendering helpers and a terminal console for text interfaces."""

__version__ = "2.0.0"