"""Frame-by-frame logic of a small side-scrolling platformer, with drawing left to a renderer."""

__version__ = "0.1.0"