"""A tile-based puzzle game: collect every item, then reach the exit.

Includes map loading and validation, game rules, XPM sprite reading,
X11 colour names and pygame rendering.
"""

__version__ = "0.1.0"