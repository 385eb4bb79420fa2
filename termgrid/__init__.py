"""A small terminal grid game: a movable square in a bordered field, redrawn at a fixed frame rate."""

__version__ = "0.1.0"