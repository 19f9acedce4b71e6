"""Interactive star map: catalogue loading, sky projection and a pygame viewer."""

__version__ = "0.1.0"