"""An asteroid-shooting arcade game with a pygame front end and window-free game logic."""

__version__ = "0.1.0"
__all__ = ["__version__"]