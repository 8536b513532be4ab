"""A top-down wave survival arcade game: game rules, HUD and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]