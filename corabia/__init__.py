"""Corabia: a terminal card game in which the player guesses their way off the ship."""

__version__ = "0.1.0"
__all__ = ["__version__"]