"""A card-matching memory game: card state, game rules and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]