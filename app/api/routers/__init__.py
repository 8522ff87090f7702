from . import beers

__all__ = [
    "beers",
]
