from .geodesy_provider import IGeodesyProvider

__all__ = [
    "IGeodesyProvider",
]
