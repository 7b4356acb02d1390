"""Mockable infrastructure providers.

Importing the production subclasses here registers them with their
component base, which is how ProviderBase.implementation finds them.
"""

from .gemini import GeminiProvider, ProdGeminiProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "GeminiProvider",
    "PersistenceProvider",
    "ProdGeminiProvider",
    "ProdPersistenceProvider",
]
