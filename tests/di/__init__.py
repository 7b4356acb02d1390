"""Mock providers for testing."""

from .gemini import MockGeminiProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGeminiProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
