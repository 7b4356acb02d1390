"""Dependency injection module."""

from typing import Collection, Type

from acadly.util.di.application import ProdApplicationProvider
from acadly.util.di.base import Component, ProviderBase
from acadly.util.di.core import ProdConfigProvider
from acadly.util.di.domain import ProdDomainProvider
from acadly.util.di.infrastructure import (
    GeminiProvider,
    PersistenceProvider,
    ProdGeminiProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
    GeminiProvider,
]


def mockable_components() -> set[Component]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per entry in PROVIDERS.

    Args:
        mocked: Components whose mock implementation should be used

    Returns:
        Provider instances ready for make_async_container

    Raises:
        ValueError: If a mocked component is unknown or has no mock registered
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "GeminiProvider",
    "PersistenceProvider",
    "ProdGeminiProvider",
    "ProdPersistenceProvider",
]
