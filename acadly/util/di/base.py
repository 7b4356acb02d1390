"""Provider base class and mockable component names."""

from typing import ClassVar, Literal, Type

from dishka import Provider

Component = Literal["gemini", "persistence"]


class ProviderBase(Provider):
    """Common root of every provider in the container.

    A provider class with subclasses is a mockable component: exactly one
    subclass is the production implementation and one is the mock, told
    apart by ``__is_mock__``. A provider class without subclasses is used
    as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, mock: bool = False) -> Type["ProviderBase"]:
        """Pick the concrete provider class for this component.

        Args:
            mock: Whether the mock implementation is wanted

        Returns:
            Provider class, not instantiated

        Raises:
            ValueError: If no subclass matches the requested kind
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass

        kind = "mock" if mock else "production"
        raise ValueError(f"No {kind} implementation for {cls.__mock_component__}")
