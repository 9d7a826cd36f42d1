"""Dishka provider base shared by every Agora provider."""

from typing import ClassVar, Literal

from dishka import Provider

from agora.util.error import DependencyInjectionError

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider that can be swapped for a fake.

    A swappable component is declared by a base class setting ``swappable``
    to the component name. Its production and fake implementations subclass
    that base and differ by ``is_fake``. Providers that set neither are used
    as they are.
    """

    swappable: ClassVar[Component | None] = None
    is_fake: ClassVar[bool] = False

    @classmethod
    def implementation(cls, fake: bool = False) -> type["ProviderBase"]:
        """Provider class to instantiate in place of ``cls``.

        Raises:
            DependencyInjectionError: If the component has no implementation
                of the requested kind
        """
        if cls.swappable is None:
            return cls
        for candidate in cls.__subclasses__():
            if candidate.is_fake == fake:
                return candidate
        kind = "fake" if fake else "production"
        raise DependencyInjectionError(
            f"No {kind} provider registered for {cls.swappable}"
        )
