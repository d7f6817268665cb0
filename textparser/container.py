import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Registration:
    factory: Callable[[], Any]
    singleton: bool = False
    instance: Optional[Any] = None


@dataclass
class Container:
    """Resolves parser components by the type they were registered under."""

    _registrations: dict[type, Registration] = field(default_factory=dict)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface, replacing any earlier registration."""
        self._registrations[interface] = Registration(factory, singleton)

    def register_instance(self, interface: type[T], instance: T) -> None:
        """Register a ready-made object, e.g. an in-memory file system."""
        self._registrations[interface] = Registration(
            lambda: instance, singleton=True, instance=instance
        )

    def resolve(self, interface: type[T]) -> T:
        registration = self._registrations.get(interface)
        if registration is None:
            raise KeyError(f"No factory registered for {interface}")

        if registration.instance is not None:
            return registration.instance

        instance = registration.factory()
        if registration.singleton:
            registration.instance = instance
        return instance

    def reset(self) -> None:
        """Drop cached singletons (for testing)."""
        for registration in self._registrations.values():
            registration.instance = None


container = Container()


def configure_container(settings: Settings) -> Container:
    """Register parser components built from settings.

    Args:
        settings: Application settings.

    Returns:
        Configured container.
    """
    from .core.protocols.file_system import FileSystemProtocol
    from .core.services.parser_service import TextParser
    from .core.services.template_repository import TemplateRepository
    from .core.strategies.similarity import (
        SequenceMatcherSimilarity,
        SimilarityStrategy,
    )
    from .infrastructure.document_loaders import CompositeLoader
    from .infrastructure.file_system import LocalFileSystem

    container.register(
        FileSystemProtocol,
        lambda: LocalFileSystem(encoding=settings.template_encoding),
        singleton=True,
    )
    container.register(SimilarityStrategy, SequenceMatcherSimilarity, singleton=True)
    container.register(
        TemplateRepository,
        lambda: TemplateRepository(
            file_system=container.resolve(FileSystemProtocol),
            similarity=container.resolve(SimilarityStrategy),
            mode=settings.match_mode,
        ),
        singleton=True,
    )
    container.register(
        TextParser,
        lambda: TextParser(
            repository=container.resolve(TemplateRepository),
            mode=settings.match_mode,
            strict=settings.strict_placeholders,
            timeout=settings.match_timeout,
        ),
        singleton=True,
    )
    container.register(
        CompositeLoader,
        lambda: CompositeLoader(encoding=settings.template_encoding),
        singleton=True,
    )

    logger.debug("Container configured")
    return container
