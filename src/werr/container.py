from __future__ import annotations

import threading

from dependency_injector import containers, providers

from werr.config import Settings
from werr.ids import RandomIdProvider
from werr.renderer import Renderer


class WerrContainer(containers.DeclarativeContainer):
    """Dependency Injector container for process-wide collaborators."""

    settings = providers.Singleton(Settings)
    container_config = providers.Configuration()

    id_provider = providers.ThreadSafeSingleton(
        RandomIdProvider,
        seed=container_config.id_seed,
        bits=container_config.id_bits,
    )
    renderer = providers.ThreadSafeSingleton(
        Renderer,
        fallback_message=container_config.fallback_message,
        content_type=container_config.content_type,
    )


def build_container(settings: Settings | None = None) -> containers.Container:
    """Create a container and load its config from *settings*.

    Instantiating a declarative container yields a dynamic copy of it.
    """
    container = WerrContainer()
    if settings is not None:
        container.settings.override(providers.Object(settings))
    container.container_config.from_pydantic(container.settings())  # pyright: ignore
    return container


_lock = threading.Lock()
_container: containers.Container | None = None


def get_container() -> containers.Container:
    """Return the process-wide container, building it on first use."""
    global _container
    if _container is None:
        with _lock:
            if _container is None:
                _container = build_container()
    return _container


def set_container(container: containers.Container | None) -> None:
    """Replace the process-wide container; ``None`` rebuilds it lazily."""
    global _container
    with _lock:
        _container = container
