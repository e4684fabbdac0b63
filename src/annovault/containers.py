"""Dependency Injection container for AnnoVault.

The container manages:
- Settings (Singleton)
- The persistent cache backend selected by ``cache.backend``
- The item pool wrapping that backend
- Cached readers, built per delegate reader
"""

from __future__ import annotations

from dependency_injector import containers, providers

from annovault.config.loader import load_settings
from annovault.core.cache.pool import CacheItemPool
from annovault.core.cached_reader import CachedReader
from annovault.services import ArrayCache, FilesystemCache


class Container(containers.DeclarativeContainer):
    """Dependency Injection container for AnnoVault services.

    The delegate reader is supplied by the caller, since parsing
    annotations is outside the scope of this package.

    Example:
        >>> container = Container()
        >>> reader = container.cached_reader(delegate=DocblockReader())
        >>> reader.get_class_annotations(Controller)
    """

    # Configuration
    config = providers.Singleton(load_settings)

    cache_directory = providers.Callable(
        lambda config: config.cache.directory,
        config=config,
    )

    # Cache services
    simple_cache = providers.Selector(
        providers.Callable(lambda config: config.cache.backend, config=config),
        memory=providers.Singleton(ArrayCache),
        filesystem=providers.Singleton(FilesystemCache, directory=cache_directory),
    )

    cache_pool = providers.Factory(
        CacheItemPool,
        cache=simple_cache,
    )

    # Reader
    cached_reader = providers.Factory(
        CachedReader,
        cache=cache_pool,
        debug=providers.Callable(lambda config: config.cache.debug, config=config),
    )
