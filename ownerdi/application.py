"""
Application

This module provides the owner facade: the single object the rest of an
application holds on to in order to look up collaborators.

Use Cases:
    - Subclass and override ``initialize()`` to register factories
    - Pass ``app`` (via the owner back-reference) to built objects so
      they can perform further lookups

Example::

    class App(Application):
        def initialize(self, registry):
            super().initialize(registry)
            registry.register('router:/app/root/main', Router)
            registry.register_injection('component:', 'router', 'router:main')

    app = App(root_name='app', resolver=MapResolver('app'))
    app.init_container()
    router = app.lookup('router:main')
"""

import logging
from typing import Any, Mapping, Optional

from .container import Container
from .exceptions import ContainerAlreadyInitializedError, UninitializedContainerError
from .registration import Registration
from .registry import Registry
from .resolver import Resolver, identify_specifier
from .specifier import Specifier

logger = logging.getLogger(__name__)


class Application:
    """Owner facade combining Registry, Container and Resolver.

    Attributes:
        root_name: Root segment of the application's absolute specifiers
        resolver: Resolver used for identification and factory retrieval
        _registry: Registry created by init_registry() (None before)
        _container: Container created by init_container() (None before)
    """

    def __init__(self, root_name: str, resolver: Resolver):
        """Initialize an application.

        Args:
            root_name: Root name, e.g. ``'app'`` for ``component:/app/...``
            resolver: Resolver satisfying the ``identify``/``retrieve`` contract
        """
        self.root_name = root_name
        self.resolver = resolver
        self._registry: Optional[Registry] = None
        self._container: Optional[Container] = None

    @property
    def main_specifier(self) -> str:
        """Absolute specifier the application registers itself under"""
        return f"application:/{self.root_name}/main/main"

    def init_registry(self) -> None:
        """Create the registry and run ``initialize()`` against it.

        The application registers itself under ``main_specifier`` with
        ``instantiate`` disabled, so it can be injected like any other
        collaborator.
        """
        self._registry = Registry()
        self._registry.register(self.main_specifier, self, {'instantiate': False})
        self.initialize(ApplicationRegistry(self._registry, self.resolver))

    def initialize(self, registry: 'ApplicationRegistry') -> None:
        """Extension point for registrations. Called exactly once.

        Args:
            registry: Registry proxy accepting relative specifiers
        """

    def init_container(self) -> None:
        """Initialize the registry and build the container.

        Raises:
            ContainerAlreadyInitializedError: When called a second time
        """
        if self._container is not None:
            raise ContainerAlreadyInitializedError(
                f"Application '{self.root_name}' is already initialized. "
                f"Create a new Application instead of calling init_container() again."
            )
        self.init_registry()
        self._container = Container(self._registry, self.resolver, owner=self)
        logger.debug("Initialized container for application '%s'", self.root_name)

    def identify(self, specifier: str, referrer: Optional[str] = None) -> str:
        """Convert a specifier to its absolute form using the resolver.

        Available before init_container(); absolute specifiers pass
        through unchanged.

        Raises:
            UnresolvableSpecifierError: When the resolver cannot turn a
                relative specifier into an absolute one
        """
        return identify_specifier(self.resolver, specifier, referrer)

    def factory_for(self, specifier: str, referrer: Optional[str] = None) -> Any:
        """Locate the factory for a specifier.

        Raises:
            UninitializedContainerError: When init_container() has not run
            UnresolvableSpecifierError: When no factory can be found
        """
        return self._get_container().factory_for(specifier, referrer)

    def lookup(self, specifier: str, referrer: Optional[str] = None) -> Any:
        """Return the instance for a specifier.

        Raises:
            UninitializedContainerError: When init_container() has not run
            UnresolvableSpecifierError: When no factory can be found
        """
        return self._get_container().lookup(specifier, referrer)

    @property
    def is_initialized(self) -> bool:
        return self._container is not None

    def _get_container(self) -> Container:
        if self._container is None:
            raise UninitializedContainerError(
                f"Container of application '{self.root_name}' is not initialized. "
                f"Call init_container() first"
            )
        return self._container


class ApplicationRegistry:
    """Registry proxy handed to ``Application.initialize()``.

    Relative specifiers are identified through the application's resolver
    before reaching the underlying Registry; type-level specifiers
    (``type:``) are passed through as they are.
    """

    def __init__(self, registry: Registry, resolver: Resolver):
        self._registry = registry
        self._resolver = resolver

    def register(self, specifier: str, factory: Any,
                 options: Optional[Mapping[str, bool]] = None) -> None:
        self._registry.register(self._to_absolute(specifier), factory, options)

    def unregister(self, specifier: str) -> None:
        self._registry.unregister(self._to_absolute(specifier))

    def registration(self, specifier: str) -> Optional[Registration]:
        return self._registry.registration(self._to_absolute(specifier))

    def register_option(self, specifier: str, option: str, value: bool) -> None:
        self._registry.register_option(self._to_absolute_or_type(specifier), option, value)

    def register_injection(self, target: str, property: str, source: str) -> None:
        self._registry.register_injection(self._to_absolute_or_type(target), property, source)

    def _to_absolute(self, specifier: str) -> str:
        return identify_specifier(self._resolver, specifier)

    def _to_absolute_or_type(self, specifier: str) -> str:
        if Specifier.parse(specifier).is_type:
            return specifier
        return self._to_absolute(specifier)
