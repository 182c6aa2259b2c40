"""
Container

This module provides the lookup engine of ownerdi. It is responsible for:

- Identifying relative specifiers through the resolver
- Locating factories (resolver first, then registry)
- Managing singleton and non-singleton instances
- Wiring declared injections and the owner back-reference
- Detecting circular injections

The container is typically not used directly. Instead, use Application,
which owns one container and exposes the same lookup operations.
"""

import logging
from typing import Any, Dict, Optional

from .exceptions import FactoryError, OwnerDIError, UnresolvableSpecifierError
from .owner import set_owner
from .registration import DEFAULT_OPTIONS, INSTANTIATE, SINGLETON
from .registry import Registry
from .resolution_context import ResolutionContext, _resolution_context
from .resolver import Resolver, identify_specifier

logger = logging.getLogger(__name__)


class Container:
    """Builds, caches and wires objects named by specifiers.

    Attributes:
        _registry: Registry holding local registrations and injections
        _resolver: Resolver consulted for identification and factories
        _owner: Object handed to every factory as the owner
        _instances: Absolute specifier -> cached singleton instance

    Example::

        registry = Registry()
        registry.register('router:/app/root/main', Router)

        container = Container(registry, BlankResolver())
        router = container.lookup('router:/app/root/main')
        assert container.lookup('router:/app/root/main') is router
    """

    def __init__(self, registry: Registry, resolver: Optional[Resolver] = None,
                 owner: Optional[Any] = None):
        """Initialize a container over a registry.

        Args:
            registry: Source of local registrations, options and injections
            resolver: Optional resolver; without one only absolute
                specifiers registered locally can be looked up
            owner: Owner injected into every instance; defaults to the
                container itself
        """
        self._registry = registry
        self._resolver = resolver
        self._owner = owner if owner is not None else self
        self._instances: Dict[str, Any] = {}

    def identify(self, specifier: str, referrer: Optional[str] = None) -> str:
        """Convert a specifier to its absolute form.

        Absolute specifiers are returned unchanged without consulting the
        resolver.

        Raises:
            InvalidSpecifierError: When the specifier is malformed
            UnresolvableSpecifierError: When the specifier is relative and
                the resolver cannot turn it into an absolute specifier
        """
        return identify_specifier(self._resolver, specifier, referrer)

    def factory_for(self, specifier: str, referrer: Optional[str] = None) -> Any:
        """Locate the factory for a specifier.

        The resolver is asked first; a registration stored under the same
        absolute specifier is only used when the resolver has nothing.

        Raises:
            UnresolvableSpecifierError: When no factory can be found
        """
        absolute = self.identify(specifier, referrer)

        factory = None
        if self._resolver is not None:
            factory = self._resolver.retrieve(absolute)

        if factory is None:
            registration = self._registry.registration(absolute)
            if registration is not None:
                factory = registration.factory

        if factory is None:
            registered = ", ".join(self._registry.specifiers) or "None"
            raise UnresolvableSpecifierError(
                f"{absolute} could not be resolved.\n"
                f"Registered specifiers: {registered}\n"
                f"Hint: registry.register('{absolute}', Factory)"
            )
        return factory

    def lookup(self, specifier: str, referrer: Optional[str] = None) -> Any:
        """Return the instance for a specifier, building it if needed.

        This method handles the core lookup logic:
        1. Identify the absolute specifier
        2. Return the cached instance if the specifier is a singleton
        3. Return the factory itself when ``instantiate`` is False
        4. Build the injections bag (recursive lookups)
        5. Create the instance via the factory
        6. Cache the instance if singleton

        Raises:
            UnresolvableSpecifierError: When no factory can be found
            CircularDependencyError: When injections form a cycle
            FactoryError: When a factory raises
        """
        absolute = self.identify(specifier, referrer)
        singleton = self._option(absolute, SINGLETON)

        # Already instantiated singleton
        if singleton and absolute in self._instances:
            logger.debug("Cache hit for %s", absolute)
            return self._instances[absolute]

        factory = self.factory_for(absolute)

        if not self._option(absolute, INSTANTIATE):
            return factory

        parent_ctx = _resolution_context.get()
        if parent_ctx is None or parent_ctx.container is not self:
            parent_ctx = ResolutionContext(self)
        ctx = parent_ctx.enter(absolute)

        token = _resolution_context.set(ctx)
        try:
            injections = self.build_injections(absolute)
            instance = self._create_instance(absolute, factory, injections)
        finally:
            _resolution_context.reset(token)

        if singleton:
            self._instances[absolute] = instance
        return instance

    def default_injections(self, specifier: str) -> Dict[str, Any]:
        """Injections every instance receives; holds the owner"""
        injections: Dict[str, Any] = {}
        set_owner(injections, self._owner)
        return injections

    def build_injections(self, specifier: str) -> Dict[str, Any]:
        """Assemble the injections bag for an absolute specifier.

        Each declared source is looked up with ``specifier`` as referrer.
        """
        injections = self.default_injections(specifier)
        for injection in self._registry.injections_for(specifier):
            injections[injection.property] = self.lookup(injection.source, specifier)
        return injections

    def has_instance(self, specifier: str) -> bool:
        """Check whether a singleton instance is cached for ``specifier``"""
        return specifier in self._instances

    def _option(self, specifier: str, option: str) -> bool:
        value = self._registry.registered_option(specifier, option)
        return DEFAULT_OPTIONS[option] if value is None else value

    def _create_instance(self, specifier: str, factory: Any,
                         injections: Dict[str, Any]) -> Any:
        """Invoke the factory's creation operation.

        Factories expose ``create(injections)``; plain callables are
        called with the injections bag directly.

        Raises:
            FactoryError: When the factory cannot be invoked or raises
        """
        create = getattr(factory, 'create', None)
        if not callable(create):
            if not callable(factory):
                raise FactoryError(
                    f"Factory for {specifier} ({type(factory).__name__}) has no create() method. "
                    f"Register it with {{'instantiate': False}} to look up the value itself."
                )
            create = factory

        logger.debug("Creating %s", specifier)
        try:
            return create(injections)
        except OwnerDIError:
            # Re-raise ownerdi exceptions from nested lookups as-is
            raise
        except Exception as e:
            raise FactoryError(
                f"Factory for {specifier} raised an exception: {e}"
            ) from e
