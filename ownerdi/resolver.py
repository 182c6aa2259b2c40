"""
Resolver Module

This module provides the Resolver abstract interface consumed by the
Container, plus two small implementations:

    - BlankResolver: resolves nothing; absolute specifiers pass through
    - MapResolver: naming-convention resolver backed by a dict

Any object with ``identify`` and ``retrieve`` methods satisfies the
contract; subclassing Resolver is optional.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from .exceptions import UnresolvableSpecifierError
from .specifier import Specifier


class Resolver(ABC):
    """Abstract interface for specifier resolution.

    Example::

        class FakeResolver(Resolver):
            def identify(self, specifier, referrer=None):
                if is_specifier_string_absolute(specifier):
                    return specifier
                return 'component:/app/components/date-picker'

            def retrieve(self, specifier):
                return DatePicker
    """

    @abstractmethod
    def identify(self, specifier: str, referrer: Optional[str] = None) -> str:
        """Convert a specifier to its absolute form.

        Must return absolute specifiers unchanged.

        Args:
            specifier: Relative or absolute specifier
            referrer: Absolute specifier of the object asking, if any

        Returns:
            The absolute specifier
        """
        pass

    @abstractmethod
    def retrieve(self, specifier: str) -> Optional[Any]:
        """Load the factory for an absolute specifier.

        Returns:
            The factory, or None when the resolver has none
        """
        pass


class BlankResolver(Resolver):
    """Resolver that knows nothing; every factory comes from the registry"""

    def identify(self, specifier: str, referrer: Optional[str] = None) -> str:
        return specifier

    def retrieve(self, specifier: str) -> Optional[Any]:
        return None


class MapResolver(Resolver):
    """Convention-based resolver over a dict of absolute specifiers.

    Relative specifiers ``type:name`` are identified as
    ``type:/<root_name>/<type>s/<name>``.

    Example::

        resolver = MapResolver('app', {
            'component:/app/components/date-picker': DatePicker,
        })
        resolver.identify('component:date-picker')
        # 'component:/app/components/date-picker'
    """

    def __init__(self, root_name: str, factories: Optional[Mapping[str, Any]] = None):
        self.root_name = root_name
        self._factories = dict(factories or {})

    def identify(self, specifier: str, referrer: Optional[str] = None) -> str:
        parsed = Specifier.parse(specifier)
        if parsed.is_absolute:
            return specifier
        return f"{parsed.type}:/{self.root_name}/{parsed.type}s/{parsed.remainder}"

    def retrieve(self, specifier: str) -> Optional[Any]:
        return self._factories.get(specifier)

    def add(self, specifier: str, factory: Any) -> None:
        """Make ``factory`` retrievable under an absolute or relative specifier"""
        self._factories[self.identify(specifier)] = factory


def identify_specifier(resolver: Optional[Resolver], specifier: str,
                       referrer: Optional[str] = None) -> str:
    """Convert a specifier to its absolute form through ``resolver``.

    Absolute specifiers are returned unchanged without consulting the
    resolver.

    Raises:
        InvalidSpecifierError: When the specifier is malformed
        UnresolvableSpecifierError: When the specifier is relative and
            the resolver cannot turn it into an absolute specifier
    """
    if Specifier.parse(specifier).is_absolute:
        return specifier

    if resolver is None:
        raise UnresolvableSpecifierError(
            f"Cannot identify relative specifier '{specifier}' without a resolver"
        )

    absolute = resolver.identify(specifier, referrer)
    if absolute is None or not Specifier.parse(absolute).is_absolute:
        raise UnresolvableSpecifierError(
            f"Resolver could not identify '{specifier}' "
            f"(referrer: {referrer}); got {absolute!r}"
        )
    return absolute
