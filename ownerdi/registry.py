"""
Registry

Process-local store of registrations, registration options and
injection declarations. The registry never builds anything; it is read
by the Container during lookup.

Example::

    registry = Registry()
    registry.register('router:/app/root/main', Router)
    registry.register('foo:/app/foos/bar', FooBar, {'singleton': False})
    registry.register_injection('foo:/app/foos/bar', 'router', 'router:/app/root/main')

    # Type-level: every 'component:' instance receives the router
    registry.register_injection('component:', 'router', 'router:/app/root/main')
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import DuplicateRegistrationError, InvalidSpecifierError
from .registration import Injection, Registration, normalize_options, validate_option
from .specifier import Specifier

logger = logging.getLogger(__name__)


class Registry:
    """Store of registrations and injection declarations.

    Registrations are keyed by absolute specifier. Options and injections
    may additionally target a whole type through the ``type:`` form.

    Registering the same absolute specifier twice raises
    DuplicateRegistrationError; use unregister() to replace a factory.

    Attributes:
        _registrations: Absolute specifier -> Registration
        _options: Absolute or type-level specifier -> option values
        _injections: Absolute or type-level specifier -> property -> Injection
    """

    def __init__(self):
        self._registrations: Dict[str, Registration] = {}
        self._options: Dict[str, Dict[str, bool]] = {}
        self._injections: Dict[str, Dict[str, Injection]] = {}

    def register(self, specifier: str, factory: Any,
                 options: Optional[Mapping[str, bool]] = None) -> None:
        """Register a factory under an absolute specifier.

        Args:
            specifier: Absolute specifier, e.g. ``'router:/app/root/main'``
            factory: Object exposing ``create(injections)``, or the value
                itself when ``instantiate`` is False
            options: Optional ``{'singleton': bool, 'instantiate': bool}``

        Raises:
            InvalidSpecifierError: When the specifier is not absolute
            InvalidRegistrationOptionError: When an option is unsupported
            DuplicateRegistrationError: When the specifier is already registered
        """
        _require_absolute(specifier, 'register')
        if specifier in self._registrations:
            raise DuplicateRegistrationError(
                f"{specifier} is already registered. "
                f"Call unregister('{specifier}') before registering it again."
            )

        normalized = normalize_options(options)
        # Registration and option lookup share one dict so register_option()
        # stays visible through the Registration.
        registered = self._options.setdefault(specifier, {})
        registered.update(normalized)
        self._registrations[specifier] = Registration(factory, registered)
        logger.debug("Registered %s (options=%s)", specifier, registered)

    def unregister(self, specifier: str) -> None:
        """Remove a registration and its options.

        Unknown specifiers are silently skipped, which makes the operation
        safe to call multiple times.
        """
        self._registrations.pop(specifier, None)
        self._options.pop(specifier, None)

    def registration(self, specifier: str) -> Optional[Registration]:
        """Get the registration for an absolute specifier, or None"""
        return self._registrations.get(specifier)

    @property
    def specifiers(self) -> List[str]:
        """Registered absolute specifiers in registration order"""
        return list(self._registrations)

    def register_option(self, specifier: str, option: str, value: bool) -> None:
        """Set a single option on an absolute or type-level specifier.

        Type-level options apply to every specifier of the type that does
        not set the option itself, including factories the resolver finds.

        Example::

            registry.register_option('model:', 'singleton', False)
        """
        _require_absolute_or_type(specifier, 'register_option')
        validate_option(option, value)
        self._options.setdefault(specifier, {})[option] = value

    def registered_options(self, specifier: str) -> Optional[Dict[str, bool]]:
        """Options set directly on ``specifier``, or None"""
        return self._options.get(specifier)

    def registered_option(self, specifier: str, option: str) -> Optional[bool]:
        """Resolve one option: exact specifier first, then its type.

        Returns:
            The option value, or None when neither scope sets it
        """
        options = self._options.get(specifier)
        if options is not None and option in options:
            return options[option]

        type_options = self._options.get(_type_key(specifier))
        if type_options is not None:
            return type_options.get(option)
        return None

    def unregister_option(self, specifier: str, option: str) -> None:
        options = self._options.get(specifier)
        if options is not None:
            options.pop(option, None)

    def register_injection(self, target: str, property: str, source: str) -> None:
        """Declare that ``source`` is injected as ``property`` into ``target``.

        Args:
            target: Absolute specifier (exactly that instance) or ``type:``
                (every instance of the type)
            property: Key under which the looked-up source is injected
            source: Specifier of the collaborator; may be relative, it is
                identified with ``target`` as referrer at lookup time

        Raises:
            InvalidSpecifierError: When the target is relative or the source
                is malformed
        """
        _require_absolute_or_type(target, 'register_injection')
        Specifier.parse(source)
        self._injections.setdefault(target, {})[property] = Injection(target, property, source)
        logger.debug("Registered injection %s.%s <- %s", target, property, source)

    def injections_for(self, specifier: str) -> List[Injection]:
        """Injections applicable to an absolute specifier.

        Exact-match declarations come first in declaration order, followed
        by type-level declarations for properties not already claimed.
        """
        exact = self._injections.get(specifier, {})
        injections = list(exact.values())
        for property, injection in self._injections.get(_type_key(specifier), {}).items():
            if property not in exact:
                injections.append(injection)
        return injections


def _type_key(specifier: str) -> str:
    parsed = Specifier.parse(specifier)
    return str(Specifier(parsed.type, ''))


def _require_absolute(specifier: str, operation: str) -> None:
    if not Specifier.parse(specifier).is_absolute:
        raise InvalidSpecifierError(
            f"{operation}() requires an absolute specifier, got '{specifier}'.\n"
            f"Hint: 'type:/root/path/to/item'"
        )


def _require_absolute_or_type(specifier: str, operation: str) -> None:
    parsed = Specifier.parse(specifier)
    if not (parsed.is_absolute or parsed.is_type):
        raise InvalidSpecifierError(
            f"{operation}() requires an absolute or type-level specifier, "
            f"got '{specifier}'.\n"
            f"Hint: 'type:/root/path/to/item' or '{parsed.type}:'"
        )
