# Public API
from .application import Application, ApplicationRegistry
from .container import Container
from .exceptions import (
    CircularDependencyError,
    ContainerAlreadyInitializedError,
    DuplicateRegistrationError,
    FactoryError,
    InvalidRegistrationOptionError,
    InvalidSpecifierError,
    OwnerDIError,
    UninitializedContainerError,
    UnresolvableSpecifierError,
)
from .owner import OWNER, get_owner, set_owner
from .registration import Injection, Registration
from .registry import Registry
from .resolver import BlankResolver, MapResolver, Resolver
from .specifier import Specifier, is_specifier_string_absolute, type_specifier

__all__ = [
    "Application",
    "ApplicationRegistry",
    "Container",
    "Registry",
    "Registration",
    "Injection",
    "Specifier",
    "is_specifier_string_absolute",
    "type_specifier",
    # Resolvers
    "Resolver",
    "BlankResolver",
    "MapResolver",
    # Owner
    "OWNER",
    "get_owner",
    "set_owner",
    # Exceptions
    "OwnerDIError",
    "InvalidSpecifierError",
    "UnresolvableSpecifierError",
    "UninitializedContainerError",
    "ContainerAlreadyInitializedError",
    "DuplicateRegistrationError",
    "InvalidRegistrationOptionError",
    "CircularDependencyError",
    "FactoryError",
]

# Version will be dynamically set by poetry-dynamic-versioning
try:
    from ._version import __version__
except ImportError:
    # Fallback for development
    __version__ = '0.0.0'
