"""
Registration

Data classes representing registrations and injection declarations
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .exceptions import InvalidRegistrationOptionError

SINGLETON = 'singleton'
INSTANTIATE = 'instantiate'

# Options applied when neither the specifier nor its type overrides them
DEFAULT_OPTIONS: Dict[str, bool] = {
    SINGLETON: True,
    INSTANTIATE: True,
}


@dataclass
class Registration:
    """Factory registered under an absolute specifier"""
    factory: Any
    options: Dict[str, bool] = field(default_factory=dict)

    @property
    def singleton(self) -> bool:
        return self.options.get(SINGLETON, DEFAULT_OPTIONS[SINGLETON])

    @property
    def instantiate(self) -> bool:
        return self.options.get(INSTANTIATE, DEFAULT_OPTIONS[INSTANTIATE])


@dataclass(frozen=True)
class Injection:
    """Wires ``source`` into the ``property`` of every ``target`` instance"""
    target: str
    property: str
    source: str


def validate_option(option: str, value: Any) -> None:
    """Reject unknown option names and non-boolean values.

    Raises:
        InvalidRegistrationOptionError: When the option is not supported
    """
    if option not in DEFAULT_OPTIONS:
        supported = ", ".join(DEFAULT_OPTIONS)
        raise InvalidRegistrationOptionError(
            f"Unknown registration option '{option}'. Supported options: {supported}"
        )
    if not isinstance(value, bool):
        raise InvalidRegistrationOptionError(
            f"Registration option '{option}' must be a bool, got {type(value).__name__}"
        )


def normalize_options(options: Optional[Mapping[str, bool]]) -> Dict[str, bool]:
    """Copy and validate a registration options mapping"""
    normalized: Dict[str, bool] = {}
    for option, value in (options or {}).items():
        validate_option(option, value)
        normalized[option] = value
    return normalized
