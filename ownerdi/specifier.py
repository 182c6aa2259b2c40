"""
Specifier

Typed string identities naming the objects a container can build.

Three forms are recognised:

- relative:   ``component:date-picker``
- absolute:   ``component:/app/components/date-picker``
- type-level: ``component:`` (every specifier of the type)

Example::

    spec = Specifier.parse('component:/app/components/date-picker')
    spec.type         # 'component'
    spec.path         # '/app/components/date-picker'
    spec.is_absolute  # True
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidSpecifierError

SEPARATOR = ':'


@dataclass(frozen=True)
class Specifier:
    """Parsed specifier value object"""
    type: str
    remainder: str

    @classmethod
    def parse(cls, specifier: str) -> 'Specifier':
        """Split a specifier string into its type and remainder.

        Only the first colon separates the type; the remainder is kept
        verbatim. No whitespace or case normalization is performed.

        Args:
            specifier: The specifier string to parse

        Returns:
            The parsed Specifier

        Raises:
            InvalidSpecifierError: When the input is not a string, has no
                ``:`` separator, or has an empty type segment
        """
        if not isinstance(specifier, str):
            raise InvalidSpecifierError(
                f"Specifier must be a string, got {type(specifier).__name__}"
            )

        type_name, separator, remainder = specifier.partition(SEPARATOR)
        if not separator:
            raise InvalidSpecifierError(
                f"Invalid specifier '{specifier}': missing '{SEPARATOR}' separator.\n"
                f"Hint: use 'type:name' or 'type:/root/path'"
            )
        if not type_name:
            raise InvalidSpecifierError(
                f"Invalid specifier '{specifier}': type segment is empty"
            )
        return cls(type_name, remainder)

    @property
    def is_absolute(self) -> bool:
        return self.remainder.startswith('/')

    @property
    def is_type(self) -> bool:
        """True for the type-level form ``type:``"""
        return self.remainder == ''

    @property
    def name(self) -> Optional[str]:
        if self.is_absolute or self.is_type:
            return None
        return self.remainder

    @property
    def path(self) -> Optional[str]:
        return self.remainder if self.is_absolute else None

    def __str__(self) -> str:
        return f"{self.type}{SEPARATOR}{self.remainder}"


def is_specifier_string_absolute(specifier: str) -> bool:
    """Check whether a specifier string is in absolute form.

    Raises:
        InvalidSpecifierError: When the specifier is malformed
    """
    return Specifier.parse(specifier).is_absolute


def type_specifier(type_name: str) -> str:
    """Build the type-level specifier for ``type_name``"""
    return str(Specifier.parse(f"{type_name}{SEPARATOR}"))
