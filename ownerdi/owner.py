"""
Owner

Accessors for the owner back-reference carried by injections bags and
the objects built from them.

Example::

    class DatePicker:
        @classmethod
        def create(cls, injections):
            picker = cls()
            set_owner(picker, get_owner(injections))
            return picker

        def router(self):
            return get_owner(self).lookup('router:/app/root/main')
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

# Reserved injections key holding the owner
OWNER = '__owner__'


def get_owner(obj: Any) -> Optional[Any]:
    """Return the owner of an injections bag or an instance, or None"""
    if isinstance(obj, Mapping):
        return obj.get(OWNER)
    return getattr(obj, OWNER, None)


def set_owner(obj: Any, owner: Any) -> None:
    """Attach ``owner`` to an injections bag (by key) or an instance (by attribute)"""
    if isinstance(obj, MutableMapping):
        obj[OWNER] = owner
    else:
        setattr(obj, OWNER, owner)
