"""
Test Configuration and Utilities

Common base classes and helper functions for ownerdi tests
"""

import unittest
from typing import Any, Callable, Optional

from ownerdi import Application, BlankResolver, Resolver


class OwnerDITestCase(unittest.TestCase):
    """
    Base test case class for ownerdi tests.

    Provides a helper building an initialized Application whose
    initialize() runs the given setup function.
    """

    def make_app(self, setup: Optional[Callable[[Any], None]] = None,
                 resolver: Optional[Resolver] = None,
                 root_name: str = 'app') -> Application:
        app = create_application(setup, resolver or BlankResolver(), root_name)
        app.init_container()
        return app


def create_application(setup: Optional[Callable[[Any], None]],
                       resolver: Resolver,
                       root_name: str = 'app') -> Application:
    """
    Create an (uninitialized) Application running ``setup`` in initialize().

    Example:
        >>> app = create_application(
        ...     lambda registry: registry.register('router:/app/root/main', Router),
        ...     BlankResolver(),
        ... )
        >>> app.init_container()
    """

    class App(Application):
        def initialize(self, registry):
            super().initialize(registry)
            if setup is not None:
                setup(registry)

    return App(root_name=root_name, resolver=resolver)
