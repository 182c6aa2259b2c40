"""
ownerdi Exceptions

Custom exception hierarchy for the ownerdi object-construction runtime
"""


class OwnerDIError(Exception):
    """
    Base exception for all ownerdi errors.

    All ownerdi-specific exceptions inherit from this class.
    You can catch this to handle any ownerdi error generically.

    Example:
        >>> try:
        ...     router = app.lookup('router:main')
        ... except OwnerDIError as e:
        ...     print(f"DI error: {e}")
    """

    pass


class InvalidSpecifierError(OwnerDIError):
    """
    Raised when a specifier string is malformed or used in the wrong form.

    A specifier is ``type:name`` (relative), ``type:/root/path`` (absolute)
    or ``type:`` (type-level, only valid as an injection or option target).

    Common causes:
        - Missing the ``:`` separator (``'router'`` instead of ``'router:main'``)
        - Empty type segment (``':main'``)
        - Registering under a relative specifier directly on a ``Registry``

    Solution:
        Use the absolute form when talking to the ``Registry``::

            registry.register('router:/app/root/main', Router)

        Or register through the ``ApplicationRegistry`` passed to
        ``Application.initialize()``, which normalizes relative specifiers.
    """

    pass


class UnresolvableSpecifierError(OwnerDIError):
    """
    Raised when neither the resolver nor the registry can produce a factory.

    This error occurs when calling ``lookup()`` or ``factory_for()`` for a
    specifier that the resolver cannot identify or retrieve and that has
    no local registration.

    Common causes:
        - Forgetting to register the factory in ``initialize()``
        - Typo in the specifier
        - Resolver returning a non-absolute specifier from ``identify()``

    Solution:
        Register the factory before looking it up::

            class App(Application):
                def initialize(self, registry):
                    super().initialize(registry)
                    registry.register('router:/app/root/main', Router)

    Note:
        The error message includes the registered specifiers
        to help identify available factories.
    """

    pass


class UninitializedContainerError(OwnerDIError):
    """
    Raised when a lookup is attempted before the container exists.

    This is a programming error: ``Application.init_container()`` must be
    called before ``lookup()`` or ``factory_for()``.

    Solution:
        Initialize the container first::

            app = App(root_name='app', resolver=BlankResolver())
            app.init_container()  # Initialize first!
            router = app.lookup('router:/app/root/main')  # Now this works
    """

    pass


class ContainerAlreadyInitializedError(OwnerDIError):
    """
    Raised when ``Application.init_container()`` is called a second time.

    ``initialize()`` runs exactly once per application. Create a new
    ``Application`` instead of re-initializing an existing one.
    """

    pass


class DuplicateRegistrationError(OwnerDIError):
    """
    Raised when the same absolute specifier is registered twice.

    Common causes:
        - Registering the same specifier in an application and a subclass
        - Calling ``initialize()`` logic twice

    Solution:
        Unregister the old factory explicitly before replacing it::

            registry.unregister('router:/app/root/main')
            registry.register('router:/app/root/main', OtherRouter)
    """

    pass


class InvalidRegistrationOptionError(OwnerDIError):
    """
    Raised when a registration option is unknown or not a boolean.

    Only ``singleton`` and ``instantiate`` are supported::

        registry.register('foo:/app/foos/bar', FooBar, {'singleton': False})
    """

    pass


class CircularDependencyError(OwnerDIError):
    """
    Raised when circular injection is detected during lookup.

    This error occurs when the injections of specifier A require
    specifier B, and B (directly or indirectly) requires A.

    Example of circular injection::

        registry.register_injection('foo:/app/foos/a', 'b', 'foo:/app/foos/b')
        registry.register_injection('foo:/app/foos/b', 'a', 'foo:/app/foos/a')

    Solution:
        1. Remove one of the edges and look the collaborator up lazily
           through the owner (``get_owner(self).lookup(...)``)
        2. Extract the shared state into a third object
    """

    pass


class FactoryError(OwnerDIError):
    """
    Raised when a factory's creation operation raises an exception.

    The original exception is available as ``__cause__``. No instance is
    cached for the failed lookup.
    """

    pass
