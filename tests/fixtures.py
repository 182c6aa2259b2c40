"""
Test Fixtures

Common factory classes and resolvers used across test modules
"""

from ownerdi import Resolver, is_specifier_string_absolute


class Router:
    """Router built through a class-level create()"""

    def __init__(self, injections=None):
        self.injections = injections or {}

    @classmethod
    def create(cls, injections):
        return cls(injections)


class DatePicker:
    """Component factory returning a plain dict"""

    @classmethod
    def create(cls, injections):
        return {'foo': 'bar'}


class CountingFactory:
    """Factory recording how many times create() ran"""

    def __init__(self):
        self.create_count = 0
        self.last_injections = None

    def create(self, injections):
        self.create_count += 1
        self.last_injections = injections
        return object()


class RecordingFactory:
    """Factory returning a fresh dict holding the injections it received"""

    def __init__(self):
        self.calls = []

    def create(self, injections):
        self.calls.append(injections)
        return dict(injections)


class FailingFactory:
    """Factory whose create() always raises"""

    @classmethod
    def create(cls, injections):
        raise RuntimeError("database is down")


class FakeResolver(Resolver):
    """Resolver mapping relative specifiers through a fixed table"""

    def __init__(self, identities=None, factories=None):
        self.identities = dict(identities or {})
        self.factories = dict(factories or {})
        self.identify_calls = []
        self.retrieve_calls = []

    def identify(self, specifier, referrer=None):
        if is_specifier_string_absolute(specifier):
            return specifier
        self.identify_calls.append((specifier, referrer))
        return self.identities.get(specifier)

    def retrieve(self, specifier):
        self.retrieve_calls.append(specifier)
        return self.factories.get(specifier)
