"""
Registry Tests

Tests for registration storage, options and injection declarations
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ownerdi import (
    DuplicateRegistrationError,
    Injection,
    InvalidRegistrationOptionError,
    InvalidSpecifierError,
    Registry,
)

from fixtures import DatePicker, Router


class TestRegister(unittest.TestCase):
    """Tests for register() / registration() / unregister()"""

    def setUp(self):
        self.registry = Registry()

    def test_registration_returns_factory_and_default_options(self):
        self.registry.register('router:/app/root/main', Router)

        registration = self.registry.registration('router:/app/root/main')

        self.assertIs(registration.factory, Router)
        self.assertTrue(registration.singleton)
        self.assertTrue(registration.instantiate)

    def test_registration_keeps_options(self):
        self.registry.register('foo:/app/foos/bar', Router, {'singleton': False})

        registration = self.registry.registration('foo:/app/foos/bar')

        self.assertFalse(registration.singleton)
        self.assertTrue(registration.instantiate)

    def test_registration_miss_returns_none(self):
        """A miss is not an error"""
        self.assertIsNone(self.registry.registration('router:/app/root/main'))

    def test_duplicate_registration_raises(self):
        """Registering the same specifier twice fails fast"""
        self.registry.register('router:/app/root/main', Router)

        with self.assertRaises(DuplicateRegistrationError) as ctx:
            self.registry.register('router:/app/root/main', DatePicker)

        self.assertIn("already registered", str(ctx.exception))
        self.assertIs(self.registry.registration('router:/app/root/main').factory, Router)

    def test_unregister_allows_replacement(self):
        self.registry.register('router:/app/root/main', Router)
        self.registry.unregister('router:/app/root/main')
        self.registry.register('router:/app/root/main', DatePicker)

        self.assertIs(self.registry.registration('router:/app/root/main').factory, DatePicker)

    def test_unregister_unknown_is_noop(self):
        self.registry.unregister('router:/app/root/main')
        self.registry.unregister('router:/app/root/main')

    def test_relative_specifier_rejected(self):
        with self.assertRaises(InvalidSpecifierError):
            self.registry.register('router:main', Router)

    def test_unknown_option_rejected(self):
        with self.assertRaises(InvalidRegistrationOptionError) as ctx:
            self.registry.register('foo:/app/foos/bar', Router, {'lazy': True})

        self.assertIn("lazy", str(ctx.exception))
        self.assertIsNone(self.registry.registration('foo:/app/foos/bar'))

    def test_non_bool_option_rejected(self):
        with self.assertRaises(InvalidRegistrationOptionError):
            self.registry.register('foo:/app/foos/bar', Router, {'singleton': 'no'})

    def test_specifiers_in_registration_order(self):
        self.registry.register('router:/app/root/main', Router)
        self.registry.register('component:/app/components/date-picker', DatePicker)

        self.assertEqual(
            self.registry.specifiers,
            ['router:/app/root/main', 'component:/app/components/date-picker']
        )


class TestOptions(unittest.TestCase):
    """Tests for per-specifier and per-type options"""

    def setUp(self):
        self.registry = Registry()

    def test_registered_option_unset_is_none(self):
        self.assertIsNone(self.registry.registered_option('foo:/app/foos/bar', 'singleton'))

    def test_type_option_applies_to_every_specifier(self):
        self.registry.register_option('model:', 'singleton', False)

        self.assertFalse(self.registry.registered_option('model:/app/models/user', 'singleton'))
        self.assertIsNone(self.registry.registered_option('foo:/app/foos/bar', 'singleton'))

    def test_specifier_option_wins_over_type_option(self):
        self.registry.register_option('model:', 'singleton', False)
        self.registry.register('model:/app/models/session', Router, {'singleton': True})

        self.assertTrue(self.registry.registered_option('model:/app/models/session', 'singleton'))

    def test_register_option_visible_through_registration(self):
        self.registry.register('foo:/app/foos/bar', Router)
        self.registry.register_option('foo:/app/foos/bar', 'singleton', False)

        self.assertFalse(self.registry.registration('foo:/app/foos/bar').singleton)
        self.assertEqual(self.registry.registered_options('foo:/app/foos/bar'), {'singleton': False})

    def test_unregister_option(self):
        self.registry.register_option('foo:/app/foos/bar', 'instantiate', False)
        self.registry.unregister_option('foo:/app/foos/bar', 'instantiate')

        self.assertIsNone(self.registry.registered_option('foo:/app/foos/bar', 'instantiate'))

    def test_option_on_relative_specifier_rejected(self):
        with self.assertRaises(InvalidSpecifierError):
            self.registry.register_option('foo:bar', 'singleton', False)


class TestInjections(unittest.TestCase):
    """Tests for register_injection() / injections_for()"""

    def setUp(self):
        self.registry = Registry()

    def test_exact_injections_in_declaration_order(self):
        self.registry.register_injection('foo:/app/foos/bar', 'router', 'router:/app/root/main')
        self.registry.register_injection('foo:/app/foos/bar', 'store', 'service:/app/services/store')

        self.assertEqual(self.registry.injections_for('foo:/app/foos/bar'), [
            Injection('foo:/app/foos/bar', 'router', 'router:/app/root/main'),
            Injection('foo:/app/foos/bar', 'store', 'service:/app/services/store'),
        ])

    def test_type_injections_follow_exact_ones(self):
        self.registry.register_injection('foo:', 'store', 'service:/app/services/store')
        self.registry.register_injection('foo:/app/foos/bar', 'router', 'router:/app/root/main')

        properties = [i.property for i in self.registry.injections_for('foo:/app/foos/bar')]

        self.assertEqual(properties, ['router', 'store'])

    def test_exact_injection_wins_on_property_collision(self):
        self.registry.register_injection('foo:', 'router', 'router:/app/root/default')
        self.registry.register_injection('foo:/app/foos/bar', 'router', 'router:/app/root/main')

        injections = self.registry.injections_for('foo:/app/foos/bar')

        self.assertEqual(len(injections), 1)
        self.assertEqual(injections[0].source, 'router:/app/root/main')
        self.assertEqual(
            self.registry.injections_for('foo:/app/foos/baz')[0].source,
            'router:/app/root/default'
        )

    def test_type_injection_does_not_leak_to_other_types(self):
        self.registry.register_injection('foo:', 'router', 'router:/app/root/main')

        self.assertEqual(self.registry.injections_for('bar:/app/bars/baz'), [])

    def test_redeclaring_property_replaces_source(self):
        self.registry.register_injection('foo:/app/foos/bar', 'router', 'router:/app/root/a')
        self.registry.register_injection('foo:/app/foos/bar', 'router', 'router:/app/root/b')

        injections = self.registry.injections_for('foo:/app/foos/bar')

        self.assertEqual([i.source for i in injections], ['router:/app/root/b'])

    def test_relative_target_rejected(self):
        with self.assertRaises(InvalidSpecifierError):
            self.registry.register_injection('foo:bar', 'router', 'router:/app/root/main')

    def test_malformed_source_rejected(self):
        with self.assertRaises(InvalidSpecifierError):
            self.registry.register_injection('foo:/app/foos/bar', 'router', 'router')


if __name__ == '__main__':
    unittest.main()
