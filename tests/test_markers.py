"""
Marker Tests

Tests for the component, scope, autowired and qualifier markers and the
capability checks the scanner uses to read them.
"""

import unittest

from kotbeans import autowired, component, qualifier, scope
from kotbeans.markers import (
    AutowiredMarker,
    ComponentMarker,
    QualifierMarker,
    ScopeMarker,
    declared_field_markers,
    get_component_marker,
    get_scope_marker,
)


class TestComponentMarker(unittest.TestCase):
    """Test the forms of @component."""

    def test_bare_decorator(self):
        @component
        class Service:
            pass

        self.assertEqual(get_component_marker(Service), ComponentMarker(""))

    def test_called_without_arguments(self):
        @component()
        class Service:
            pass

        self.assertEqual(get_component_marker(Service), ComponentMarker(""))

    def test_positional_name(self):
        @component("mainService")
        class Service:
            pass

        self.assertEqual(get_component_marker(Service).name, "mainService")

    def test_keyword_name(self):
        @component(name="mainService")
        class Service:
            pass

        self.assertEqual(get_component_marker(Service).name, "mainService")

    def test_decorator_returns_the_class(self):
        class Service:
            pass

        self.assertIs(component(Service), Service)
        self.assertIs(component("x")(Service), Service)

    def test_unmarked_class(self):
        class Service:
            pass

        self.assertIsNone(get_component_marker(Service))

    def test_not_inherited(self):
        @component
        class Base:
            pass

        class Child(Base):
            pass

        self.assertIsNone(get_component_marker(Child))


class TestScopeMarker(unittest.TestCase):
    """Test @scope."""

    def test_scope_value(self):
        @scope("prototype")
        class Service:
            pass

        self.assertEqual(get_scope_marker(Service), ScopeMarker("prototype"))

    def test_combined_with_component(self):
        @component
        @scope("prototype")
        class Service:
            pass

        self.assertIsNotNone(get_component_marker(Service))
        self.assertEqual(get_scope_marker(Service).value, "prototype")

    def test_no_scope(self):
        @component
        class Service:
            pass

        self.assertIsNone(get_scope_marker(Service))

    def test_not_inherited(self):
        @scope("prototype")
        class Base:
            pass

        class Child(Base):
            pass

        self.assertIsNone(get_scope_marker(Child))


class Database:
    pass


class TestFieldMarkers(unittest.TestCase):
    """Test autowired() and qualifier()."""

    def test_field_names_are_recorded(self):
        class Service:
            db: Database = autowired()
            timeout: int = qualifier("30")

        self.assertEqual(Service.__dict__["db"].field_name, "db")
        self.assertEqual(Service.__dict__["timeout"].field_name, "timeout")

    def test_declaration_order(self):
        class Service:
            timeout: int = qualifier("30")
            db: Database = autowired()
            plain = "not a marker"
            name: str = qualifier("svc")

        markers = declared_field_markers(Service)

        self.assertEqual([name for name, _ in markers], ["timeout", "db", "name"])
        self.assertIsInstance(markers[0][1], QualifierMarker)
        self.assertIsInstance(markers[1][1], AutowiredMarker)

    def test_only_own_fields(self):
        class Base:
            db: Database = autowired()

        class Child(Base):
            timeout: int = qualifier("30")

        self.assertEqual([name for name, _ in declared_field_markers(Child)], ["timeout"])

    def test_autowired_name(self):
        self.assertEqual(autowired().name, "")
        self.assertEqual(autowired("primaryDb").name, "primaryDb")

    def test_qualifier_value(self):
        self.assertEqual(qualifier("30").value, "30")

    def test_repr(self):
        self.assertEqual(repr(autowired()), "autowired()")
        self.assertEqual(repr(autowired("db")), "autowired('db')")
        self.assertEqual(repr(qualifier("30")), "qualifier('30')")


if __name__ == '__main__':
    unittest.main()
