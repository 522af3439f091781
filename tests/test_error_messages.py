"""
Error Messages Tests

Tests for error message quality and exception hierarchy.
Verifies that error messages are helpful and contain sufficient context.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from kotbeans import BeanDefinitionRegistry, XmlBeanDefinitionReader, resolve_class
from kotbeans.exceptions import (
    ClassResolutionError,
    ConflictingPropertyError,
    DefinitionNotFoundError,
    KotBeansError,
    MissingAttributeError,
    PropertyInstantiationError,
    SchemaViolationError,
)
from conftest import KotBeansTestCase, bean_node, beans_document, value_property


class TestExceptionHierarchy(unittest.TestCase):
    """Test that all exceptions inherit from KotBeansError."""

    def test_schema_violation_error_inherits_from_base(self):
        """SchemaViolationError inherits from KotBeansError."""
        error = SchemaViolationError("test")
        self.assertIsInstance(error, KotBeansError)
        self.assertIsInstance(error, Exception)

    def test_missing_attribute_error_inherits_from_base(self):
        """MissingAttributeError inherits from KotBeansError."""
        self.assertIsInstance(MissingAttributeError("test"), KotBeansError)

    def test_conflicting_property_error_inherits_from_base(self):
        """ConflictingPropertyError inherits from KotBeansError."""
        self.assertIsInstance(ConflictingPropertyError("test"), KotBeansError)

    def test_class_resolution_error_inherits_from_base(self):
        """ClassResolutionError inherits from KotBeansError."""
        self.assertIsInstance(ClassResolutionError("test"), KotBeansError)

    def test_property_instantiation_error_inherits_from_base(self):
        """PropertyInstantiationError inherits from KotBeansError."""
        self.assertIsInstance(PropertyInstantiationError("test"), KotBeansError)

    def test_definition_not_found_error_inherits_from_base(self):
        """DefinitionNotFoundError inherits from KotBeansError."""
        self.assertIsInstance(DefinitionNotFoundError("test"), KotBeansError)

    def test_catch_all_kotbeans_errors(self):
        """All KotBeans errors can be caught with base class."""
        exceptions = [
            SchemaViolationError("test"),
            MissingAttributeError("test"),
            ConflictingPropertyError("test"),
            ClassResolutionError("test"),
            PropertyInstantiationError("test"),
            DefinitionNotFoundError("test"),
        ]

        for exc in exceptions:
            try:
                raise exc
            except KotBeansError as e:
                self.assertIsInstance(e, KotBeansError)


class TestSchemaViolationMessages(unittest.TestCase):
    """Test SchemaViolationError message quality."""

    def test_message_names_expected_schema(self):
        """Error message shows the expected and actual marker."""
        reader = XmlBeanDefinitionReader(BeanDefinitionRegistry())

        with self.assertRaises(SchemaViolationError) as ctx:
            reader.parse_string(beans_document(bean_node("a", "fixtures.Service"), schema="other/schema"))

        message = str(ctx.exception)
        self.assertIn("schema/beans", message)
        self.assertIn("other/schema", message)


class TestBeanErrorMessages(KotBeansTestCase):
    """Test messages for failures inside a bean."""

    def test_missing_class_names_bean(self):
        with self.assertRaises(MissingAttributeError) as ctx:
            self.parse('<bean id="userService"/>')

        self.assertIn("userService", str(ctx.exception))
        self.assertIn("class", str(ctx.exception))

    def test_conflict_names_bean_and_property(self):
        with self.assertRaises(ConflictingPropertyError) as ctx:
            self.parse(bean_node("svc", "fixtures.Service", '<property name="timeout"/>'))

        self.assertIn("svc.timeout", str(ctx.exception))

    def test_coercion_error_names_bean_property_and_value(self):
        with self.assertRaises(PropertyInstantiationError) as ctx:
            self.parse(bean_node("svc", "fixtures.Service", value_property("timeout", "soon")))

        message = str(ctx.exception)
        self.assertIn("svc.timeout", message)
        self.assertIn("soon", message)
        self.assertIsNotNone(ctx.exception.__cause__)


class TestClassResolutionMessages(unittest.TestCase):
    """Test ClassResolutionError message quality."""

    def test_unknown_module(self):
        with self.assertRaises(ClassResolutionError) as ctx:
            resolve_class("no_such_module_anywhere.Service")

        self.assertIn("no_such_module_anywhere", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, ImportError)

    def test_unknown_attribute(self):
        with self.assertRaises(ClassResolutionError) as ctx:
            resolve_class("fixtures.Nope")

        self.assertIn("Nope", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
