"""
Test Configuration and Utilities

Common base classes and helper functions for KotBeans tests
"""

import unittest
from typing import Optional
from xml.sax.saxutils import quoteattr

from kotbeans import BeanDefinitionRegistry, XmlBeanDefinitionReader


class KotBeansTestCase(unittest.TestCase):
    """
    Base test case class for KotBeans tests.

    Creates a fresh registry and reader before each test so that no
    definitions leak from one test into the next.
    """

    def setUp(self):
        """Create an empty registry and a reader bound to it"""
        self.registry = BeanDefinitionRegistry()
        self.reader = XmlBeanDefinitionReader(self.registry)

    def parse(self, *nodes: str, resource: Optional[str] = "test.xml") -> BeanDefinitionRegistry:
        """Parse a bean document built from the given child nodes."""
        return self.reader.parse_string(beans_document(*nodes), resource)


def beans_document(*nodes: str, schema: str = "schema/beans") -> str:
    """
    Wrap child nodes in a ``<beans>`` root carrying the schema marker.

    Example:
        >>> beans_document('<bean id="db" class="fixtures.DataSource"/>')
        '<beans xmlnamespace="schema/beans"><bean id="db" class="fixtures.DataSource"/></beans>'
    """
    return f'<beans xmlnamespace={quoteattr(schema)}>{"".join(nodes)}</beans>'


def bean_node(bean_id: str, class_path: str, *properties: str, scope: Optional[str] = None) -> str:
    """Build a ``<bean>`` node with optional scope and property children."""
    scope_attribute = f" scope={quoteattr(scope)}" if scope is not None else ""
    return (
        f'<bean id={quoteattr(bean_id)} class={quoteattr(class_path)}{scope_attribute}>'
        f'{"".join(properties)}</bean>'
    )


def value_property(name: str, value: str) -> str:
    return f'<property name={quoteattr(name)} value={quoteattr(value)}/>'


def ref_property(name: str, ref: str) -> str:
    return f'<property name={quoteattr(name)} ref={quoteattr(ref)}/>'
