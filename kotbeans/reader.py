"""
XmlBeanDefinitionReader

This module provides the entry point for loading bean definitions from a
bean document. It validates the document root, dispatches ``<bean>`` nodes
to ``BeanElementParser``, collects ``<package-scan>`` targets and finally
runs ``PackageScanner`` once per collected package.

Example::

    registry = BeanDefinitionRegistry()
    reader = XmlBeanDefinitionReader(registry)
    reader.parse_string('''
        <beans xmlnamespace="schema/beans">
            <bean id="dataSource" class="app.db.DataSource">
                <property name="url" value="sqlite://"/>
            </bean>
            <bean id="userRepository" class="app.repo.UserRepository">
                <property name="db" ref="dataSource"/>
            </bean>
            <package-scan package_name="app.services"/>
        </beans>
    ''')

    registry.get("userRepository").depends_on
    # {DependencyRef(field_name='db', bean_name='dataSource')}

Failure semantics:
    Any error aborts the pass immediately. Beans registered earlier in the
    same pass stay in the registry; whether to start the application with a
    partially populated registry is left to the caller. Parse into a fresh
    registry and ``merge()`` it on success to get all-or-nothing behaviour.
"""

import logging
import os
import xml.etree.ElementTree as ElementTree
from typing import Any, Callable, Optional, Set, Type, Union

from .bean_parser import BeanElementParser, require_attribute
from .class_resolver import resolve_class
from .coercion import Coercer, instantiate_property
from .constants import (
    BEAN_ELEMENT,
    BEANS_SCHEMA,
    ID_ATTRIBUTE,
    NAMESPACE_ATTRIBUTE,
    PACKAGE_NAME_ATTRIBUTE,
    PACKAGE_SCAN_ELEMENT,
)
from .definition import BeanDefinition
from .exceptions import SchemaViolationError
from .package_scanner import Enumerator, PackageScanner, list_package_classes
from .registry import BeanDefinitionRegistry

logger = logging.getLogger(__name__)


class XmlBeanDefinitionReader:
    """Reader loading bean documents into a BeanDefinitionRegistry.

    Attributes:
        registry: The registry that receives all definitions
        namespace_attribute: Root attribute holding the schema marker
        schema: Expected value of the schema marker
        bean_parser: Parser used for ``<bean>`` nodes
        scanner: Scanner used for ``<package-scan>`` targets

    Example::

        registry = BeanDefinitionRegistry()
        reader = XmlBeanDefinitionReader(registry)
        reader.parse_file("config/beans.xml")
        service = registry.get("userService")
    """

    def __init__(
        self,
        registry: Optional[BeanDefinitionRegistry] = None,
        namespace_attribute: str = NAMESPACE_ATTRIBUTE,
        schema: str = BEANS_SCHEMA,
        class_resolver: Callable[[str], Type] = resolve_class,
        coercer: Coercer = instantiate_property,
        enumerator: Enumerator = list_package_classes
    ):
        """Initialize the reader.

        Args:
            registry: Registry to populate (a new one is created if omitted)
            namespace_attribute: Root attribute holding the schema marker
            schema: Expected value of the schema marker
            class_resolver: Turns class paths into classes
            coercer: Converts literal property values
            enumerator: Lists the class paths of a package for scanning
        """
        self.registry = registry if registry is not None else BeanDefinitionRegistry()
        self.namespace_attribute = namespace_attribute
        self.schema = schema
        self.bean_parser = BeanElementParser(class_resolver=class_resolver, coercer=coercer)
        self.scanner = PackageScanner(
            self.registry,
            class_resolver=class_resolver,
            coercer=coercer,
            enumerator=enumerator,
        )

    def parse(self, root: Any, resource: Optional[Any] = None) -> BeanDefinitionRegistry:
        """Parse a document root and register everything it describes.

        The registry lock is held for the whole pass.

        Args:
            root: Root element of the bean document
            resource: Provenance token stored on each definition

        Returns:
            The populated registry

        Raises:
            SchemaViolationError: Wrong root marker, unknown tag or empty document
            MissingAttributeError: Missing ``id``/``class``/``name``/``package_name``
            ConflictingPropertyError: Property with both or neither of value/ref
            ClassResolutionError: Class or package cannot be resolved
            PropertyInstantiationError: Literal value cannot be coerced
        """
        marker = root.get(self.namespace_attribute)
        if marker != self.schema:
            raise SchemaViolationError(
                f"Not a bean document: expected {self.namespace_attribute}="
                f"\"{self.schema}\" on <{root.tag}>, got {marker!r}"
            )

        children = list(root)
        if not children:
            raise SchemaViolationError(
                f"Bean document <{root.tag}> declares no <{BEAN_ELEMENT}> "
                f"or <{PACKAGE_SCAN_ELEMENT}> nodes"
            )

        with self.registry.lock:
            packages_to_scan: Set[str] = set()
            bean_count = 0

            for child in children:
                if child.tag == BEAN_ELEMENT:
                    bean_name = require_attribute(
                        child, ID_ATTRIBUTE,
                        f"<{BEAN_ELEMENT}> requires an 'id' attribute",
                    )
                    definition = self.bean_parser.parse(child, bean_name, resource)
                    self.registry.register(bean_name, definition)
                    logger.debug("Registered bean '%s'", definition.description)
                    bean_count += 1
                elif child.tag == PACKAGE_SCAN_ELEMENT:
                    packages_to_scan.add(require_attribute(
                        child, PACKAGE_NAME_ATTRIBUTE,
                        f"<{PACKAGE_SCAN_ELEMENT}> requires a 'package_name' attribute",
                    ))
                else:
                    raise SchemaViolationError(
                        f"Unexpected <{child.tag}> in bean document; expected "
                        f"<{BEAN_ELEMENT}> or <{PACKAGE_SCAN_ELEMENT}>"
                    )

            for package_name in sorted(packages_to_scan):
                self.scanner.scan(package_name, resource)

        logger.info(
            "Loaded bean document %s: %d bean(s), %d package(s) scanned",
            resource if resource is not None else "<element>",
            bean_count, len(packages_to_scan),
        )
        return self.registry

    def parse_string(self, text: Union[str, bytes], resource: Optional[Any] = None) -> BeanDefinitionRegistry:
        """Parse a bean document given as XML text."""
        try:
            root = ElementTree.fromstring(text)
        except ElementTree.ParseError as e:
            raise SchemaViolationError(f"Malformed bean document: {e}") from e
        return self.parse(root, resource)

    def parse_file(self, path: Union[str, "os.PathLike[str]"], resource: Optional[Any] = None) -> BeanDefinitionRegistry:
        """Parse a bean document file; the path is the default resource token."""
        try:
            tree = ElementTree.parse(path)
        except ElementTree.ParseError as e:
            raise SchemaViolationError(f"Malformed bean document {path}: {e}") from e
        return self.parse(tree.getroot(), resource if resource is not None else os.fspath(path))

    def get_bean_definition(self, name: str) -> Optional[BeanDefinition]:
        """Look up a definition in this reader's registry, or None."""
        return self.registry.get_or_null(name)
