"""
BeanElementParser

This module turns a single ``<bean>`` node into a BeanDefinition:

    <bean id="userRepository" class="app.repo.UserRepository" scope="prototype">
        <property name="table" value="users"/>
        <property name="db" ref="dataSource"/>
    </bean>

- ``value`` properties are coerced against the bean class and stored in
  ``property_values``
- ``ref`` properties become ``DependencyRef`` entries in ``depends_on``

A failure on any property aborts the whole bean; nothing is returned for it.
"""

from typing import Any, Callable, List, Optional, Set, Type

from .bean_scope import DEFAULT_SCOPE
from .class_resolver import resolve_class
from .coercion import Coercer, instantiate_property
from .constants import (
    CLASS_ATTRIBUTE,
    NAME_ATTRIBUTE,
    PROPERTY_ELEMENT,
    REF_ATTRIBUTE,
    SCOPE_ATTRIBUTE,
    VALUE_ATTRIBUTE,
)
from .definition import BeanDefinition, DependencyRef, PropertyValue
from .exceptions import (
    ConflictingPropertyError,
    MissingAttributeError,
    PropertyInstantiationError,
    SchemaViolationError,
)


def has_text(value: Optional[str]) -> bool:
    """True when ``value`` is a non-blank string."""
    return value is not None and value.strip() != ""


def require_attribute(element: Any, attribute: str, message: str) -> str:
    """Return a non-blank attribute value or raise MissingAttributeError."""
    value = element.get(attribute)
    if not has_text(value):
        raise MissingAttributeError(message)
    return value.strip()


class BeanElementParser:
    """Parser for ``<bean>`` nodes.

    Attributes:
        class_resolver: Callable turning a class path into a class
        coercer: Callable converting literal values to typed values
    """

    def __init__(
        self,
        class_resolver: Callable[[str], Type] = resolve_class,
        coercer: Coercer = instantiate_property
    ):
        self.class_resolver = class_resolver
        self.coercer = coercer

    def parse(self, element: Any, bean_name: str, resource: Optional[Any] = None) -> BeanDefinition:
        """Build the definition described by a ``<bean>`` node.

        Args:
            element: The ``<bean>`` element
            bean_name: Name taken from the element's ``id``
            resource: Provenance token stored on the definition

        Returns:
            The assembled BeanDefinition

        Raises:
            MissingAttributeError: When ``class`` or a property ``name`` is missing
            ClassResolutionError: When ``class`` cannot be resolved
            SchemaViolationError: When a child is not a ``<property>``
            ConflictingPropertyError: When a property sets both or neither of value/ref
            PropertyInstantiationError: When a literal value cannot be coerced
        """
        class_path = require_attribute(
            element, CLASS_ATTRIBUTE,
            f"<bean id=\"{bean_name}\"> requires a 'class' attribute",
        )
        bean_class = self.class_resolver(class_path)

        scope = element.get(SCOPE_ATTRIBUTE)
        if not has_text(scope):
            scope = DEFAULT_SCOPE

        depends_on: Set[DependencyRef] = set()
        property_values: List[PropertyValue] = []

        for child in element:
            if child.tag != PROPERTY_ELEMENT:
                raise SchemaViolationError(
                    f"Unexpected <{child.tag}> in <bean id=\"{bean_name}\">; "
                    f"only <{PROPERTY_ELEMENT}> is allowed"
                )

            property_name = require_attribute(
                child, NAME_ATTRIBUTE,
                f"{bean_name}: <property> requires a 'name' attribute",
            )
            value = child.get(VALUE_ATTRIBUTE)
            ref = child.get(REF_ATTRIBUTE)

            if has_text(value) == has_text(ref):
                raise ConflictingPropertyError(
                    f"{bean_name}.{property_name}: exactly one of 'value' "
                    f"and 'ref' must be set"
                )

            if has_text(value):
                property_values.append(
                    PropertyValue(
                        property_name,
                        self._coerce(bean_class, bean_name, property_name, value),
                    )
                )
            else:
                depends_on.add(DependencyRef(property_name, ref.strip()))

        return BeanDefinition(
            name=bean_name,
            bean_class=bean_class,
            scope=scope.strip(),
            depends_on=depends_on,
            property_values=property_values,
            resource=resource,
        )

    def _coerce(self, bean_class: Type, bean_name: str, property_name: str, raw: str) -> Any:
        try:
            return self.coercer(bean_class, property_name, raw)
        except Exception as e:
            raise PropertyInstantiationError(
                f"Failed to instantiate property {bean_name}.{property_name} "
                f"from {raw!r}: {e}"
            ) from e
