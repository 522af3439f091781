"""
PackageScanner

This module discovers component classes inside a package and turns each
into a BeanDefinition. It is used by ``XmlBeanDefinitionReader`` for
``<package-scan>`` nodes and can also be used on its own:

    registry = BeanDefinitionRegistry()
    PackageScanner(registry).scan("app.services")

For every class found in the package:

- Classes without ``@component`` are skipped
- The bean name is the explicit component name, or the class name with
  its first letter lower-cased (``UserService`` -> ``userService``)
- ``@scope(...)`` overrides the default "singleton" scope
- ``autowired()`` fields become ``DependencyRef`` entries
- ``qualifier(...)`` fields are coerced and become ``PropertyValue`` entries

Any failure aborts the rest of the package. Definitions registered before
the failure stay in the registry.
"""

import importlib
import inspect
import logging
import pkgutil
from typing import Any, Callable, List, Optional, Set, Type

from .bean_scope import DEFAULT_SCOPE
from .class_resolver import resolve_class
from .coercion import (
    Coercer,
    declared_annotation,
    instantiate_property,
    resolve_type_hints,
    unwrap_optional,
)
from .definition import BeanDefinition, DependencyRef, PropertyValue
from .exceptions import ClassResolutionError, PropertyInstantiationError
from .markers import (
    AutowiredMarker,
    QualifierMarker,
    declared_field_markers,
    get_component_marker,
    get_scope_marker,
)
from .registry import BeanDefinitionRegistry

logger = logging.getLogger(__name__)

Enumerator = Callable[[str], List[str]]


def derive_bean_name(simple_name: str) -> str:
    """Default bean name for a class name: ``UserService`` -> ``userService``."""
    if not simple_name:
        return simple_name
    return simple_name[0].lower() + simple_name[1:]


def list_package_classes(package_name: str) -> List[str]:
    """List the fully qualified names of classes defined in a package.

    The package and all of its submodules are imported. Only classes whose
    ``__module__`` is the module being inspected are listed, so imported
    names are not reported twice.

    Args:
        package_name: Dotted package (or module) name

    Returns:
        Class paths such as ``"app.services.users.UserService"``

    Raises:
        ClassResolutionError: When the package or one of its modules
            cannot be imported
    """
    try:
        package = importlib.import_module(package_name)
    except Exception as e:
        raise ClassResolutionError(
            f"Cannot scan package '{package_name}': {e}"
        ) from e

    module_names = [package.__name__]
    if hasattr(package, '__path__'):
        module_names.extend(
            info.name
            for info in pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}.")
        )

    class_paths: List[str] = []
    for module_name in module_names:
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            raise ClassResolutionError(
                f"Cannot scan module '{module_name}' of package '{package_name}': {e}"
            ) from e
        for _, member in inspect.getmembers(module, inspect.isclass):
            if member.__module__ == module_name:
                class_paths.append(f"{module_name}.{member.__qualname__}")
    return class_paths


class PackageScanner:
    """Scanner turning marked classes of a package into bean definitions.

    Attributes:
        registry: Registry receiving the discovered definitions
        class_resolver: Callable turning a class path into a class
        coercer: Callable converting qualifier literals to typed values
        enumerator: Callable listing the class paths of a package
    """

    def __init__(
        self,
        registry: BeanDefinitionRegistry,
        class_resolver: Callable[[str], Type] = resolve_class,
        coercer: Coercer = instantiate_property,
        enumerator: Enumerator = list_package_classes
    ):
        self.registry = registry
        self.class_resolver = class_resolver
        self.coercer = coercer
        self.enumerator = enumerator

    def scan(self, package_name: str, resource: Optional[Any] = None) -> List[BeanDefinition]:
        """Scan one package and register every component found.

        Args:
            package_name: Package to scan
            resource: Provenance token stored on each definition

        Returns:
            The definitions registered by this scan, in discovery order

        Raises:
            ClassResolutionError: When the package or a class cannot be resolved
            PropertyInstantiationError: When a qualifier literal cannot be coerced
        """
        registered: List[BeanDefinition] = []
        for class_path in self.enumerator(package_name):
            bean_class = self.class_resolver(class_path)
            definition = self.build_definition(bean_class, resource)
            if definition is None:
                logger.debug("Skipping %s: not a component", class_path)
                continue
            self.registry.register(definition.name, definition)
            logger.debug("Registered bean '%s' from package scan", definition.description)
            registered.append(definition)

        logger.info(
            "Scanned package '%s': %d component(s) registered",
            package_name, len(registered),
        )
        return registered

    def build_definition(self, bean_class: Type, resource: Optional[Any] = None) -> Optional[BeanDefinition]:
        """Build the definition of a single class.

        Returns:
            The BeanDefinition, or None when the class is not a component
        """
        component = get_component_marker(bean_class)
        if component is None:
            return None

        bean_name = component.name.strip() if component.name else ""
        if not bean_name:
            bean_name = derive_bean_name(bean_class.__name__)

        scope_marker = get_scope_marker(bean_class)
        scope = DEFAULT_SCOPE
        if scope_marker is not None and scope_marker.value and scope_marker.value.strip():
            scope = scope_marker.value.strip()

        # Fresh accumulators for every class
        depends_on: Set[DependencyRef] = set()
        property_values: List[PropertyValue] = []

        for field_name, marker in declared_field_markers(bean_class):
            if isinstance(marker, AutowiredMarker):
                target = marker.name.strip() if marker.name else ""
                if not target:
                    target = self._field_type_alias(bean_class, bean_name, field_name)
                depends_on.add(DependencyRef(field_name, target))
            elif isinstance(marker, QualifierMarker):
                try:
                    value = self.coercer(bean_class, field_name, marker.value)
                except Exception as e:
                    raise PropertyInstantiationError(
                        f"Failed to instantiate property {bean_name}.{field_name} "
                        f"from {marker.value!r}: {e}"
                    ) from e
                property_values.append(PropertyValue(field_name, value))

        return BeanDefinition(
            name=bean_name,
            bean_class=bean_class,
            scope=scope,
            depends_on=depends_on,
            property_values=property_values,
            resource=resource,
        )

    @staticmethod
    def _field_type_alias(bean_class: Type, bean_name: str, field_name: str) -> str:
        """Derive the target bean name of an autowired field from its type hint."""
        field_type = resolve_type_hints(bean_class).get(field_name)
        if field_type is None:
            field_type = declared_annotation(bean_class, field_name)

        field_type = unwrap_optional(field_type)
        if isinstance(field_type, type):
            return derive_bean_name(field_type.__name__)
        if isinstance(field_type, str) and field_type.strip():
            simple_name = field_type.strip().strip("'\"").rsplit('.', 1)[-1]
            if simple_name.isidentifier():
                return derive_bean_name(simple_name)

        raise ClassResolutionError(
            f"Cannot derive the dependency of {bean_name}.{field_name}: "
            f"add a class type hint or pass a bean name to autowired()"
        )

