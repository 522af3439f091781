# Public API
from .bean_parser import BeanElementParser
from .bean_scope import BeanScope
from .class_resolver import resolve_class
from .coercion import instantiate_property
from .definition import BeanDefinition, DependencyRef, PropertyValue
from .exceptions import (
    ClassResolutionError,
    ConflictingPropertyError,
    DefinitionNotFoundError,
    KotBeansError,
    MissingAttributeError,
    PropertyInstantiationError,
    SchemaViolationError,
)
from .markers import autowired, component, qualifier, scope
from .package_scanner import PackageScanner, derive_bean_name, list_package_classes
from .reader import XmlBeanDefinitionReader
from .registry import BeanDefinitionRegistry

__all__ = [
    "XmlBeanDefinitionReader",
    "BeanElementParser",
    "PackageScanner",
    "BeanDefinitionRegistry",
    "BeanDefinition",
    "DependencyRef",
    "PropertyValue",
    "BeanScope",
    # Markers
    "component",
    "scope",
    "autowired",
    "qualifier",
    # Collaborators
    "resolve_class",
    "instantiate_property",
    "list_package_classes",
    "derive_bean_name",
    # Exceptions
    "KotBeansError",
    "SchemaViolationError",
    "MissingAttributeError",
    "ConflictingPropertyError",
    "ClassResolutionError",
    "PropertyInstantiationError",
    "DefinitionNotFoundError",
]

# Version will be dynamically set by poetry-dynamic-versioning
try:
    from ._version import __version__
except ImportError:
    # Fallback for development
    __version__ = '0.0.0'
