"""
Definition

Data classes representing bean definitions
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Set, Type

from .bean_scope import DEFAULT_SCOPE
from .exceptions import ClassResolutionError, MissingAttributeError


@dataclass(frozen=True)
class PropertyValue:
    """Literal property, already coerced to its target type"""
    name: str
    value: Any


@dataclass(frozen=True)
class DependencyRef:
    """Field that must be wired to another bean"""
    field_name: str
    bean_name: str


@dataclass
class BeanDefinition:
    """Bean definition

    Built in one pass by the document parser or the package scanner and
    then handed to the registry. The wiring engine reads ``depends_on`` and
    ``property_values``; nothing here instantiates the bean.
    """
    name: str
    bean_class: Type
    scope: str = DEFAULT_SCOPE
    depends_on: Set[DependencyRef] = field(default_factory=set)
    property_values: List[PropertyValue] = field(default_factory=list)
    resource: Optional[Any] = None  # Document or scan pass that produced it
    description: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise MissingAttributeError("Bean definition requires a non-empty name")
        if not isinstance(self.bean_class, type):
            raise ClassResolutionError(
                f"Bean definition '{self.name}' requires a class, "
                f"got {self.bean_class!r}"
            )
        if not self.description:
            self.description = f"{self.name}:{qualified_name(self.bean_class)}"

    def get_property_value(self, name: str) -> Optional[PropertyValue]:
        """Return the literal property called ``name``, or None."""
        for property_value in self.property_values:
            if property_value.name == name:
                return property_value
        return None

    def dependency_names(self) -> Set[str]:
        """Names of all beans this definition refers to."""
        return {ref.bean_name for ref in self.depends_on}


def qualified_name(cls: Type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
