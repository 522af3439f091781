"""
Markers

Decorators and field markers that make classes discoverable by
``PackageScanner``:

    @component                      # bean name "userService"
    @scope("prototype")
    class UserService:
        repository: UserRepository = autowired()          # -> "userRepository"
        cache: Cache = autowired("redisCache")             # -> "redisCache"
        timeout: int = qualifier("30")                     # -> 30

Class markers are stamped onto the class itself and are not inherited by
subclasses. Field markers are plain class attributes; the scanner only
looks at attributes declared directly on the scanned class.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Type, TypeVar, Union

from .constants import COMPONENT_MARKER, SCOPE_MARKER

T = TypeVar('T', bound=type)


@dataclass(frozen=True)
class ComponentMarker:
    """Marks a class as a bean; ``name`` may be blank"""
    name: str = ""


@dataclass(frozen=True)
class ScopeMarker:
    """Overrides the default scope of a component"""
    value: str


class FieldMarker:
    """Base class for markers assigned to class attributes."""

    def __init__(self):
        self.field_name: Optional[str] = None

    def __set_name__(self, owner: Type, name: str) -> None:
        self.field_name = name


class AutowiredMarker(FieldMarker):
    """Field that depends on another bean.

    Attributes:
        name: Explicit bean name, or "" to derive it from the field type
    """

    def __init__(self, name: str = ""):
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f"autowired({self.name!r})" if self.name else "autowired()"


class QualifierMarker(FieldMarker):
    """Field assigned directly from a literal value.

    Attributes:
        value: Raw literal, coerced to the field type by the scanner
    """

    def __init__(self, value: str):
        super().__init__()
        self.value = value

    def __repr__(self) -> str:
        return f"qualifier({self.value!r})"


def component(target: Union[T, str, None] = None, *, name: str = "") -> Union[T, Callable[[T], T]]:
    """Mark a class as a component.

    Supports bare and called forms::

        @component
        class A: ...

        @component("beanName")
        class B: ...

        @component(name="beanName")
        class C: ...
    """
    if isinstance(target, type):
        setattr(target, COMPONENT_MARKER, ComponentMarker())
        return target

    explicit_name = target if target is not None else name

    def decorate(cls: T) -> T:
        setattr(cls, COMPONENT_MARKER, ComponentMarker(explicit_name or ""))
        return cls

    return decorate


def scope(value: str) -> Callable[[T], T]:
    """Set the scope of a component, e.g. ``@scope("prototype")``."""

    def decorate(cls: T) -> T:
        setattr(cls, SCOPE_MARKER, ScopeMarker(value))
        return cls

    return decorate


def autowired(name: str = "") -> AutowiredMarker:
    """Declare a field as a dependency on another bean."""
    return AutowiredMarker(name)


def qualifier(value: str) -> QualifierMarker:
    """Declare a field whose value is the coerced literal ``value``."""
    return QualifierMarker(value)


def get_component_marker(cls: Type) -> Optional[ComponentMarker]:
    """Return the component marker declared on ``cls`` itself, or None."""
    marker = cls.__dict__.get(COMPONENT_MARKER)
    return marker if isinstance(marker, ComponentMarker) else None


def get_scope_marker(cls: Type) -> Optional[ScopeMarker]:
    """Return the scope marker declared on ``cls`` itself, or None."""
    marker = cls.__dict__.get(SCOPE_MARKER)
    return marker if isinstance(marker, ScopeMarker) else None


def declared_field_markers(cls: Type) -> List[Tuple[str, FieldMarker]]:
    """List ``(field_name, marker)`` for markers declared on ``cls``, in declaration order."""
    return [
        (field_name, value)
        for field_name, value in vars(cls).items()
        if isinstance(value, FieldMarker)
    ]
