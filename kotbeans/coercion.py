"""
Property Coercion

Turns raw literal strings from documents and qualifier markers into typed
values. The target type is looked up from the bean class's type hints:

    class Service:
        timeout: int
        debug: bool = False

    instantiate_property(Service, "timeout", "30")   # 30
    instantiate_property(Service, "debug", "yes")    # True

Readers accept any callable with the same signature as ``coercer``, so the
conversion rules can be replaced without touching the parsers.
"""

import enum
import inspect
import sys
import types
import typing
from typing import Any, Callable, Dict, Type, Union

Coercer = Callable[[Type, str, str], Any]

_TRUE_LITERALS = frozenset({"true", "yes", "on", "1"})
_FALSE_LITERALS = frozenset({"false", "no", "off", "0"})


def instantiate_property(bean_class: Type, property_name: str, raw: str) -> Any:
    """Coerce ``raw`` to the declared type of ``bean_class.property_name``.

    Args:
        bean_class: Class declaring the property
        property_name: Field or constructor parameter name
        raw: Literal string to convert

    Returns:
        The converted value

    Raises:
        AttributeError: When the class declares no type for the property
        ValueError: When the literal is not valid for the type
        TypeError: When the type cannot be built from a string
    """
    target = property_type(bean_class, property_name)
    return coerce_value(target, raw)


def property_type(bean_class: Type, property_name: str) -> Any:
    """Return the declared type of a property.

    Class-level annotations are checked first, then ``__init__`` parameter
    annotations.
    """
    for owner in (bean_class, bean_class.__init__):
        hints = resolve_type_hints(owner)
        if property_name in hints:
            return hints[property_name]
        declared = declared_annotation(owner, property_name)
        if declared is not None:
            return declared

    raise AttributeError(
        f"{bean_class.__name__} declares no type hint for property '{property_name}'"
    )


def coerce_value(target: Any, raw: str) -> Any:
    """Convert ``raw`` to an instance of ``target``."""
    target = unwrap_optional(target)

    if target is Any or target is str:
        return raw
    if target is bool:
        return _parse_bool(raw)
    if isinstance(target, type) and issubclass(target, enum.Enum):
        return _parse_enum(target, raw)
    if isinstance(target, type):
        return target(raw)

    raise TypeError(f"Cannot coerce a literal to {target!r}")


def resolve_type_hints(obj: Any) -> Dict[str, Any]:
    """Resolve type hints, returning an empty dict when they cannot be evaluated."""
    try:
        return typing.get_type_hints(obj)
    except NameError:
        # Forward reference to a name that does not exist (yet)
        return {}
    except TypeError:
        # Objects without annotations (e.g. slot wrappers of builtins)
        return {}


def declared_annotation(obj: Any, name: str) -> Any:
    """Return the annotation of a single name on a class or function.

    Used when the hints of ``obj`` cannot be evaluated as a whole. A string
    annotation is evaluated on its own and returned unchanged when it does
    not resolve, so one bad forward reference does not hide the others.

    Returns:
        The annotation, or None when ``name`` is not annotated
    """
    owners = inspect.getmro(obj) if isinstance(obj, type) else (obj,)
    for owner in owners:
        try:
            annotations = inspect.get_annotations(owner)
        except (NameError, TypeError):
            continue
        if name in annotations:
            annotation = annotations[name]
            if isinstance(annotation, str):
                return _evaluate_annotation(owner, annotation)
            return annotation
    return None


def _evaluate_annotation(owner: Any, annotation: str) -> Any:
    if isinstance(owner, type):
        module = sys.modules.get(owner.__module__)
        globalns = vars(module) if module is not None else {}
        localns = dict(vars(owner))
    else:
        globalns = getattr(owner, '__globals__', {})
        localns = None
    try:
        return eval(annotation, globalns, localns)
    except (NameError, AttributeError, SyntaxError):
        return annotation


def unwrap_optional(target: Any) -> Any:
    origin = typing.get_origin(target)
    if origin is Union or origin is getattr(types, "UnionType", None):
        members = [arg for arg in typing.get_args(target) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return target


def _parse_bool(raw: str) -> bool:
    literal = raw.strip().lower()
    if literal in _TRUE_LITERALS:
        return True
    if literal in _FALSE_LITERALS:
        return False
    raise ValueError(f"'{raw}' is not a boolean literal")


def _parse_enum(target: Type[enum.Enum], raw: str) -> enum.Enum:
    literal = raw.strip()
    if literal in target.__members__:
        return target[literal]
    return target(literal)
