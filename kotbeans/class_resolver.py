"""
Class Resolver

Resolves dotted class paths ("app.services.UserService" or
"app.services:UserService") to class objects with importlib.
"""

import importlib
import logging
from typing import Type

from .exceptions import ClassResolutionError

logger = logging.getLogger(__name__)


def resolve_class(class_path: str) -> Type:
    """Import and return the class named by ``class_path``.

    Nested classes are supported with the colon form
    ("app.models:Outer.Inner").

    Args:
        class_path: Fully qualified class path

    Returns:
        The resolved class

    Raises:
        ClassResolutionError: When the module cannot be imported, the
            attribute does not exist, or it is not a class
    """
    if not isinstance(class_path, str) or not class_path.strip():
        raise ClassResolutionError(f"Invalid class path: {class_path!r}")

    class_path = class_path.strip()
    if ':' in class_path:
        module_name, attr_path = class_path.split(':', 1)
    elif '.' in class_path:
        module_name, attr_path = class_path.rsplit('.', 1)
    else:
        raise ClassResolutionError(
            f"Class path '{class_path}' is not qualified. "
            f"Use 'package.module.ClassName'."
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise ClassResolutionError(
            f"Cannot resolve class '{class_path}': module '{module_name}' "
            f"could not be imported: {e}"
        ) from e

    target = module
    try:
        for part in attr_path.split('.'):
            target = getattr(target, part)
    except AttributeError as e:
        raise ClassResolutionError(
            f"Cannot resolve class '{class_path}': '{attr_path}' not found "
            f"in module '{module_name}'"
        ) from e

    if not isinstance(target, type):
        raise ClassResolutionError(
            f"'{class_path}' resolved to {type(target).__name__}, not a class"
        )

    logger.debug("Resolved class path '%s'", class_path)
    return target
