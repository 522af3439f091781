"""
BeanScope Enum

Defines the well-known scopes of bean definitions
"""

from enum import Enum


class BeanScope(str, Enum):
    """Well-known bean scopes.

    Definitions store their scope as a plain string, so any non-blank
    scope name is accepted; these members cover the common ones.
    """
    SINGLETON = "singleton"
    PROTOTYPE = "prototype"


DEFAULT_SCOPE = BeanScope.SINGLETON.value
