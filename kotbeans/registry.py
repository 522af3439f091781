"""
BeanDefinitionRegistry

This module provides the catalog of parsed bean definitions. Both the
document reader and the package scanner write into it, and the downstream
container reads from it.

The registry is a plain value owned by the caller:

- Inserting a name that already exists overwrites the previous definition
  (last-write-wins, dependency sets are never merged)
- ``lock`` is held by the reader for a whole parse pass, so two passes
  writing into the same registry from different threads run one after the
  other
- ``merge()`` copies another registry in, for callers that parse into a
  private registry first

Example::

    registry = BeanDefinitionRegistry()
    XmlBeanDefinitionReader(registry).parse_file("beans.xml")

    definition = registry.get("userService")
    maybe = registry.get_or_null("notThere")  # None
"""

import logging
import threading
from typing import Dict, Iterator, List, Optional

from .definition import BeanDefinition
from .exceptions import DefinitionNotFoundError

logger = logging.getLogger(__name__)


class BeanDefinitionRegistry:
    """Name to BeanDefinition catalog with insert-or-overwrite semantics.

    Attributes:
        lock: Re-entrant lock guarding whole parse passes
        _definitions: Dictionary mapping bean names to their definitions

    Note:
        Individual methods do not take the lock. Writers that may run
        concurrently must hold ``lock`` around their entire pass, which
        ``XmlBeanDefinitionReader.parse`` does.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._definitions: Dict[str, BeanDefinition] = {}
        self.lock = threading.RLock()

    def register(self, name: str, definition: BeanDefinition) -> None:
        """Insert a definition, replacing any previous one with the same name.

        Args:
            name: Bean name to register under
            definition: The definition to store

        Example::

            registry.register("svc", first)
            registry.register("svc", second)
            assert registry.get("svc") is second
        """
        previous = self._definitions.get(name)
        if previous is not None:
            logger.debug(
                "Overwriting bean definition '%s' (%s -> %s)",
                name, previous.description, definition.description,
            )
        self._definitions[name] = definition

    def get(self, name: str) -> BeanDefinition:
        """Get the definition registered under ``name``.

        Args:
            name: Bean name to look up

        Returns:
            The registered BeanDefinition

        Raises:
            DefinitionNotFoundError: When no definition has that name
        """
        definition = self._definitions.get(name)
        if definition is None:
            registered = ", ".join(sorted(self._definitions)) or "None"
            raise DefinitionNotFoundError(
                f"No bean definition named '{name}'.\n"
                f"Registered beans: {registered}"
            )
        return definition

    def get_or_null(self, name: str) -> Optional[BeanDefinition]:
        """Get the definition registered under ``name``, or None."""
        return self._definitions.get(name)

    def contains(self, name: str) -> bool:
        return name in self._definitions

    def remove(self, name: str) -> None:
        """Remove a definition. Unknown names are silently skipped."""
        self._definitions.pop(name, None)

    def clear(self) -> None:
        self._definitions.clear()

    def names(self) -> List[str]:
        return list(self._definitions)

    def definitions(self) -> List[BeanDefinition]:
        return list(self._definitions.values())

    def merge(self, other: 'BeanDefinitionRegistry') -> None:
        """Copy every definition of ``other`` into this registry.

        Entries of ``other`` win over entries already present here.
        The lock of this registry is held for the whole merge.

        Args:
            other: Registry to copy from

        Example::

            staging = BeanDefinitionRegistry()
            XmlBeanDefinitionReader(staging).parse_file("plugins.xml")
            shared.merge(staging)  # only reached when the pass succeeded
        """
        with self.lock:
            for name, definition in other._definitions.items():
                self.register(name, definition)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __getitem__(self, name: str) -> BeanDefinition:
        """Support subscript syntax: registry["name"]."""
        return self.get(name)

    def __repr__(self) -> str:
        return f"BeanDefinitionRegistry({sorted(self._definitions)})"
