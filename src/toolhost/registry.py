"""ToolRegistry — name-keyed table of tool descriptors.

Populated once during startup, then frozen and shared read-only by every
request. Descriptors only; the callable behavior lives in
:class:`~toolhost.executor.ToolExecutor`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toolhost.errors import RegistryFrozenError, ToolNotFoundError

if TYPE_CHECKING:
    from toolhost.protocol.models import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Maintains a name-to-descriptor map.

    Usage::

        registry = ToolRegistry()
        registry.register(echo_descriptor)
        registry.freeze()

        registry.get("echo")     # -> ToolDescriptor
        registry.list()          # -> [ToolDescriptor, ...]
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDescriptor] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, descriptor: ToolDescriptor) -> None:
        """Add *descriptor*, replacing any existing entry with the same name."""
        if self._frozen:
            raise RegistryFrozenError(descriptor.name)
        if descriptor.name in self._tools:
            logger.debug("Replacing registered tool %s", descriptor.name)
        self._tools[descriptor.name] = descriptor

    def freeze(self) -> None:
        """End the startup phase; later registrations raise."""
        self._frozen = True

    def get(self, name: str) -> ToolDescriptor:
        descriptor = self._tools.get(name)
        if descriptor is None:
            raise ToolNotFoundError(name)
        return descriptor

    def names(self) -> list[str]:
        return [*self._tools]

    def list(self) -> list[ToolDescriptor]:
        """Return every descriptor. Order is not part of the contract."""
        return [*self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
