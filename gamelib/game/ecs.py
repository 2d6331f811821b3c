"""Entity-component-system building blocks."""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import TypeVar

Entity = int
"""An entity is an unsigned integer identifier."""


class Component:
    """Base class of all components."""


C = TypeVar("C", bound=Component)


class ComponentStorage:
    """Holds at most one component of each type per entity."""

    def __init__(self) -> None:
        self._maps: dict[type[Component], dict[Entity, Component]] = {}

    def add(self, entity: Entity, component: Component) -> None:
        """Attach ``component`` to ``entity``, replacing one of the same type."""
        if not isinstance(component, Component):
            raise TypeError(
                f"component must derive from Component, got {type(component).__name__}"
            )
        self._maps.setdefault(type(component), {})[entity] = component

    def remove(self, entity: Entity, component_type: type[Component]) -> None:
        """Detach the component of ``component_type`` from ``entity``, if any."""
        self._maps.get(component_type, {}).pop(entity, None)

    def get(self, entity: Entity, component_type: type[C]) -> C | None:
        """Return the component of ``component_type`` on ``entity``, or None."""
        return self._maps.get(component_type, {}).get(entity)  # type: ignore[return-value]


class System(abc.ABC):
    """Logic run over a set of entities each frame."""

    @abc.abstractmethod
    def update(
        self, dt: float, store: ComponentStorage, entities: Sequence[Entity]
    ) -> None:
        """Process ``entities``; ``dt`` is the elapsed time."""