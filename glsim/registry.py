"""Entity registry: entity identifiers, component storage and views."""

from __future__ import annotations

import copy
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional

UINT32_MAX = 0xFFFFFFFF
MAX_ENTITIES = 1000
MAX_COMPONENTS = 32

# The upper 32 bits of an entity id hold its index, the lower 32 bits its version.
Entity = int


def create_entity_id(index: int, version: int) -> Entity:
    """Pack an index and a version into one 64-bit entity id."""
    return ((index & UINT32_MAX) << 32) | (version & UINT32_MAX)


def get_entity_index(entity: Entity) -> int:
    return (entity >> 32) & UINT32_MAX


def get_entity_version(entity: Entity) -> int:
    return entity & UINT32_MAX


def is_entity_valid(entity: Entity) -> bool:
    """An id is valid unless its index is the reserved maximum."""
    return get_entity_index(entity) != UINT32_MAX


INVALID_ENTITY_ID: Entity = create_entity_id(UINT32_MAX, 0)

_component_ids: dict[type, int] = {}
_component_ids_lock = threading.Lock()


def get_component_id(component_type: type) -> int:
    """Return a stable id, distinct for every component type."""
    with _component_ids_lock:
        return _component_ids.setdefault(component_type, len(_component_ids))


def _mask_bit(component_id: int) -> int:
    if component_id >= MAX_COMPONENTS:
        raise IndexError(
            f"component id {component_id} exceeds the limit of {MAX_COMPONENTS} component types"
        )
    return 1 << component_id


def _has_bit(mask: int, component_id: int) -> bool:
    return bool((mask >> component_id) & 1)


@dataclass
class _EntityDescriptor:
    id: Entity
    mask: int = 0


class Registry:
    """Container of entities and the components assigned to them."""

    def __init__(self) -> None:
        self._entities: list[_EntityDescriptor] = []
        self._free_indices: deque[int] = deque()
        self._pools: dict[int, dict[int, Any]] = {}

    def clear(self) -> None:
        """Drop every entity and component."""
        self._entities.clear()
        self._free_indices.clear()
        self._pools.clear()

    def copy_to(self, dest: Registry) -> None:
        """Replace the contents of ``dest`` with a deep copy of this registry."""
        dest.clear()
        dest._entities = [_EntityDescriptor(d.id, d.mask) for d in self._entities]
        dest._free_indices = deque(self._free_indices)
        dest._pools = copy.deepcopy(self._pools)

    def spawn(self) -> Entity:
        """Create a new entity, reusing a freed index when one is available."""
        if self._free_indices:
            index = self._free_indices.popleft()
            descriptor = self._entities[index]
            descriptor.id = create_entity_id(index, get_entity_version(descriptor.id))
            return descriptor.id

        descriptor = _EntityDescriptor(create_entity_id(len(self._entities), 0))
        self._entities.append(descriptor)
        return descriptor.id

    def is_valid(self, entity: Entity) -> bool:
        index = get_entity_index(entity)
        if index >= len(self._entities):
            return False
        return self._entities[index].id == entity

    def despawn(self, entity: Entity) -> None:
        """Remove an entity and bump the version its index will be reused with."""
        if not self.is_valid(entity):
            raise ValueError(f"entity {entity} is not alive in this registry")
        index = get_entity_index(entity)
        descriptor = self._entities[index]
        descriptor.id = create_entity_id(UINT32_MAX, get_entity_version(entity) + 1)
        descriptor.mask = 0
        for pool in self._pools.values():
            pool.pop(index, None)
        self._free_indices.append(index)

    def assign(self, entity: Entity, component_type: type) -> Optional[Any]:
        """Attach a default-constructed component; None if the entity is not alive."""
        if not self.is_valid(entity):
            return None
        component_id = get_component_id(component_type)
        bit = _mask_bit(component_id)
        index = get_entity_index(entity)
        component = component_type()
        self._pools.setdefault(component_id, {})[index] = component
        self._entities[index].mask |= bit
        return component

    def assign_many(self, entity: Entity, *component_types: type) -> tuple:
        if not self.is_valid(entity):
            return tuple(None for _ in component_types)
        return tuple(self.assign(entity, t) for t in component_types)

    def remove(self, entity: Entity, component_type: type) -> bool:
        """Detach a component; False only if the entity is not alive."""
        if not self.is_valid(entity):
            return False
        component_id = get_component_id(component_type)
        index = get_entity_index(entity)
        descriptor = self._entities[index]
        if _has_bit(descriptor.mask, component_id):
            descriptor.mask &= ~(1 << component_id)
            self._pools.get(component_id, {}).pop(index, None)
        return True

    def remove_many(self, entity: Entity, *component_types: type) -> None:
        if not self.is_valid(entity):
            return
        for component_type in component_types:
            self.remove(entity, component_type)

    def get(self, entity: Entity, component_type: type) -> Optional[Any]:
        if not self.is_valid(entity):
            return None
        component_id = get_component_id(component_type)
        index = get_entity_index(entity)
        if not _has_bit(self._entities[index].mask, component_id):
            return None
        return self._pools[component_id].get(index)

    def get_many(self, entity: Entity, *component_types: type) -> tuple:
        return tuple(self.get(entity, t) for t in component_types)

    def has(self, entity: Entity, *component_types: type) -> bool:
        """True if the entity is alive and owns every given component type."""
        if not self.is_valid(entity):
            return False
        mask = self._entities[get_entity_index(entity)].mask
        return all(_has_bit(mask, get_component_id(t)) for t in component_types)

    def view(self, *component_types: type) -> Iterator[Entity]:
        """Yield live entities owning all given components; all of them if none given."""
        required = 0
        for component_type in component_types:
            required |= 1 << get_component_id(component_type)
        for descriptor in self._entities:
            if is_entity_valid(descriptor.id) and descriptor.mask & required == required:
                yield descriptor.id