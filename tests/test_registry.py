from dataclasses import dataclass

import pytest

from glsim.registry import (
    INVALID_ENTITY_ID,
    Registry,
    create_entity_id,
    get_component_id,
    get_entity_index,
    get_entity_version,
    is_entity_valid,
)


@dataclass
class ComponentA:
    a: int = 0
    b: int = 0
    c: int = 0


@dataclass
class ComponentB:
    x: float = 0.0


@dataclass
class ComponentC:
    label: str = ""


def test_create_new_entities():
    scene = Registry()
    e1 = scene.spawn()
    e2 = scene.spawn()
    assert e1 != e2
    assert scene.is_valid(e1)
    assert scene.is_valid(e2)


def test_destroy_entities_and_reuse_ids():
    scene = Registry()
    e1 = scene.spawn()
    scene.despawn(e1)
    assert not scene.is_valid(e1)

    e2 = scene.spawn()
    assert scene.is_valid(e2)
    assert get_entity_index(e2) == get_entity_index(e1)


def test_destroy_and_spawn_multiple_entities():
    scene = Registry()
    e1 = scene.spawn()
    e2 = scene.spawn()
    scene.despawn(e1)
    scene.despawn(e2)
    assert not scene.is_valid(e1)
    assert not scene.is_valid(e2)

    e3 = scene.spawn()
    e4 = scene.spawn()
    assert scene.is_valid(e3)
    assert scene.is_valid(e4)

    freed = {get_entity_index(e1), get_entity_index(e2)}
    assert get_entity_index(e3) in freed
    assert get_entity_index(e4) in freed
    assert get_entity_version(e3) == 1
    assert get_entity_version(e4) == 1


def test_check_invalid_entities():
    scene = Registry()
    e1 = scene.spawn()
    assert scene.is_valid(e1)

    invalid_entity = e1 + 1000
    assert not scene.is_valid(invalid_entity)

    scene.despawn(e1)
    assert not scene.is_valid(e1)


def test_registry_copy():
    scene1 = Registry()
    e1 = scene1.spawn()
    t1 = scene1.assign(e1, ComponentA)
    t1.a, t1.b, t1.c = 1, 2, 3
    scene1.assign(e1, ComponentB)

    e2 = scene1.spawn()
    scene1.assign(e2, ComponentA)

    scene2 = Registry()
    scene1.copy_to(scene2)

    assert scene2.has(e1, ComponentA)
    assert scene2.has(e1, ComponentB)

    t1_copy = scene2.get(e1, ComponentA)
    assert t1_copy is not t1
    assert t1_copy == t1

    assert scene2.has(e2, ComponentA)


def test_copy_is_independent_of_source():
    scene1 = Registry()
    e1 = scene1.spawn()
    scene1.assign(e1, ComponentB).x = 4.0

    scene2 = Registry()
    scene1.copy_to(scene2)
    scene2.get(e1, ComponentB).x = 8.0
    scene2.despawn(e1)

    assert scene1.get(e1, ComponentB).x == 4.0
    assert scene1.is_valid(e1)


def test_component_ids_are_distinct_and_stable():
    a_id = get_component_id(ComponentA)
    b_id = get_component_id(ComponentB)
    c_id = get_component_id(ComponentC)
    assert len({a_id, b_id, c_id}) == 3
    assert get_component_id(ComponentA) == a_id


def test_component_assign_and_remove():
    scene = Registry()
    e1 = scene.spawn()
    e2 = scene.spawn()

    t1 = scene.assign(e1, ComponentA)
    t1.a, t1.b, t1.c = 6, 3, 9
    assert scene.get(e1, ComponentA) is t1
    assert (t1.a, t1.b, t1.c) == (6, 3, 9)

    t2 = scene.assign(e2, ComponentB)
    t2.x = 9.0
    assert scene.get(e2, ComponentB) is t2
    assert t2.x == 9.0

    assert scene.remove(e2, ComponentB) is True
    assert scene.get(e2, ComponentB) is None


def test_registry_views():
    scene = Registry()
    e1 = scene.spawn()
    e2 = scene.spawn()
    e3 = scene.spawn()

    scene.assign_many(e1, ComponentA, ComponentB)
    scene.assign_many(e2, ComponentA, ComponentB)
    scene.assign(e3, ComponentA)

    it = iter(scene.view(ComponentA))
    assert next(it) == e1
    assert next(it) == e2
    assert next(it) == e3
    with pytest.raises(StopIteration):
        next(it)

    assert list(scene.view(ComponentB)) == [e1, e2]
    assert list(scene.view()) == [e1, e2, e3]


def test_view_skips_despawned_entities():
    scene = Registry()
    e1 = scene.spawn()
    e2 = scene.spawn()
    scene.assign(e1, ComponentA)
    scene.assign(e2, ComponentA)
    scene.despawn(e1)
    assert list(scene.view(ComponentA)) == [e2]
    assert list(scene.view()) == [e2]


def test_assign_to_dead_entity_returns_none():
    scene = Registry()
    e1 = scene.spawn()
    scene.despawn(e1)
    assert scene.assign(e1, ComponentA) is None
    assert scene.assign_many(e1, ComponentA, ComponentB) == (None, None)
    assert scene.get(e1, ComponentA) is None
    assert scene.remove(e1, ComponentA) is False


def test_despawn_dead_entity_raises():
    scene = Registry()
    e1 = scene.spawn()
    scene.despawn(e1)
    with pytest.raises(ValueError):
        scene.despawn(e1)


def test_reused_index_starts_without_components():
    scene = Registry()
    e1 = scene.spawn()
    scene.assign(e1, ComponentA)
    scene.despawn(e1)
    e2 = scene.spawn()
    assert not scene.has(e2, ComponentA)
    assert scene.get(e2, ComponentA) is None


def test_has_and_get_many():
    scene = Registry()
    e1 = scene.spawn()
    a, b = scene.assign_many(e1, ComponentA, ComponentB)
    assert scene.has(e1, ComponentA, ComponentB)
    assert not scene.has(e1, ComponentA, ComponentC)
    assert scene.has(e1)
    assert scene.get_many(e1, ComponentA, ComponentB, ComponentC) == (a, b, None)


def test_remove_many():
    scene = Registry()
    e1 = scene.spawn()
    scene.assign_many(e1, ComponentA, ComponentB, ComponentC)
    scene.remove_many(e1, ComponentA, ComponentC)
    assert scene.has(e1, ComponentB)
    assert not scene.has(e1, ComponentA)
    assert not scene.has(e1, ComponentC)


def test_clear_invalidates_everything():
    scene = Registry()
    e1 = scene.spawn()
    scene.assign(e1, ComponentA)
    scene.clear()
    assert not scene.is_valid(e1)
    assert list(scene.view()) == []
    assert get_entity_index(scene.spawn()) == 0


def test_entity_id_round_trip():
    entity = create_entity_id(42, 7)
    assert get_entity_index(entity) == 42
    assert get_entity_version(entity) == 7
    assert is_entity_valid(entity)


def test_invalid_entity_id_is_not_valid():
    assert not is_entity_valid(INVALID_ENTITY_ID)
    assert get_entity_version(INVALID_ENTITY_ID) == 0