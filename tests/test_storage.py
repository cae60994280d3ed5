import pytest

from taskman.entity import Task
from taskman.storage import MemStorage, Storage


def test_storage_is_abstract():
    with pytest.raises(TypeError):
        Storage()


def test_put_assigns_sequential_ids_from_zero():
    storage = MemStorage()
    tasks = [storage.put(title) for title in ("a", "b", "c")]
    assert [task.id for task in tasks] == [0, 1, 2]
    assert [task.text for task in tasks] == ["a", "b", "c"]
    assert all(not task.is_completed for task in tasks)


def test_get_returns_stored_task():
    storage = MemStorage()
    task = storage.put("hello")
    assert storage.get(task.id) == task


def test_get_missing_returns_empty_task():
    storage = MemStorage()
    storage.put("x")
    assert storage.get(99) == Task()


def test_get_all_returns_everything():
    storage = MemStorage()
    created = [storage.put(title) for title in ("one", "two")]
    assert sorted(storage.get_all(), key=lambda t: t.id) == created


def test_get_all_empty():
    assert MemStorage().get_all() == []


def test_update_replaces_task():
    storage = MemStorage()
    task = storage.put("draft")
    task.is_completed = True
    task.text = "final"
    storage.update(task)
    stored = storage.get(task.id)
    assert stored.is_completed is True
    assert stored.text == "final"
    assert len(storage.get_all()) == 1


def test_delete_removes_task_and_ignores_missing():
    storage = MemStorage()
    first = storage.put("first")
    second = storage.put("second")
    storage.delete(first.id)
    assert storage.get_all() == [second]
    storage.delete(12345)
    assert storage.get_all() == [second]