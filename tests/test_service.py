import json

import pytest

from taskman.entity import Task
from taskman.jsonstorage import JsonStorage
from taskman.service import TasksService
from taskman.storage import MemStorage


@pytest.fixture
def service():
    return TasksService(MemStorage())


def test_put_assigns_sequential_ids(service):
    first = service.put("first")
    second = service.put("second")
    assert (first.id, second.id) == (0, 1)
    assert first.text == "first"
    assert first.is_completed is False


def test_get_returns_stored_task(service):
    created = service.put("read book")
    assert service.get(created.id) == created


def test_get_missing_returns_empty_task(service):
    assert service.get(42) == Task()


def test_get_all_orders_open_before_completed_then_by_title(service):
    for title in ["pear", "apple", "melon", "banana"]:
        service.put(title)
    melon = next(t for t in service.get_all() if t.text == "melon")
    apple = next(t for t in service.get_all() if t.text == "apple")
    service.mark_task(str(melon.id), True)
    service.mark_task(str(apple.id), True)
    ordered = service.get_all()
    assert [t.text for t in ordered] == ["banana", "pear", "apple", "melon"]
    assert [t.is_completed for t in ordered] == [False, False, True, True]


def test_mark_task_completes_and_uncompletes(service):
    created = service.put("wash car")
    done = service.mark_task(str(created.id), True)
    assert done.is_completed is True
    assert done.updated_at >= created.created_at
    assert service.get(created.id).is_completed is True
    undone = service.mark_task(str(created.id), False)
    assert undone.is_completed is False
    assert service.get(created.id).is_completed is False


def test_mark_task_rejects_bad_id(service):
    with pytest.raises(ValueError):
        service.mark_task("abc", True)


def test_mark_task_for_unknown_id_yields_empty_task(service):
    result = service.mark_task("99", True)
    assert result.text == ""
    assert result.id == 0
    assert result.is_completed is True


def test_with_json_storage(tmp_path):
    db = tmp_path / "db.json"
    db.write_text("{}", encoding="utf-8")
    service = TasksService(JsonStorage(db))
    created = service.put("file report")
    service.mark_task(str(created.id), True)
    stored = json.loads(db.read_text(encoding="utf-8"))
    assert stored["tasks"][0]["text"] == "file report"
    assert stored["tasks"][0]["is_completed"] is True
    assert service.get(created.id).is_completed is True