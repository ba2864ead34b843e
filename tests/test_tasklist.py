import pytest

from oslab.task import Task
from oslab.tasklist import TaskList


@pytest.fixture
def tasks():
    return [Task("A", 1, 10), Task("B", 2, 20), Task("C", 3, 30)]


def test_insert_puts_newest_at_head(tasks):
    task_list = TaskList()
    for task in tasks:
        task_list.insert(task)
    assert [task.name for task in task_list] == ["C", "B", "A"]
    assert len(task_list) == 3


def test_constructor_inserts_in_order(tasks):
    task_list = TaskList(tasks)
    assert list(task_list) == list(reversed(tasks))


@pytest.mark.parametrize(
    "name, remaining",
    [("C", ["B", "A"]), ("B", ["C", "A"]), ("A", ["C", "B"])],
)
def test_delete_head_interior_and_last(tasks, name, remaining):
    task_list = TaskList(tasks)
    task_list.delete(Task(name, 0, 0))
    assert [task.name for task in task_list] == remaining
    assert len(task_list) == 2


def test_delete_matches_by_name_from_head():
    older = Task("dup", 1, 5)
    newer = Task("dup", 2, 6)
    task_list = TaskList([older, newer])
    task_list.delete(Task("dup", 9, 9))
    assert list(task_list) == [older]


def test_delete_missing_raises(tasks):
    task_list = TaskList(tasks)
    with pytest.raises(KeyError):
        task_list.delete(Task("Z", 1, 1))
    assert len(task_list) == 3


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        TaskList().delete(Task("A", 1, 1))


def test_traverse_prints_head_first(tasks, capsys):
    TaskList(tasks).traverse()
    out = capsys.readouterr().out
    assert out.splitlines() == ["[C] [3] [30]", "[B] [2] [20]", "[A] [1] [10]"]