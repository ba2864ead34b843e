import os
import sys

import pytest

from oslab.processes import (
    child_modifies_copy,
    exec_listing,
    fork_tree,
    main,
    report_pids,
)


def test_parent_value_unchanged():
    parent_value, child_value = child_modifies_copy(5, 15)
    assert parent_value == 5
    assert child_value == 20


def test_child_value_reflects_delta():
    parent_value, child_value = child_modifies_copy(-3, 7)
    assert child_value - parent_value == 7


def test_fork_tree_three_levels():
    pids = fork_tree(3)
    assert len(pids) == 8
    assert len(set(pids)) == len(pids)
    assert os.getpid() in pids


def test_fork_tree_zero_levels():
    assert fork_tree(0) == [os.getpid()]


def test_fork_tree_negative_levels():
    with pytest.raises(ValueError):
        fork_tree(-1)


def test_report_pids():
    report = report_pids()
    assert report.parent_pid == os.getpid()
    assert report.child_fork_value == 0
    assert report.child_own_pid == report.child_pid


def test_exec_listing_returns_status(capsys):
    status = exec_listing([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert status == 3
    assert "Child Complete" in capsys.readouterr().out


def test_exec_listing_missing_program():
    with pytest.raises(FileNotFoundError):
        exec_listing(["oslab-no-such-program-here"])


def test_exec_listing_empty_command():
    with pytest.raises(ValueError):
        exec_listing([])


def test_main_value(capsys):
    assert main(["value"]) == 0
    assert "PARENT: value = 5" in capsys.readouterr().out