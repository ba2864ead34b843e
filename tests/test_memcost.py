import time

import pytest

from oslab.memcost import Timer, busy_wait, fast_measure, main

FILL_WORD = 0x01010101


@pytest.fixture(scope="module")
def measurements():
    return fast_measure(64, 3)


def test_timer_elapsed_grows():
    timer = Timer()
    first = timer.elapsed()
    time.sleep(0.01)
    second = timer.elapsed()
    assert 0 <= first < second
    assert second >= 0.01


def test_busy_wait_spins_for_duration():
    timer = Timer()
    busy_wait(20)
    assert timer.elapsed() >= 0.02


def test_busy_wait_negative_returns_quickly():
    timer = Timer()
    busy_wait(-100)
    assert timer.elapsed() < 0.5


def test_measurement_actions_in_order(measurements):
    assert [m.action for m in measurements] == [
        "allocate",
        "allocate",
        "write",
        "read",
        "allocate and write",
        "allocate and read",
    ]
    assert all(m.seconds >= 0 and m.iterations == 3 for m in measurements)


def test_delete_times_within_totals(measurements):
    timed = [m for m in measurements if m.delete_seconds is not None]
    assert len(timed) == 2
    assert all(0 <= m.delete_seconds <= m.seconds for m in timed)


def test_checksums(measurements):
    read = measurements[3]
    assert read.checksum > 0
    assert read.checksum % FILL_WORD == 0
    assert measurements[5].checksum == 0


def test_measurement_text(measurements):
    assert str(measurements[2]).endswith("s to write 0 MB 3 times.")
    assert "s to delete)." in str(measurements[1])
    assert str(measurements[5]).endswith(", sum = 0.")


@pytest.mark.parametrize("size, iterations", [(0, 1), (3, 1), (64, -1)])
def test_fast_measure_rejects_bad_arguments(size, iterations):
    with pytest.raises(ValueError):
        fast_measure(size, iterations)


def test_main_prints_report(capsys):
    assert main(["--buffer-mb", "1", "--iterations", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Busy waiting to raise the CPU frequency..."
    assert any(line.endswith("s to write 1 MB 1 times.") for line in out)
    assert len(out) == 7


def test_main_rejects_negative_iterations():
    assert main(["--buffer-mb", "1", "--iterations", "-1"]) == 1