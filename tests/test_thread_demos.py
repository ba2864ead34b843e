import io

import pytest

from oslab.thread_demos import (
    add_constant_pipeline,
    parallel_sum,
    partial_sum_main,
    pipeline_main,
    run_shared_counters,
    split_ranges,
)


@pytest.mark.parametrize("size,parts", [(5000, 2), (10, 3), (7, 7), (3, 5), (0, 2)])
def test_split_ranges_cover_everything_in_order(size, parts):
    spans = split_ranges(size, parts)
    assert len(spans) == parts
    assert [i for span in spans for i in span] == list(range(size))


@pytest.mark.parametrize("size,parts", [(5000, 2), (10, 3), (11, 4)])
def test_split_ranges_last_takes_remainder(size, parts):
    spans = split_ranges(size, parts)
    lengths = {len(span) for span in spans[:-1]}
    assert len(lengths) == 1
    assert len(spans[-1]) == len(spans[0]) + size % parts


def test_split_ranges_rejects_bad_parts():
    with pytest.raises(ValueError):
        split_ranges(10, 0)


def test_split_ranges_rejects_negative_size():
    with pytest.raises(ValueError):
        split_ranges(-1, 2)


@pytest.mark.parametrize("threads", [1, 2, 4, 7])
def test_parallel_sum_matches_builtin(threads):
    numbers = list(range(100))
    assert parallel_sum(numbers, threads) == sum(numbers)


def test_parallel_sum_more_threads_than_items():
    numbers = [1, 2, 3]
    assert parallel_sum(numbers, 5) == sum(numbers)


def test_parallel_sum_of_zero_vector():
    assert parallel_sum([0] * 5000) == 0


def test_shared_counters_advance_by_two_per_thread(capsys):
    count = 4
    records = run_shared_counters(count)
    statics = sorted(record[1] for record in records)
    assert statics == list(range(2, 2 * count + 1, 2))
    assert all(record[1] == record[2] for record in records)
    assert capsys.readouterr().out.count("Thread ID:") == count


def test_shared_counters_reject_negative():
    with pytest.raises(ValueError):
        run_shared_counters(-1)


def test_pipeline_adds_constant(capsys):
    assert add_constant_pipeline(5) == 5 + 10
    assert capsys.readouterr().out == f"O resultado da operação é: {5 + 10}\n"


def test_pipeline_custom_constant():
    assert add_constant_pipeline(-4, 4) == 0


def test_pipeline_main_reads_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert pipeline_main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Escreva algo: ", f"O resultado da operação é: {7 + 10}", "Fim do programa"]


def test_pipeline_main_non_number_reads_as_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert pipeline_main([]) == 0
    assert "O resultado da operação é: 10\n" in capsys.readouterr().out


def test_partial_sum_main_prints_total(capsys):
    assert partial_sum_main(["--size", "10", "--value", "3"]) == 0
    assert capsys.readouterr().out == f"A soma dos numeros do vetor eh {10 * 3}\n"


def test_partial_sum_main_bad_threads(capsys):
    assert partial_sum_main(["--threads", "0"]) == 1
    assert capsys.readouterr().err