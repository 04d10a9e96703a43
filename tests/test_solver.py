import random

import pytest

from pushswap.bench import Bench
from pushswap.solver import Distance, insertion_sort, main, record_op, rotation_count, solve
from pushswap.stacks import Stack


def _run(values, ops):
    bench = Bench(values)
    for op in ops:
        bench.apply(op)
    return bench


@pytest.mark.parametrize(
    "values",
    [[1], [2, 1], [3, 1, 2], [1, 2, 3], [5, 4, 3, 2, 1], [0, -7, 42, 13, -1, 8]],
)
def test_solve_sorts(values):
    bench = _run(values, solve(values))
    assert list(bench.a) == sorted(values)
    assert list(bench.b) == []


@pytest.mark.parametrize("seed", range(8))
def test_solve_sorts_random(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-500, 500), rng.randint(2, 40))
    bench = _run(values, solve(values))
    assert list(bench.a) == sorted(values)
    assert not bench.b


def test_insertion_sort_keeps_position_at_end():
    bench = Bench([9, 2, 7, 4])
    insertion_sort(bench)
    assert bench.position == len(bench.ops)
    assert list(bench.a) == [2, 4, 7, 9]


def test_insertion_sort_ops_replay():
    values = [9, 2, 7, 4, 11, -3]
    bench = Bench(values)
    insertion_sort(bench)
    replay = Bench(values)
    replay.ops = bench.operations()
    replay.replay()
    assert list(replay.a) == list(bench.a)


def test_record_op_cancels():
    ops = ["pb"]
    record_op(ops, "pa")
    assert ops == []
    ops = ["sa"]
    record_op(ops, "sa")
    assert ops == []


def test_record_op_merges():
    ops = ["ra"]
    record_op(ops, "rb")
    assert ops == ["rr"]
    ops = ["rrb"]
    record_op(ops, "rra")
    assert ops == ["rrr"]


def test_record_op_appends_otherwise():
    ops = ["pb"]
    record_op(ops, "pb")
    assert ops == ["pb", "pb"]
    empty = []
    record_op(empty, "ra")
    assert empty == ["ra"]


def test_rotation_count_small_stack():
    assert rotation_count(5, Stack([3])) == Distance(0)
    assert rotation_count(5, Stack()) == Distance(0)


@pytest.mark.parametrize("n", [-10, 0, 3, 6, 100])
def test_rotation_count_within_half(n):
    stack = Stack([8, 5, 2, 9, 7])
    distance = rotation_count(n, stack)
    assert 0 <= distance.count <= len(stack) // 2 + 1
    assert list(stack) == [8, 5, 2, 9, 7]


def test_main_prints_ops(capsys):
    assert main(["3", "1", "2"]) == 0
    lines = capsys.readouterr().out.split()
    bench = _run([3, 1, 2], lines)
    assert list(bench.a) == [1, 2, 3]


def test_main_reports_bad_args(capsys):
    assert main(["1", "x"]) == 0
    assert capsys.readouterr().out == "Damn son !\n"