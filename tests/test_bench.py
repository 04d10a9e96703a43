import pytest

from pushswap.bench import Bench, inverse_op

ALL_OPS = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


def _state(bench):
    return list(bench.a), list(bench.b)


def test_initial_order_is_top_first():
    bench = Bench([4, 8, 15])
    assert list(bench.a) == [4, 8, 15]
    assert list(bench.b) == []


def test_push_moves_top_to_b():
    bench = Bench([4, 8, 15])
    bench.apply("pb")
    assert list(bench.b) == [4]
    assert list(bench.a) == [8, 15]


def test_push_from_empty_does_nothing():
    bench = Bench([4, 8])
    bench.apply("pa")
    assert _state(bench) == ([4, 8], [])


def test_empty_op_is_noop():
    bench = Bench([3, 1, 2])
    bench.apply("")
    assert _state(bench) == ([3, 1, 2], [])


def test_unknown_op_raises():
    with pytest.raises(ValueError):
        Bench([1, 2]).apply("xx")


@pytest.mark.parametrize("op", ["sa", "sb", "ss", "ra", "rb", "rr", "rra", "rrb", "rrr"])
def test_undo_restores_state(op):
    bench = Bench([5, 3, 9, 1, 7, 2])
    bench.apply("pb")
    bench.apply("pb")
    bench.apply("pb")
    before = _state(bench)
    bench.apply(op)
    bench.undo(op)
    assert _state(bench) == before


@pytest.mark.parametrize("op", ["pa", "pb"])
def test_undo_push_restores_state(op):
    bench = Bench([5, 3, 9, 1])
    bench.apply("pb")
    bench.apply("pb")
    before = _state(bench)
    bench.apply(op)
    bench.undo(op)
    assert _state(bench) == before


@pytest.mark.parametrize("op", ALL_OPS + [""])
def test_inverse_is_involution(op):
    assert inverse_op(inverse_op(op)) == op


def test_inverse_of_rotation():
    assert inverse_op("ra") == "rra"
    assert inverse_op("pa") == "pb"


def test_inverse_unknown_raises():
    with pytest.raises(ValueError):
        inverse_op("nope")


def test_step_forward_and_backward():
    bench = Bench([5, 3, 9, 1])
    bench.ops = ["pb", "sa", "ra", "pb", "rr"]
    start = _state(bench)
    states = [start]
    while bench.step_forward():
        states.append(_state(bench))
    assert bench.position == len(bench.ops)
    assert bench.step_forward() is False
    while bench.step_backward():
        assert _state(bench) == states[bench.position]
    assert bench.position == 0
    assert bench.step_backward() is False
    assert _state(bench) == start


def test_replay_matches_direct_application():
    ops = ["pb", "pb", "ss", "rrr", "pa", "ra"]
    direct = Bench([6, 2, 8, 4, 1])
    for op in ops:
        direct.apply(op)
    replayed = Bench([6, 2, 8, 4, 1])
    replayed.ops = list(ops)
    replayed.replay()
    assert _state(replayed) == _state(direct)
    assert replayed.position == len(ops)


def test_operations_returns_copy():
    bench = Bench([1, 2])
    bench.ops = ["sa"]
    ops = bench.operations()
    ops.append("pb")
    assert bench.ops == ["sa"]