import io

import pytest

from pushswap.stacks import Element, State


def make_state(values):
    out = io.StringIO()
    elements = [Element(value, rank) for rank, value in enumerate(values)]
    return State(elements, out), out


def test_sa_swaps_top_two():
    values = [10, 20, 30, 40]
    state, out = make_state(values)
    state.sa()
    assert state.values_a() == [values[1], values[0]] + values[2:]
    assert out.getvalue() == "sa\n"


def test_sa_twice_is_identity():
    values = [5, 6, 7]
    state, _ = make_state(values)
    state.sa()
    state.sa()
    assert state.values_a() == values


def test_swap_on_empty_or_single_stack_still_prints():
    state, out = make_state([1])
    state.sa()
    state.sb()
    assert state.values_a() == [1]
    assert len(state.b) == 0
    assert out.getvalue() == "sa\nsb\n"


def test_ra_and_rra_are_inverse():
    values = [1, 2, 3, 4, 5]
    state, out = make_state(values)
    state.ra()
    assert state.values_a() == values[1:] + values[:1]
    state.rra()
    assert state.values_a() == values
    assert out.getvalue() == "ra\nrra\n"


def test_rra_brings_bottom_to_top():
    values = [1, 2, 3, 4]
    state, _ = make_state(values)
    state.rra()
    assert state.values_a() == values[-1:] + values[:-1]


def test_rotating_full_length_is_identity():
    values = [9, 8, 7, 6]
    state, _ = make_state(values)
    for _ in values:
        state.ra()
    assert state.values_a() == values


def test_pb_then_pa_restores():
    values = [3, 1, 2]
    state, out = make_state(values)
    state.pb()
    assert state.values_a() == values[1:]
    assert [e.value for e in state.b] == values[:1]
    state.pa()
    assert state.values_a() == values
    assert len(state.b) == 0
    assert out.getvalue() == "pb\npa\n"


def test_push_from_empty_stack_only_prints():
    state, out = make_state([4, 5])
    state.pa()
    assert state.values_a() == [4, 5]
    assert out.getvalue() == "pa\n"


def test_combined_operations_act_on_both_stacks():
    values = [1, 2, 3, 4, 5, 6]
    state, out = make_state(values)
    for _ in range(3):
        state.pb()
    b_before = [e.value for e in state.b]
    a_before = state.values_a()
    state.ss()
    state.ss()
    state.rr()
    state.rrr()
    assert state.values_a() == a_before
    assert [e.value for e in state.b] == b_before
    assert out.getvalue() == "pb\npb\npb\nss\nss\nrr\nrrr\n"


def test_rb_and_rrb_inverse():
    state, out = make_state([1, 2, 3])
    state.pb()
    state.pb()
    before = [e.value for e in state.b]
    state.rb()
    state.rrb()
    assert [e.value for e in state.b] == before
    assert out.getvalue().endswith("rb\nrrb\n")


def test_rank_lookup_wraps_around():
    state, _ = make_state([7, 8, 9])
    ranks = state.ranks_a()
    assert state.rank_a() == ranks[0]
    assert state.rank_a(1) == ranks[1]
    assert state.rank_a(2) == ranks[2]
    assert state.rank_a(-1) == ranks[-1]
    assert state.rank_a(3) == ranks[0]


def test_rank_b_after_push():
    state, _ = make_state([7, 8, 9])
    top_rank = state.rank_a()
    state.pb()
    assert state.rank_b() == top_rank
    assert state.rank_b(-1) == top_rank


def test_rank_on_empty_stack_raises():
    state, _ = make_state([1])
    with pytest.raises(IndexError):
        state.rank_b()


def test_describe_format():
    state, _ = make_state([3, 1])
    state.pb()
    assert state.describe() == (
        "------------------------------\n"
        "A value: [1]\n"
        "A order: [1]\n"
        "B value: [3]\n"
        "B order: [0]\n"
    )


def test_default_output_is_stdout(capsys):
    state = State([Element(1), Element(2)])
    state.sa()
    assert capsys.readouterr().out == "sa\n"