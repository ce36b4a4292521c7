import io

import pytest

from pushswap.stacks import CAPACITY, Stacks


def make(numbers):
    return Stacks(numbers, out=io.StringIO())


def test_first_number_is_on_top():
    stacks = make([1, 2, 3])
    assert stacks.a == [3, 2, 1]
    assert stacks.b == []


def test_sa_swaps_top_two_and_writes_name():
    stacks = make([4, 5, 6])
    top, second = stacks.a[-1], stacks.a[-2]
    stacks.sa()
    assert stacks.a[-1] == second
    assert stacks.a[-2] == top
    assert stacks.out.getvalue() == "sa\n"


def test_sa_twice_restores_order():
    stacks = make([7, 8, 9, 10])
    before = list(stacks.a)
    stacks.sa()
    stacks.sa()
    assert stacks.a == before
    assert stacks.operations == ["sa", "sa"]


def test_ra_moves_top_to_bottom():
    stacks = make([1, 2, 3, 4])
    top = stacks.a[-1]
    stacks.ra()
    assert stacks.a[0] == top
    assert len(stacks.a) == 4


def test_rra_undoes_ra():
    stacks = make([1, 2, 3, 4, 5])
    before = list(stacks.a)
    stacks.ra()
    stacks.rra()
    assert stacks.a == before
    assert stacks.out.getvalue() == "ra\nrra\n"


def test_rra_moves_bottom_to_top():
    stacks = make([1, 2, 3])
    bottom = stacks.a[0]
    stacks.rra()
    assert stacks.a[-1] == bottom


def test_pb_then_pa_round_trip():
    stacks = make([1, 2, 3])
    before = list(stacks.a)
    stacks.pb()
    assert stacks.b == [1]
    assert len(stacks.a) == 2
    stacks.pa()
    assert stacks.a == before
    assert stacks.b == []
    assert stacks.operations == ["pb", "pa"]


def test_b_operations():
    stacks = make([1, 2, 3])
    stacks.pb()
    stacks.pb()
    stacks.sb()
    assert stacks.b == [2, 1]
    stacks.rb()
    assert stacks.b == [1, 2]
    stacks.rrb()
    assert stacks.b == [2, 1]
    assert stacks.operations == ["pb", "pb", "sb", "rb", "rrb"]


def test_combined_operation_names():
    stacks = make([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    stacks.ss()
    stacks.rr()
    stacks.rrr()
    assert stacks.out.getvalue() == "pb\npb\nss\nrs\nrrs\n"


def test_rotating_empty_stack_changes_nothing():
    stacks = make([1])
    stacks.rb()
    stacks.rrb()
    assert stacks.b == []
    assert stacks.a == [1]


def test_swap_needs_two_items():
    stacks = make([1])
    with pytest.raises(IndexError):
        stacks.sa()
    assert stacks.operations == []


def test_push_from_empty_raises():
    stacks = make([1, 2])
    with pytest.raises(IndexError):
        stacks.pa()


def test_capacity_is_enforced():
    with pytest.raises(ValueError):
        make(range(CAPACITY + 1))


def test_capacity_itself_fits():
    stacks = make(range(CAPACITY))
    assert len(stacks.a) == CAPACITY


def test_is_sorted():
    assert make([1, 2, 3]).is_sorted()
    assert not make([2, 1, 3]).is_sorted()
    assert make([]).is_sorted()


def test_is_sorted_requires_empty_b():
    stacks = make([1, 2, 3])
    stacks.pb()
    assert not stacks.is_sorted()
    stacks.pa()
    assert stacks.is_sorted()


def test_default_output_is_stdout(capsys):
    stacks = Stacks([2, 1])
    stacks.sa()
    assert capsys.readouterr().out == "sa\n"