"""Property-based checks for cursor invariants."""

from __future__ import annotations

from typing import Callable

from hypothesis import assume, given, settings, strategies as st

from ziplist import ZipList

elements = st.integers(min_value=-50, max_value=50)

ziplists = st.builds(
    ZipList.new,
    st.lists(elements, max_size=8),
    elements,
    st.lists(elements, max_size=8),
)


def _keep_even(zl: ZipList[int]) -> ZipList[int]:
    return zl.filter(lambda value: value % 2 == 0).unwrap_or(zl)


OPERATIONS: dict[str, Callable[[ZipList[int]], ZipList[int]]] = {
    "step_forward": ZipList.step_forward,
    "step_backward": ZipList.step_backward,
    "step_forward_wrap": ZipList.step_forward_wrap,
    "step_backward_wrap": ZipList.step_backward_wrap,
    "advance": lambda zl: zl.advance(3),
    "retreat": lambda zl: zl.retreat(-1),
    "to_first": ZipList.to_first,
    "to_last": ZipList.to_last,
    "jump_to": lambda zl: zl.jump_to(2),
    "remove": ZipList.remove,
    "remove_retreating": ZipList.remove_retreating,
    "filter": _keep_even,
    "append_after": lambda zl: zl.append_after([0]),
    "prepend_before": lambda zl: zl.prepend_before([]),
}


@given(ziplists)
def test_flat_sequence_is_concatenation(zl: ZipList[int]) -> None:
    flat = zl.to_list()

    assert flat == list(zl.before) + [zl.current] + list(zl.after)
    assert len(flat) == len(zl)
    assert flat[zl.index] == zl.current


@settings(max_examples=50)
@given(ziplists, st.lists(st.sampled_from(sorted(OPERATIONS)), max_size=20))
def test_operations_never_empty_the_list(zl: ZipList[int], names: list[str]) -> None:
    for name in names:
        zl = OPERATIONS[name](zl)
        assert len(zl) >= 1


@given(ziplists)
def test_step_forward_then_backward_round_trips(zl: ZipList[int]) -> None:
    assume(zl.after)

    assert zl.step_forward().step_backward() == zl


@given(ziplists)
def test_step_backward_then_forward_round_trips(zl: ZipList[int]) -> None:
    assume(zl.before)

    assert zl.step_backward().step_forward() == zl


@given(ziplists)
def test_wrap_steps_always_move(zl: ZipList[int]) -> None:
    assume(len(zl) >= 2)

    forward = zl.step_forward_wrap()
    backward = zl.step_backward_wrap()

    assert forward.index == (zl.index + 1) % len(zl)
    assert backward.index == (zl.index - 1) % len(zl)
    assert forward.to_list() == zl.to_list()
    assert backward.to_list() == zl.to_list()


@given(ziplists, st.integers(min_value=-20, max_value=20))
def test_jump_to_clamps_index(zl: ZipList[int], position: int) -> None:
    expected = max(0, min(position, len(zl) - 1))

    jumped = zl.jump_to(position)

    assert jumped.index == expected
    assert jumped.current == zl.to_list()[expected]
    assert jumped.to_list() == zl.to_list()


@given(ziplists)
def test_try_remove_drops_exactly_one_element(zl: ZipList[int]) -> None:
    outcome = zl.try_remove()

    if len(zl) == 1:
        assert not outcome.ok
    else:
        removed = outcome.unwrap()
        expected = zl.to_list()
        del expected[zl.index]
        assert removed.to_list() == expected


@given(ziplists)
def test_index_map_sees_flat_positions(zl: ZipList[int]) -> None:
    positions = zl.index_map(lambda value, position: position)

    assert positions.to_list() == list(range(len(zl)))
    assert positions.current == zl.index


@given(ziplists)
def test_filter_result_is_filtered_flat_sequence(zl: ZipList[int]) -> None:
    outcome = zl.filter(lambda value: value >= 0)
    survivors = [value for value in zl if value >= 0]

    if not survivors:
        assert not outcome.ok
    else:
        assert outcome.unwrap().to_list() == survivors
