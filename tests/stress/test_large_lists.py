"""
Large-list stress tests.

Every traversal must run in constant Python stack depth. These lists are
well past the default recursion limit, so a recursive implementation of any
operation fails here with RecursionError.

Run separately:
    pytest tests/stress/ -v
"""

import sys
import time

import pytest

from rlist import NIL, from_sequence, pretty_rlist

N = 10000
BIG = max(N, sys.getrecursionlimit() * 5)


@pytest.fixture(scope="module")
def large_list():
    return from_sequence(range(1, N + 1))


@pytest.fixture(scope="module")
def big_list():
    return from_sequence(range(BIG))


def test_reverse_head_is_last(large_list):
    assert large_list.reverse().at(0) == N


def test_at_deep_index(large_list):
    assert large_list.at(8735) == 8736


def test_length(big_list):
    assert big_list.length() == BIG


def test_reverse_roundtrip(big_list):
    assert big_list.reverse().reverse() == big_list


def test_concat(big_list):
    out = big_list.concat(big_list)
    assert out.length() == 2 * BIG
    assert out.at(BIG) == 0


def test_remove_last(big_list):
    out = big_list.remove_at(BIG - 1)
    assert out.length() == BIG - 1
    assert out.reverse().head() == BIG - 2


def test_remove_first_costs_like_tail():
    huge = from_sequence(range(1_000_000))

    start = time.perf_counter()
    out = huge.remove_at(0)
    elapsed = time.perf_counter() - start

    assert out is huge.tail()
    # a full walk of a million nodes takes tens of milliseconds
    assert elapsed < 0.005


def test_map_filter_flat_map(big_list):
    assert big_list.map(lambda x: x + 1).at(BIG - 1) == BIG
    assert big_list.filter(lambda x: x % 2 == 0).length() == (BIG + 1) // 2
    assert big_list.flat_map(lambda x: x ** x ** NIL).length() == 2 * BIG


def test_flatten_long_list_of_lists(big_list):
    nested = big_list.map(lambda x: x ** NIL)
    assert nested.flatten() == big_list


def test_rendering(big_list):
    text = str(big_list)
    assert text.startswith("[0, 1, 2, ")
    assert text.endswith(f"{BIG - 1}]")
    assert repr(big_list).startswith("RList([0, 1, ")
    assert pretty_rlist(big_list, max_width=2) == f"[0, 1, …(+{BIG - 2})]"


def test_equality_and_hash(big_list):
    other = from_sequence(range(BIG))
    assert other == big_list
    assert hash(other) == hash(big_list)


def test_drop_does_not_recurse():
    # releasing a long chain must not blow the C stack either
    xs = from_sequence(range(BIG))
    del xs
