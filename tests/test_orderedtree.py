import sys

import pytest
from hypothesis import given, strategies as st

from ordtree import log
from ordtree.tree import OrderedTree, FOUND

values_lists = st.lists(st.integers(min_value=-1000, max_value=1000),
                        max_size=60)


def build(xs):
    tree = OrderedTree()
    for x in xs:
        tree.insert(x)
    return tree


def chain(tree, start, next_func):
    """Follow next_func from start until it returns None."""
    out = []
    k = start
    while k is not None:
        out.append(k)
        k = next_func(k)
    return out


def test_example_traversals(example_tree):
    t = example_tree
    assert list(t.inorder(t.root)) == [1, 3, 4, 5, 7, 8, 9]
    assert list(t.preorder(t.root)) == [5, 3, 1, 4, 8, 7, 9]
    assert list(t.postorder(t.root)) == [1, 4, 3, 7, 9, 8, 5]
    assert list(t) == [1, 3, 4, 5, 7, 8, 9]


def test_example_successors(example_tree):
    t = example_tree
    assert t.inorder_next(5) == 7
    assert t.preorder_next(5) == 3
    assert t.postorder_next(5) is None
    assert t.inorder_next(9) is None


@pytest.mark.parametrize("k,expected", [
    (1, 4), (3, 1), (4, 8), (5, 3), (7, 9), (8, 7), (9, None),
])
def test_example_preorder_next(example_tree, k, expected):
    assert example_tree.preorder_next(k) == expected


@pytest.mark.parametrize("k,expected", [
    (1, 4), (3, 7), (4, 3), (5, None), (7, 9), (8, 5), (9, 8),
])
def test_example_postorder_next(example_tree, k, expected):
    assert example_tree.postorder_next(k) == expected


def test_preorder_next_skips_ancestors_without_right_child():
    # 10 -> 5 -> 3 (left chain), 5 has no right child, 10 has right 20
    t = build([10, 5, 3, 20])
    assert t.preorder_next(3) == 20
    t = build([10, 5, 3])
    assert t.preorder_next(3) is None


def test_postorder_next_descends_right_when_no_left():
    # sibling subtree 20 -> 30 -> 25: first leaf visited is 25
    t = build([10, 5, 20, 30, 25])
    assert t.postorder_next(5) == 25
    assert list(t.postorder(t.root)) == [5, 25, 30, 20, 10]


def test_empty_tree(empty_tree):
    t = empty_tree
    assert t.find(1) is None
    assert t.inorder_next(1) is None
    assert t.inorder_prev(1) is None
    assert t.preorder_next(1) is None
    assert t.postorder_next(1) is None
    assert list(t.inorder(t.root)) == []
    assert list(t.preorder(t.root)) == []
    assert list(t.postorder(t.root)) == []
    assert t.compares == 0


def test_absent_value(example_tree):
    t = example_tree
    assert t.find(6) is None
    assert t.inorder_next(6) is None
    assert t.preorder_next(6) is None
    assert t.postorder_next(6) is None


def test_insert_returns_value(empty_tree):
    assert empty_tree.insert(42) == 42
    assert empty_tree.insert(42) == 42
    assert len(empty_tree) == 1


def test_locate_on_ordered_tree(example_tree):
    x, direction = example_tree.locate(7)
    assert x.data == 7
    assert direction == FOUND


def test_compare_counts(empty_tree):
    t = empty_tree
    t.insert(5)
    assert t.compares == 0
    for v in [3, 8, 1, 4, 7, 9]:
        t.insert(v)
    assert t.compares == 10
    t.find(4)
    assert t.compares == 13
    t.find(6)
    assert t.compares == 16


def test_inorder_next_counts_right_subtree_entry(example_tree):
    t = example_tree
    before = t.compares
    t.inorder_next(5)
    # one comparison for find, one for entering the right subtree
    assert t.compares == before + 2
    before = t.compares
    t.inorder_next(4)
    assert t.compares == before + 3


def test_duplicate_insert_is_logged():
    saved = log.logger
    out = []

    class Collect(log.Logger):
        def _write_log(self, msg):
            out.append(msg)

    log.logger = Collect(loglevel=log.LOG_DEBUG3, colors='never')
    try:
        t = build([2, 1, 2])
    finally:
        log.logger = saved
    assert len(t) == 2
    assert out == ["ignoring duplicate value 2\n"]


def test_strings_are_ordered():
    t = build(["pear", "apple", "fig", "kiwi"])
    assert list(t) == ["apple", "fig", "kiwi", "pear"]
    assert t.inorder_next("fig") == "kiwi"
    assert t.inorder_prev("fig") == "apple"


def test_unorderable_values_raise(empty_tree):
    empty_tree.insert(1)
    with pytest.raises(TypeError):
        empty_tree.insert("a")


def test_ascending_insert_degenerates():
    n = sys.getrecursionlimit() + 50
    t = build(range(1, n + 1))
    assert t.height() == n
    assert t.compares == n * (n - 1) // 2
    assert list(t.postorder(t.root))[:3] == [n, n - 1, n - 2]
    assert t.inorder_next(n - 1) == n
    assert t.postorder_next(n) == n - 1


@given(values_lists)
def test_inorder_is_sorted_distinct(xs):
    assert list(build(xs)) == sorted(set(xs))


@given(values_lists)
def test_duplicate_insert_is_idempotent(xs):
    once = build(xs)
    twice = build(xs + xs)
    assert len(once) == len(twice) == len(set(xs))
    assert list(once.preorder(once.root)) == list(twice.preorder(twice.root))
    assert list(once.postorder(once.root)) == \
        list(twice.postorder(twice.root))


@given(values_lists)
def test_find_round_trip(xs):
    t = build(xs)
    for x in xs:
        node = t.find(x)
        assert node is not None
        assert node.data == x


@given(values_lists)
def test_successor_chains_match_traversals(xs):
    t = build(xs)
    for traverse, next_func in ((t.inorder, t.inorder_next),
                                (t.preorder, t.preorder_next),
                                (t.postorder, t.postorder_next)):
        expected = list(traverse(t.root))
        if not expected:
            continue
        assert chain(t, expected[0], next_func) == expected


@given(values_lists)
def test_inorder_prev_chain_is_descending(xs):
    t = build(xs)
    if not xs:
        return
    assert chain(t, max(xs), t.inorder_prev) == sorted(set(xs), reverse=True)


@given(values_lists, st.integers(min_value=-1000, max_value=1000))
def test_compares_monotonic(xs, k):
    t = build(xs)
    before = t.compares
    t.find(k)
    after_find = t.compares
    t.insert(k)
    if xs:
        assert after_find >= before + 1
        assert t.compares >= after_find + 1
    else:
        assert t.compares == after_find == before
