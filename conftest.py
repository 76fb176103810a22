import pytest

from ordtree.tree import OrderedTree

EXAMPLE_VALUES = [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture
def example_tree():
    tree = OrderedTree()
    for v in EXAMPLE_VALUES:
        tree.insert(v)
    return tree


@pytest.fixture
def empty_tree():
    return OrderedTree()
