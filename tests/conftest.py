import random
from typing import Callable

import pytest

from binomial_heap import BinomialHeap, Node


def check_tree(node: Node) -> int:
    assert node.item.node is node

    children = list(node.children())
    assert len(children) == node.rank
    assert sorted(child.rank for child in children) == list(range(node.rank))

    size = 1
    for child in children:
        assert child.parent is node
        assert child.key >= node.key
        size += check_tree(child)

    assert size == 1 << node.rank
    return size


def check_heap(heap: BinomialHeap) -> None:
    roots = list(heap.roots())
    ranks = [root.rank for root in roots]

    assert len(roots) == heap.num_trees()
    assert len(set(ranks)) == len(ranks)
    assert all(root.parent is None for root in roots)
    assert sum(check_tree(root) for root in roots) == heap.size() == len(heap)
    assert heap.num_trees() == bin(heap.size()).count('1')

    if roots:
        assert not heap.is_empty()
        assert heap.find_min().key == min(root.key for root in roots)
    else:
        assert heap.is_empty()
        assert heap.find_min() is None


@pytest.fixture(autouse=True)
def init_random() -> None:
    random.seed(0)


@pytest.fixture
def check() -> Callable[[BinomialHeap], None]:
    return check_heap
