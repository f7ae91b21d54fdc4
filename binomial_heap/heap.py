import logging
from typing import Any, Callable, Generic, Iterator, List, Optional

from . import exceptions
from .common import Item, Node, ValueT, default_key_validator

logger = logging.getLogger(__package__)

KeyValidator = Callable[[Any], bool]


class BinomialHeap(Generic[ValueT]):
    """
    Binomial heap. A forest of binomial trees with at most one tree of each rank
    kept in a circular root list. Supports the following operations:
        - find_min: get the item with the lowest key in O(1)
        - insert, delete_min, decrease_key, delete, meld: in O(log(n))

    Items returned by `insert` are live handles: keys may be decreased and items removed through them
    as long as they belong to the heap. Melding transfers all items of the other heap to this one.

    :param key_validator: predicate a key must satisfy to be inserted
    """

    def __init__(self, *, key_validator: KeyValidator = default_key_validator) -> None:
        self._key_validator = key_validator

        self._size = 0
        self._num_trees = 0
        # root list entry point
        self._last: Optional[Node[ValueT]] = None
        # root with the lowest key
        self._min: Optional[Node[ValueT]] = None

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(size={self._size}, trees={self._num_trees})'

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._last is not None

    def __contains__(self, item: Any) -> bool:
        return self._owns(item)

    def size(self) -> int:
        """
        Returns the number of items in the heap.
        """

        return self._size

    def is_empty(self) -> bool:
        return self._last is None

    def num_trees(self) -> int:
        """
        Returns the number of trees in the root list.
        """

        return self._num_trees

    def roots(self) -> Iterator[Node[ValueT]]:
        """
        Iterates over the tree roots in the root list order.
        """

        if self._last is not None:
            yield from self._last.next.siblings()

    def clear(self) -> None:
        """
        Remove all items from the heap. Handles of the removed items become invalid.
        """

        stack = list(self.roots())
        while stack:
            node = stack.pop()
            node.item.node = None
            stack.extend(node.children())

        self._reset()

    def insert(self, key: int, value: Optional[ValueT] = None) -> Item[ValueT]:
        """
        Inserts an item into the heap.
        If the key is rejected by the key validator raises `InvalidKeyError`.

        :param key: item key
        :param value: item payload
        :return: item handle
        """

        if not self._key_validator(key):
            raise exceptions.InvalidKeyError(f"invalid key: {key!r}")

        item: Item[ValueT] = Item(key, value)  # type: ignore[arg-type]
        node = Node(item)

        if self.is_empty():
            self._install(node, node, size=1, num_trees=1)
        else:
            heap = self._spawn()
            heap._install(node, node, size=1, num_trees=1)
            self._meld(heap)

        return item

    def find_min(self) -> Optional[Item[ValueT]]:
        """
        Returns the item with the lowest key.

        :return: the smallest item or `None` if the heap is empty
        """

        if self._min is not None:
            return self._min.item
        else:
            return None

    def delete_min(self) -> Item[ValueT]:
        """
        Removes the item with the lowest key from the heap.
        If the heap is empty raises `EmptyHeapError`.

        :return: the removed item
        """

        if self._min is None:
            raise exceptions.EmptyHeapError("heap is empty")

        item = self._min.item
        self._remove_root(self._min)

        return item

    def decrease_key(self, item: Item[ValueT], amount: int) -> None:
        """
        Decreases the item key, maintaining the heap invariant.

        :param item: item handle belonging to the heap
        :param amount: non-negative decrement
        """

        node = self._get_node(item)
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise exceptions.InvalidArgumentError(f"invalid decrement: {amount!r}")

        item.key -= amount

        parent = node.parent
        while parent is not None and parent.key > node.key:
            node.swap_item(parent)
            node, parent = parent, parent.parent

        assert self._min is not None
        if node.key < self._min.key:
            self._min = node

    def delete(self, item: Item[ValueT]) -> None:
        """
        Removes an item from the heap.

        :param item: item handle belonging to the heap
        """

        node = self._get_node(item)

        # move the item to the tree root regardless of the keys,
        # each displaced ancestor lands right below its former parent so the order is preserved
        while node.parent is not None:
            node.swap_item(node.parent)
            node = node.parent

        self._remove_root(node)
        logger.debug("item deleted: %r", item)

    def meld(self, other: 'BinomialHeap[ValueT]') -> None:
        """
        Moves all the items of another heap to this one. The other heap is left empty.

        :param other: heap to be melded
        """

        if not isinstance(other, BinomialHeap):
            raise exceptions.InvalidArgumentError(f"binomial heap expected, got: {other!r}")
        if other is self:
            raise exceptions.InvalidArgumentError("heap can't be melded with itself")

        melded = other._size
        self._meld(other)
        logger.debug("melded %d items: size=%d, trees=%d", melded, self._size, self._num_trees)

    def _spawn(self) -> 'BinomialHeap[ValueT]':
        return BinomialHeap(key_validator=self._key_validator)

    def _install(self, last: Node[ValueT], min_: Node[ValueT], size: int, num_trees: int) -> None:
        self._last = last
        self._min = min_
        self._size = size
        self._num_trees = num_trees

    def _reset(self) -> None:
        self._last = None
        self._min = None
        self._size = 0
        self._num_trees = 0

    def _owns(self, item: Any) -> bool:
        if not isinstance(item, Item) or item.node is None:
            return False

        root = item.node
        while root.parent is not None:
            root = root.parent

        return any(node is root for node in self.roots())

    def _get_node(self, item: Item[ValueT]) -> Node[ValueT]:
        if not self._owns(item):
            raise exceptions.InvalidArgumentError(f"item not found: {item!r}")

        assert item.node is not None
        return item.node

    def _meld(self, other: 'BinomialHeap[ValueT]') -> None:
        if other._last is None:
            return

        if self._last is None:
            assert other._min is not None
            self._install(other._last, other._min, size=other._size, num_trees=other._num_trees)
        else:
            # splice the root lists
            other_first = other._last.next
            other._last.next = self._last.next
            self._last.next = other_first

            self._size += other._size
            self._num_trees += other._num_trees
            self._consolidate()

        other._reset()

    def _consolidate(self) -> None:
        """
        Links the trees of equal rank until every rank is presented by at most one tree
        and rebuilds the root list in ascending rank order.
        """

        # linking rewrites the next pointers so the roots are captured beforehand
        roots = list(self.roots())

        # the highest possible rank is floor(log2(size))
        slots: List[Optional[Node[ValueT]]] = [None] * (self._size.bit_length() + 1)
        for root in roots:
            while (occupant := slots[root.rank]) is not None:
                slots[root.rank] = None
                root = occupant.link(root)

            slots[root.rank] = root

        last: Optional[Node[ValueT]] = None
        min_: Optional[Node[ValueT]] = None
        num_trees = 0
        for root in slots:
            if root is None:
                continue

            if last is None or min_ is None:
                root.next = root
                min_ = root
            else:
                root.next = last.next
                last.next = root
                if root.key < min_.key:
                    min_ = root

            last = root
            num_trees += 1

        assert last is not None and min_ is not None
        self._install(last, min_, size=self._size, num_trees=num_trees)

    def _remove_root(self, root: Node[ValueT]) -> None:
        """
        Removes a root from the root list and melds its children back into the heap.
        """

        self._unlink_root(root)
        children = self._detach_children(root)
        root.item.node = None

        self._meld(children)

    def _unlink_root(self, root: Node[ValueT]) -> None:
        if root.next is root:
            self._reset()
            return

        # the list is singly linked so the predecessor has to be looked up
        prev = root.next
        while prev.next is not root:
            prev = prev.next

        prev.next = root.next
        root.next = root
        if self._last is root:
            self._last = prev

        self._size -= 1 << root.rank
        self._num_trees -= 1
        self._min = min(self.roots(), key=lambda node: node.key)

    def _detach_children(self, root: Node[ValueT]) -> 'BinomialHeap[ValueT]':
        """
        Detaches the root children into a standalone heap.
        """

        heap = self._spawn()
        if root.child is None:
            return heap

        min_child = root.child
        for child in root.children():
            child.parent = None
            if child.key < min_child.key:
                min_child = child

        heap._install(root.child, min_child, size=(1 << root.rank) - 1, num_trees=root.rank)
        root.child = None
        root.rank = 0

        return heap
