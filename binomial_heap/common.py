import dataclasses as dc
from typing import Any, Generic, Iterator, Optional, TypeVar

ValueT = TypeVar('ValueT')


def default_key_validator(key: Any) -> bool:
    """
    Accepts any integer key. Booleans are rejected even though they are `int` subclasses.
    """

    return isinstance(key, int) and not isinstance(key, bool)


@dc.dataclass(eq=False)
class Item(Generic[ValueT]):
    """
    Heap item handle returned by `insert`.

    Items are compared by identity so they can be used as dictionary keys
    regardless of their key or value.
    """

    key: int
    value: ValueT
    # node currently holding the item, `None` once the item left the heap
    node: Optional['Node[ValueT]'] = dc.field(default=None, repr=False)

    @property
    def alive(self) -> bool:
        return self.node is not None


class Node(Generic[ValueT]):
    """
    Binomial tree vertex.

    Every node belongs to exactly one circular sibling list: the root list if it is a root,
    its parent's child list otherwise.
    """

    def __init__(self, item: Item[ValueT]):
        self.item = item
        self.item.node = self
        self.rank = 0
        self.child: Optional[Node[ValueT]] = None
        self.parent: Optional[Node[ValueT]] = None
        self.next: Node[ValueT] = self

    def __repr__(self) -> str:
        return f'Node(key={self.item.key!r}, rank={self.rank})'

    @property
    def key(self) -> int:
        return self.item.key

    def siblings(self) -> Iterator['Node[ValueT]']:
        """
        Iterates over the circular sibling list the node belongs to starting from the node itself.
        """

        node = self
        while True:
            next_node = node.next
            yield node
            node = next_node
            if node is self:
                break

    def children(self) -> Iterator['Node[ValueT]']:
        if self.child is not None:
            yield from self.child.siblings()

    def swap_item(self, other: 'Node[ValueT]') -> None:
        """
        Exchanges items with another node keeping both back-references current.
        """

        self.item, other.item = other.item, self.item
        self.item.node = self
        other.item.node = other

    def link(self, other: 'Node[ValueT]') -> 'Node[ValueT]':
        """
        Links two roots of the same rank. The root with the greater key becomes
        a child of the other one, on equal keys `self` stays the root.

        :param other: root of the same rank
        :return: root of the combined tree
        """

        root, child = (other, self) if self.key > other.key else (self, other)

        if root.child is None:
            child.next = child
        else:
            child.next = root.child.next
            root.child.next = child

        root.child = child
        child.parent = root
        root.rank += 1

        return root
