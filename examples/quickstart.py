import logging
from typing import Dict

from binomial_heap import BinomialHeap, Item

logging.basicConfig(level=logging.DEBUG)

Vertex = str

graph: Dict[Vertex, Dict[Vertex, int]] = {
    'a': {'b': 7, 'c': 9, 'f': 14},
    'b': {'a': 7, 'c': 10, 'd': 15},
    'c': {'a': 9, 'b': 10, 'd': 11, 'f': 2},
    'd': {'b': 15, 'c': 11, 'e': 6},
    'e': {'d': 6, 'f': 9},
    'f': {'a': 14, 'c': 2, 'e': 9},
}


def shortest_paths(source: Vertex) -> Dict[Vertex, int]:
    unreachable = sum(weight for edges in graph.values() for weight in edges.values()) + 1

    heap = BinomialHeap[Vertex]()
    items: Dict[Vertex, Item[Vertex]] = {
        vertex: heap.insert(0 if vertex == source else unreachable, vertex)
        for vertex in graph
    }

    distances: Dict[Vertex, int] = {}
    while heap:
        item = heap.delete_min()
        distances[item.value] = item.key

        for neighbour, weight in graph[item.value].items():
            neighbour_item = items[neighbour]
            if neighbour_item in heap and item.key + weight < neighbour_item.key:
                heap.decrease_key(neighbour_item, neighbour_item.key - item.key - weight)

    return distances


print(shortest_paths('a'))
