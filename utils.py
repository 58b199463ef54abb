from typing import Any, Callable

from heap_ import Heap, parent


def min_order(a, b) -> bool:
    """Smallest element first."""
    return a < b


def max_order(a, b) -> bool:
    """Largest element first."""
    return a > b


def key_order(key: Callable[[Any], Any], reverse: bool = False) -> Callable[[Any, Any], bool]:
    """Build an order predicate comparing ``key(a)`` with ``key(b)``."""
    if reverse:
        return lambda a, b: key(a) > key(b)
    return lambda a, b: key(a) < key(b)


def is_equal(value) -> Callable[[Any], bool]:
    """Match predicate for elements equal to ``value``."""
    return lambda element: element == value


def is_key_equal(key: Callable[[Any], Any], value) -> Callable[[Any], bool]:
    """Match predicate for elements whose ``key`` equals ``value``."""
    return lambda element: key(element) == value


def is_heap(heap: Heap) -> bool:
    """Check that no live element outranks its parent."""
    elements = heap.data.elements
    order = heap.ordering()
    for i in range(1, heap.length()):
        if order(elements[i], elements[parent(i)]):
            return False
    return True
