import logging
import math
from typing import Any, Callable, Iterable, Iterator

from array_ import Array

logger = logging.getLogger(__name__)

# ternary heap: children of i are 3i+1, 3i+2, 3i+3
ARITY = 3


class HeapConfigError(ValueError):
    pass


def parent(i: int) -> int:
    return (i - 1) // ARITY


def first_child(i: int) -> int:
    return ARITY * i + 1


def check_buffer_config(initial_capacity, growth_factor):
    if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int) or initial_capacity < 0:
        raise HeapConfigError(f"Heap initial capacity must be a non-negative integer, got {initial_capacity!r}")
    if isinstance(growth_factor, bool) or not isinstance(growth_factor, (int, float)) or not growth_factor > 1 \
            or not math.isfinite(growth_factor):
        raise HeapConfigError(f"Heap growth factor must be a finite number greater than 1, got {growth_factor!r}")


def _check_config(order, initial_capacity, growth_factor):
    if not callable(order):
        raise HeapConfigError(f"Heap order must be callable, got {order!r}")
    check_buffer_config(initial_capacity, growth_factor)


class Heap:
    """Array-backed ternary heap ranked by a caller-supplied predicate.

    ``order(a, b)`` returns True when ``a`` should sit closer to the root than
    ``b``. The root is always the best-ranked live element.

    Empty access and failed matches are reported through return values:
    ``pop()``/``peek()`` return None on an empty heap and ``modify()`` returns
    False when nothing matches. A heap may store None, in which case callers
    should check ``is_empty()`` before popping.
    """

    def __init__(self, order: Callable[[Any, Any], bool], initial_capacity: int = 10, growth_factor: float = 2):
        _check_config(order, initial_capacity, growth_factor)
        self.order = order
        self.growth_factor = growth_factor
        self.data = Array(initial_capacity, growth_factor)

    @classmethod
    def from_unordered(cls, elements: Iterable[Any], order: Callable[[Any, Any], bool],
                       growth_factor: float = 2) -> "Heap":
        """Build a heap from an arbitrary sequence in O(n).

        The buffer capacity equals the number of elements. Every internal node
        is sifted down, from the last one back to the root.
        """
        heap = cls(order, 0, growth_factor)
        heap.data = Array.from_list(elements, growth_factor)
        heap._heapify()
        logger.debug("Built heap of %d elements from unordered input", heap.data.length())
        return heap

    def _heapify(self):
        length = self.data.length()
        if length < 2:
            return
        for i in range(parent(length - 1), -1, -1):
            self._sift_down(i)

    def push(self, element):
        if self.data.insert(element):
            logger.debug("Heap buffer grown to %d slots", self.data.capacity())
        self._sift_up(self.data.length() - 1)
        return element

    def pop(self):
        if self.data.length() == 0:
            return None

        elements = self.data.elements
        root = elements[0]
        last = self.data.remove_last()
        if self.data.length() == 0:
            self.data.delete_all()
            return root

        elements[0] = last
        self._sift_down(0)
        return root

    def peek(self):
        if self.data.length() == 0:
            return None
        return self.data.elements[0]

    def _find(self, match: Callable[[Any], bool]) -> int:
        # first match in storage order, not priority order
        for i, element in enumerate(self.data):
            if match(element):
                return i
        return -1

    def _replace(self, i, new_value, old_value):
        self.data.elements[i] = new_value
        if self.order(new_value, old_value):
            self._sift_up(i)
        else:
            self._sift_down(i)

    def modify(self, match: Callable[[Any], bool], new_value) -> bool:
        """Replace the first element (in storage order) satisfying ``match``.

        Only one element is updated even when several match. Returns False if
        nothing matched.
        """
        return self.update(match, lambda old_value: new_value)

    def update(self, match: Callable[[Any], bool], replace: Callable[[Any], Any]) -> bool:
        """Like ``modify``, but the new value is ``replace(old_value)``."""
        i = self._find(match)
        if i < 0:
            return False
        old_value = self.data.elements[i]
        self._replace(i, replace(old_value), old_value)
        return True

    def push_or_modify(self, element, match: Callable[[Any], bool]) -> bool:
        """Update the first match with ``element``, or push it if none matches.

        Returns True when an existing element was updated.
        """
        if self.modify(match, element):
            return True
        self.push(element)
        return False

    def remove(self, match: Callable[[Any], bool]):
        i = self._find(match)
        if i < 0:
            return None

        elements = self.data.elements
        removed = elements[i]
        last = self.data.remove_last()
        if i < self.data.length():
            self._replace(i, last, removed)
        return removed

    def merge(self, *others: "Heap") -> "Heap":
        """Return a new heap holding the elements of this heap and ``others``.

        The result uses this heap's order and growth factor; the inputs are
        left untouched.
        """
        elements = self.data.live()
        for other in others:
            elements.extend(other.data.live())
        return type(self).from_unordered(elements, self.order, self.growth_factor)

    def clear(self) -> int:
        count = self.data.length()
        self.data.delete_all()
        return count

    def copy(self) -> "Heap":
        heap = type(self)(self.order, 0, self.growth_factor)
        heap.data = self.data.copy()
        return heap

    clone = copy

    def __copy__(self):
        return self.copy()

    def iterate(self) -> Iterator[Any]:
        """Yield elements best-ranked first from a snapshot of the heap.

        The snapshot is taken when ``iterate()`` is called; later changes to
        this heap are not seen by the returned iterator.
        """
        snapshot = self.copy()

        def drain():
            while snapshot.data.length() > 0:
                yield snapshot.pop()

        return drain()

    def __iter__(self):
        return self.iterate()

    def length(self) -> int:
        return self.data.length()

    def __len__(self):
        return self.data.length()

    def is_empty(self) -> bool:
        return self.data.length() == 0

    def capacity(self) -> int:
        return self.data.capacity()

    def ordering(self) -> Callable[[Any, Any], bool]:
        return self.order

    def __repr__(self):
        return f"Heap(length={self.data.length()}, capacity={self.data.capacity()}, growth_factor={self.growth_factor})"

    def _sift_up(self, i):
        elements = self.data.elements
        order = self.order
        while i > 0:
            p = parent(i)
            if not order(elements[i], elements[p]):
                break
            elements[i], elements[p] = elements[p], elements[i]
            i = p

    def _sift_down(self, i):
        elements = self.data.elements
        order = self.order
        length = self.data.length()
        while True:
            child = first_child(i)
            if child >= length:
                break

            # ties keep the leftmost child
            best = child
            for sibling in range(child + 1, min(child + ARITY, length)):
                if order(elements[sibling], elements[best]):
                    best = sibling

            if not order(elements[best], elements[i]):
                break
            elements[i], elements[best] = elements[best], elements[i]
            i = best

