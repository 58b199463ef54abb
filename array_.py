import math
from typing import Any, Iterator, List, Optional


class Array:
    """Growable slot buffer.

    Slots ``[0, index)`` hold live elements, ``[index, size)`` are unused and
    filled with ``None``. When full, the buffer grows by ``growth_factor``.
    """

    def __init__(self, size: int = 10, growth_factor: float = 2):
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"Array size must be a non-negative integer, got {size!r}")
        if not growth_factor > 1 or not math.isfinite(growth_factor):
            raise ValueError(f"Array growth factor must be a finite number greater than 1, got {growth_factor!r}")
        self.size = size
        self.index = 0
        self.growth_factor = growth_factor
        self.elements: List[Any] = [None] * size

    @classmethod
    def from_list(cls, items, growth_factor: float = 2) -> "Array":
        items = list(items)
        array = cls(len(items), growth_factor)
        array.elements = items
        array.index = len(items)
        return array

    def _resize(self):
        # always add at least one slot, a zero-sized buffer must still grow
        self.size = max(int(math.ceil(self.size * self.growth_factor)), self.size + 1)
        self.elements.extend([None] * (self.size - len(self.elements)))

    def insert(self, data):
        resized = False
        if self.index >= self.size:
            self._resize()
            resized = True
        self.elements[self.index] = data
        self.index += 1
        return resized

    def get(self, i) -> Optional[Any]:
        if i < 0 or i >= self.size or i >= self.index:
            return None
        return self.elements[i]

    def set(self, i, data):
        if i < 0 or i >= self.index:
            raise IndexError(f"Array index {i} out of live range [0, {self.index})")
        self.elements[i] = data

    def swap(self, i, j):
        self.elements[i], self.elements[j] = self.elements[j], self.elements[i]

    def remove_last(self):
        """Remove and return the last live element, clearing its slot."""
        if self.index == 0:
            return None
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        return data

    def length(self) -> int:
        return self.index

    def capacity(self) -> int:
        return self.size

    def live(self) -> List[Any]:
        return self.elements[:self.index]

    def copy(self) -> "Array":
        array = Array(self.size, self.growth_factor)
        array.elements[:self.index] = self.elements[:self.index]
        array.index = self.index
        return array

    def delete_all(self):
        for i in range(self.index):
            self.elements[i] = None
        self.index = 0

    def __len__(self):
        return self.index

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.index):
            yield self.elements[i]
