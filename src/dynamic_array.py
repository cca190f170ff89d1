"""Growable array backed by a fixed-size buffer that doubles when full.

Capacity starts at 1 and only grows (by doubling) until ``clear`` resets it.
Slots past the logical size are kept as ``None`` so removed elements are
not held alive by the buffer.
"""

import logging
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)

MIN_CAPACITY = 1
GROWTH_FACTOR = 2


class IndexOutOfRange(IndexError):
    """Raised when an index falls outside the valid range of an operation."""

    def __init__(self, operation: str, index: int, length: int) -> None:
        self.operation = operation
        self.index = index
        self.length = length
        super().__init__(
            f"DynamicArray.{operation}: index {index} out of range "
            f"for array with {length} elements"
        )


class DynamicArray(Generic[T]):
    def __init__(self, element_type: Optional[type] = None) -> None:
        self._element_type = element_type
        self._size = 0
        self._capacity = MIN_CAPACITY
        self._data: List[Any] = [None] * MIN_CAPACITY

    def _check_index(self, operation: str, index: int, upper: int) -> None:
        if index < 0 or index > upper:
            raise IndexOutOfRange(operation, index, self._size)

    def _grow(self) -> None:
        new_cap = max(MIN_CAPACITY, self._capacity * GROWTH_FACTOR)
        new_data: List[Any] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        logger.debug("growing buffer from %d to %d slots", self._capacity, new_cap)
        self._data = new_data
        self._capacity = new_cap

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def get(self, index: int) -> T:
        self._check_index("get", index, self._size - 1)
        return self._data[index]

    def set(self, index: int, value: T) -> None:
        self._check_index("set", index, self._size - 1)
        self._data[index] = value

    def index_of(self, value: T) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        for i in range(self._size):
            if self._data[i] == value:
                return i
        return -1

    def contains(self, value: T) -> bool:
        return self.index_of(value) != -1

    def add(self, value: T) -> None:
        if self._size == self._capacity:
            self._grow()
        self._data[self._size] = value
        self._size += 1

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` at ``index``, shifting later elements right.

        ``index == size()`` appends.
        """
        self._check_index("insert", index, self._size)
        if self._size == self._capacity:
            self._grow()
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = value
        self._size += 1

    def remove_at(self, index: int) -> T:
        self._check_index("remove_at", index, self._size - 1)
        value = self._data[index]
        for i in range(index, self._size - 1):
            self._data[i] = self._data[i + 1]
        self._size -= 1
        self._data[self._size] = None
        return value

    def remove(self, value: T) -> bool:
        """Remove the first element equal to ``value``.

        Returns False without modifying the array if no element matches.
        """
        index = self.index_of(value)
        if index == -1:
            return False
        self.remove_at(index)
        return True

    def remove_all(self, value: T) -> bool:
        """Remove every element equal to ``value`` in a single compaction pass.

        Every comparison runs before the buffer is touched, so an ``__eq__``
        that raises leaves the array unchanged. Returns True if at least one
        element was removed.
        """
        keep = [not (self._data[i] == value) for i in range(self._size)]
        write = 0
        for read in range(self._size):
            if keep[read]:
                self._data[write] = self._data[read]
                write += 1
        if write == self._size:
            return False
        for i in range(write, self._size):
            self._data[i] = None
        self._size = write
        return True

    def clear(self) -> None:
        logger.debug("clearing %d elements, releasing %d slots", self._size, self._capacity)
        self._size = 0
        self._capacity = MIN_CAPACITY
        self._data = [None] * MIN_CAPACITY

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        """Render the live elements like a list, each one via ``repr``."""
        return "[" + ", ".join(repr(self._data[i]) for i in range(self._size)) + "]"

    def __repr__(self) -> str:
        if self._element_type is None:
            return f"DynamicArray({self})"
        return f"DynamicArray[{self._element_type.__name__}]({self})"
