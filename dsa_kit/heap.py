"""A binary min-heap of integers."""

from collections.abc import Iterator


class MinHeap:
    """Array-backed binary heap whose smallest value sits at the root."""

    def __init__(self) -> None:
        self._data: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def delete(self) -> int:
        """Remove and return the smallest value.

        Raises IndexError when the heap is empty.
        """
        if not self._data:
            raise IndexError("delete from empty heap")
        smallest = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return smallest

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        """Yield the values in their storage (level) order."""
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if data[parent] <= data[idx]:
                break
            data[parent], data[idx] = data[idx], data[parent]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * idx + 1
            right = left + 1
            smallest = idx
            if left < size and data[left] < data[smallest]:
                smallest = left
            if right < size and data[right] < data[smallest]:
                smallest = right
            if smallest == idx:
                return
            data[idx], data[smallest] = data[smallest], data[idx]
            idx = smallest