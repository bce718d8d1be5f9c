"""A growable array with index-based editing, sorting and searching."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, List, Optional, Tuple

Compare = Callable[[Any, Any], int]


class DynArray:
    """An array whose length can grow and shrink.

    A new array of a given length holds that many ``None`` elements.
    Indices must lie within the current length; negative indices are
    not accepted.
    """

    __slots__ = ("_items",)

    def __init__(self, length: int = 0) -> None:
        if length < 0:
            raise ValueError("length must be non-negative")
        self._items: List[Any] = [None] * length

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int, *, allow_end: bool = False) -> None:
        limit = len(self._items) + (1 if allow_end else 0)
        if not 0 <= index < limit:
            raise IndexError(f"index {index} out of range for length {len(self._items)}")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r})"

    def set(self, index: int, element: Any) -> Any:
        """Store element at index and return the element it replaced."""
        self._check_index(index)
        old = self._items[index]
        self._items[index] = element
        return old

    def append(self, element: Any) -> None:
        """Add element at the end."""
        self._items.append(element)

    def insert(self, index: int, element: Any) -> None:
        """Insert element so that it becomes the element at index."""
        self._check_index(index, allow_end=True)
        self._items.insert(index, element)

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at index."""
        self._check_index(index)
        return self._items.pop(index)

    def to_list(self) -> List[Any]:
        """Return the elements as a new list."""
        return list(self._items)

    def map(self, apply: Callable[[Any, Any], None], extra: Any = None) -> None:
        """Call ``apply(element, extra)`` for every element in order."""
        for element in self._items:
            apply(element, extra)

    def sort(self, compare: Compare) -> None:
        """Sort in ascending order as decided by a three-way compare."""
        self._items.sort(key=cmp_to_key(compare))

    def search(self, sought: Any, compare: Compare) -> Optional[int]:
        """Return the index of the first element equal to sought, or None.

        Equality means ``compare(element, sought) == 0``.
        """
        return next(
            (i for i, element in enumerate(self._items) if compare(element, sought) == 0),
            None,
        )

    def bsearch(self, sought: Any, compare: Compare) -> Tuple[bool, int]:
        """Binary search a sorted array for sought.

        Return ``(True, index)`` if found, otherwise ``(False, index)``
        where index is the position at which sought would belong.
        ``compare(sought, element)`` gives the ordering.
        """
        lo, hi = 0, len(self._items) - 1
        while lo <= hi:
            mid = lo + (hi - lo) // 2
            result = compare(sought, self._items[mid])
            if result < 0:
                hi = mid - 1
            elif result > 0:
                lo = mid + 1
            else:
                return True, mid
        return False, lo