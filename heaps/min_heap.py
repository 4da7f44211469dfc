"""
Binary min-heap kept as a copy-on-write list.

Every mutation produces a *new* list and leaves the previous one untouched, so a
state container holding the list can treat each result as a fresh snapshot. The
pure helpers (`add_value`, `extract_min`, `heapify`, ...) are usable on their own
as reducer steps; `MinHeap` is a small holder that keeps the latest list and the
active comparator.

Ordering
--------
Comparators are cmp-style callables `compare(a, b) -> int` (negative when `a`
orders first, zero when equal, positive otherwise). When none is given, one is
inferred from the initial values: all numbers or all strings use natural
ascending order. Anything else must bring its own comparator.

Conventions & Notes
-------------------
- Children of index `i` live at `2i + 1` and `2i + 2`.
- Sift-down prefers the left child; the right child only wins when strictly smaller.
- Empty-heap reads return `None` rather than raising.

Complexity (typical)
--------------------
- construct: O(n log n) via repeated single insertion
- add / extract_min: O(n) copy + O(log n) repair
- peek: O(1)
- heapify: O(n)
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .errors import HeapConfigurationError

T = TypeVar("T")
Comparator = Callable[[Any, Any], int]

logger = logging.getLogger(__name__)


def natural_order(a: Any, b: Any) -> int:
  """cmp-style ordering for anything supporting `<` and `>`."""
  return (a > b) - (a < b)


def _is_number(value: Any) -> bool:
  return isinstance(value, Real) and not isinstance(value, bool)


def default_comparator(values: Sequence[Any]) -> Optional[Comparator]:
  """Infer a comparator from the runtime type of `values`.

  Returns `natural_order` when every value is a string or every value is a
  number (an empty sequence qualifies), else `None`.
  """
  if all(isinstance(v, str) for v in values):
    return natural_order
  if all(_is_number(v) for v in values):
    return natural_order
  return None


# -----------------------------
# In-place repair (internal)
# -----------------------------
def _sift_up_inplace(heap: List[T], compare: Comparator, idx: int) -> None:
  while idx > 0:
    parent = (idx - 1) // 2
    if compare(heap[parent], heap[idx]) <= 0:
      break
    heap[parent], heap[idx] = heap[idx], heap[parent]
    idx = parent


def _sift_down_inplace(heap: List[T], compare: Comparator, idx: int) -> None:
  n = len(heap)
  while True:
    left = 2 * idx + 1
    if left >= n:
      break
    smaller = left
    right = left + 1
    if right < n and compare(heap[right], heap[left]) < 0:
      smaller = right
    if compare(heap[smaller], heap[idx]) >= 0:
      break
    heap[idx], heap[smaller] = heap[smaller], heap[idx]
    idx = smaller


# -----------------------------
# Pure helpers
# -----------------------------
def sift_up(values: Sequence[T], compare: Comparator) -> List[T]:
  """Return a copy of `values` with its last element moved up into place."""
  heap = list(values)
  _sift_up_inplace(heap, compare, len(heap) - 1)
  return heap


def sift_down(values: Sequence[T], compare: Comparator, index: int = 0) -> List[T]:
  """Return a copy of `values` with the element at `index` moved down into place."""
  heap = list(values)
  if heap:
    _sift_down_inplace(heap, compare, index)
  return heap


def add_value(values: Sequence[T], value: T, compare: Comparator) -> List[T]:
  """Append `value` and sift it up. `values` is left unchanged."""
  heap = list(values)
  heap.append(value)
  _sift_up_inplace(heap, compare, len(heap) - 1)
  return heap


def extract_min(values: Sequence[T], compare: Comparator) -> Tuple[Optional[T], List[T]]:
  """Split off the root.

  Returns
  -------
  tuple[T | None, list[T]]
      The minimum (or `None` when `values` is empty) and the repaired remainder:
      the last element is moved to the root and sifted down.
  """
  if not values:
    return None, []
  heap = list(values)
  top = heap[0]
  last = heap.pop()
  if heap:
    heap[0] = last
    _sift_down_inplace(heap, compare, 0)
  return top, heap


def heapify(values: Iterable[T], compare: Comparator) -> List[T]:
  """Bulk re-heapify a copy of `values` bottom-up in O(n)."""
  heap = list(values)
  for i in reversed(range(len(heap) // 2)):
    _sift_down_inplace(heap, compare, i)
  return heap


class MinHeap(Generic[T]):
  """Holder for the latest heap snapshot and its comparator.

  Parameters
  ----------
  initial_values : Iterable[T] | None
      Values inserted one at a time (not bulk-heapified) at construction.
  comparator : Callable[[T, T], int] | None
      Required unless every initial value is a number or every one is a string.

  Raises
  ------
  HeapConfigurationError
      When no comparator is given and none can be inferred.
  """

  __slots__ = ("_values", "_compare")

  def __init__(self, initial_values: Optional[Iterable[T]] = None,
               comparator: Optional[Comparator] = None) -> None:
    initial = list(initial_values) if initial_values is not None else []

    if comparator is None:
      comparator = default_comparator(initial)
      if comparator is None:
        raise HeapConfigurationError(
          "unable to determine a default comparator; pass `comparator` "
          "for values that are not all numbers or all strings")
    elif not callable(comparator):
      raise HeapConfigurationError(f"comparator must be callable, got {type(comparator).__name__}")

    self._compare: Comparator = comparator

    heap: List[T] = []
    for value in initial:
      heap.append(value)
      _sift_up_inplace(heap, comparator, len(heap) - 1)
    self._values: List[T] = heap

  @property
  def values(self) -> List[T]:
    """The current snapshot. Never mutated after it is published."""
    return self._values

  @property
  def comparator(self) -> Comparator:
    return self._compare

  def add(self, value: T) -> List[T]:
    try:
      self._values = add_value(self._values, value, self._compare)
    except TypeError as exc:
      raise HeapConfigurationError(
        f"comparator cannot order {type(value).__name__} values; "
        f"pass `comparator` when building the heap ({exc})") from exc
    logger.debug("heap add %r -> size %d", value, len(self._values))
    return self._values

  def extract_min(self) -> Optional[T]:
    """Remove and return the smallest value, or `None` if empty."""
    top, self._values = extract_min(self._values, self._compare)
    logger.debug("heap extract_min -> %r (size %d)", top, len(self._values))
    return top

  get = extract_min

  def peek(self) -> Optional[T]:
    return self._values[0] if self._values else None

  def heapify(self, values: Iterable[T]) -> List[T]:
    """Replace the contents with a re-heapified copy of `values`."""
    self._values = heapify(values, self._compare)
    logger.debug("heap heapify -> size %d", len(self._values))
    return self._values

  def clear(self) -> List[T]:
    self._values = []
    logger.debug("heap cleared")
    return self._values

  def dump(self) -> List[T]:
    """Return the underlying list (heap order, not sorted order)."""
    return self._values

  def __len__(self) -> int:
    return len(self._values)

  def __bool__(self) -> bool:
    return bool(self._values)

  def __iter__(self) -> Iterator[T]:
    # Heap order, not sorted order
    return iter(self._values)

  def __repr__(self) -> str:
    return f"MinHeap({self._values!r})"
