from .errors import HeapConfigurationError, HeapError
from .min_heap import MinHeap, add_value, default_comparator, extract_min, heapify, natural_order

__all__ = [
    "MinHeap",
    "add_value",
    "extract_min",
    "heapify",
    "default_comparator",
    "natural_order",
    "HeapError",
    "HeapConfigurationError",
]
