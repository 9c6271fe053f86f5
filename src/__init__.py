from src.dary_heap.dary_heap import MAX_CAPACITY, DAryHeap
from src.dary_heap.errors import (
    CapacityExceeded,
    DatasetError,
    HeapError,
    IndexOutOfRange,
    InvalidConfiguration,
    InvalidKey,
    KeyNotIncreasing,
    KeyOutOfRange,
    Overflow,
    Underflow,
)
from src.dary_heap.loader import MAX_DATASETS, load_datasets
