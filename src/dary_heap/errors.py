class HeapError(Exception):
    """Base class for every failure raised by the heap and its loader."""


class InvalidConfiguration(HeapError, ValueError):
    """Branching factor below 1 or capacity outside ``[1, MAX_CAPACITY]``."""


class CapacityExceeded(HeapError, ValueError):
    """Initial sequence longer than the heap can hold."""


class Overflow(HeapError, RuntimeError):
    """Insert attempted on a full heap."""


class Underflow(HeapError, RuntimeError):
    """Read or removal of the maximum attempted on an empty heap."""


class IndexOutOfRange(HeapError, IndexError):
    """Index outside ``[0, size)``."""


class KeyNotIncreasing(HeapError, ValueError):
    """``increase_key`` called with a key smaller than the current one."""


class DatasetError(HeapError, OSError):
    """Dataset file could not be opened or read."""


class InvalidKey(HeapError, TypeError):
    """Key that is not an integer, such as a float or a string."""


class KeyOutOfRange(HeapError, OverflowError):
    """Integer key that does not fit in a signed 64-bit integer."""
