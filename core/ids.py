import threading


class IdAllocator:
    """Monotonic id source. Every call returns a larger id than the last."""

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        with self._lock:
            return self._next


# process-wide, never reset
allocator = IdAllocator()


def next_id() -> int:
    return allocator.next_id()
