import threading
from contextlib import contextmanager
from weakref import WeakValueDictionary


class MaterialLocks:
    """Per material code mutual exclusion for read-modify-write sequences."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = WeakValueDictionary()

    def _lock_for(self, code: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(code)
            if lock is None:
                lock = threading.Lock()
                self._locks[code] = lock
            return lock

    @contextmanager
    def hold(self, code: str):
        lock = self._lock_for(code)
        with lock:
            yield


# shared by every service instance in this process
material_locks = MaterialLocks()
