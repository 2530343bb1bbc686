"""
This file contains a reader/writer lock used to guard the swarm-wide global best.
"""
import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    A lock admitting either any number of concurrent readers or a single writer.

    Writers are preferred: as soon as a writer is waiting, new readers block until it has finished, so a steady stream
    of readers cannot starve it. The lock is not reentrant; a thread holding the read lock must not try to acquire
    the write lock.

    Methods
    -------
    acquire_read()
        Acquire the shared lock.
    release_read()
        Release the shared lock.
    acquire_write()
        Acquire the exclusive lock.
    release_write()
        Release the exclusive lock.
    read_locked()
        Context manager holding the shared lock.
    write_locked()
        Context manager holding the exclusive lock.
    """

    def __init__(self) -> None:
        """Initialize an unlocked reader/writer lock."""
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0  # Number of threads currently holding the shared lock
        self._writer = False  # Whether a thread currently holds the exclusive lock
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Block until no writer holds or waits for the lock, then register as reader."""
        with self._condition:
            while self._writer or self._waiting_writers > 0:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Unregister as reader and wake up waiting writers once the last reader is gone."""
        with self._condition:
            if self._readers == 0:
                raise RuntimeError("Cannot release a read lock that is not held.")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        """Block until neither readers nor another writer hold the lock, then take it exclusively."""
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers > 0:
                    self._condition.wait()
            except BaseException:
                self._waiting_writers -= 1
                self._condition.notify_all()  # Readers may be parked on this writer only.
                raise
            self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        """Release the exclusive lock and wake up everybody waiting."""
        with self._condition:
            if not self._writer:
                raise RuntimeError("Cannot release a write lock that is not held.")
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the shared lock for the duration of the ``with`` block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the exclusive lock for the duration of the ``with`` block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
