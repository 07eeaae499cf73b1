"""Tests for the reader/writer lock guarding store state.

Run with: pytest tests/test_locks.py -v
"""

import threading
import time

import pytest

from agenda.stores.locks import ReadWriteLock

TIMEOUT = 5


class TestReadWriteLock:
    """Tests for ReadWriteLock."""

    def test_readers_share_the_lock(self):
        """Two readers can hold the lock at the same time."""
        lock = ReadWriteLock()
        barrier = threading.Barrier(2, timeout=TIMEOUT)
        results = []

        def reader():
            with lock.read_locked():
                barrier.wait()
                results.append(True)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(TIMEOUT)

        assert results == [True, True]

    def test_writer_excludes_readers(self):
        """A reader waits until the writer releases."""
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        lock.acquire_write()
        thread = threading.Thread(target=reader)
        thread.start()
        assert not acquired.wait(0.2)

        lock.release_write()
        assert acquired.wait(TIMEOUT)
        thread.join(TIMEOUT)

    def test_writer_waits_for_readers(self):
        """A writer waits until every reader releases."""
        lock = ReadWriteLock()
        acquired = threading.Event()

        def writer():
            with lock.write_locked():
                acquired.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()
        assert not acquired.wait(0.2)

        lock.release_read()
        assert acquired.wait(TIMEOUT)
        thread.join(TIMEOUT)

    def test_waiting_writer_blocks_new_readers(self):
        """Once a writer is queued, later readers wait behind it."""
        lock = ReadWriteLock()
        order = []
        writer_done = threading.Event()
        reader_done = threading.Event()

        def writer():
            with lock.write_locked():
                order.append("writer")
            writer_done.set()

        def late_reader():
            with lock.read_locked():
                order.append("reader")
            reader_done.set()

        lock.acquire_read()
        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        # Give the writer time to register as waiting.
        for _ in range(100):
            if lock._writers_waiting:
                break
            time.sleep(0.01)
        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        assert not reader_done.wait(0.2)

        lock.release_read()
        assert writer_done.wait(TIMEOUT)
        assert reader_done.wait(TIMEOUT)
        writer_thread.join(TIMEOUT)
        reader_thread.join(TIMEOUT)
        assert order == ["writer", "reader"]

    def test_unbalanced_release_raises(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()
